"""
Core utilities for pyqradar.

This package holds:
- configuration loading (`config.py`, `config_storage.py`)
- shared error types (`errors.py`)
- logging helpers (`logging.py`)
- the DTO base class (`dto.py`)
"""
