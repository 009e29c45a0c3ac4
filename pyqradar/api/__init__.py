"""
Endpoint wrappers, one class per QRadar resource group.
"""

from .access import AccessEndpoint
from .analytics import AnalyticsEndpoint
from .ariel import ArielEndpoint
from .asset_model import AssetModelEndpoint
from .auth import AuthEndpoint
from .backup_and_restore import BackupAndRestoreEndpoint
from .base import Endpoint, PaginatedResponse
from .config import ConfigEndpoint
from .data_classification import DataClassificationEndpoint
from .disaster_recovery import DisasterRecoveryEndpoint
from .dynamic_search import DynamicSearchEndpoint
from .forensics import ForensicsEndpoint
from .gui_app_framework import GUIAppFrameworkEndpoint
from .health_data import HealthDataEndpoint
from .help import HelpEndpoint
from .reference_data import ReferenceDataEndpoint
from .siem import SIEMEndpoint

__all__ = [
    "AccessEndpoint",
    "AnalyticsEndpoint",
    "ArielEndpoint",
    "AssetModelEndpoint",
    "AuthEndpoint",
    "BackupAndRestoreEndpoint",
    "ConfigEndpoint",
    "DataClassificationEndpoint",
    "DisasterRecoveryEndpoint",
    "DynamicSearchEndpoint",
    "Endpoint",
    "ForensicsEndpoint",
    "GUIAppFrameworkEndpoint",
    "HealthDataEndpoint",
    "HelpEndpoint",
    "PaginatedResponse",
    "ReferenceDataEndpoint",
    "SIEMEndpoint",
]
