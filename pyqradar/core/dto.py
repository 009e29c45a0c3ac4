"""
Dataclass base for the values pyqradar defines itself.

QRadar resource documents (offenses, assets, log sources, ...) are passed
through as decoded JSON and are not modelled. Only SDK-level results, such
as a page of a list operation, are DTOs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Type, TypeVar


T_BaseDTO = TypeVar("T_BaseDTO", bound="BaseDTO")


@dataclass
class BaseDTO:
    def to_dict(self) -> Dict[str, Any]:
        """Plain (recursive) dict of the dataclass fields."""
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[T_BaseDTO], data: Dict[str, Any]) -> T_BaseDTO:
        """
        Build the DTO from ``data``, ignoring keys that are not fields.

        QRadar adds attributes between API versions; unknown keys are dropped
        rather than rejected.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})
