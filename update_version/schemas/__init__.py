from .base import BaseSchema
from .options import BuildNumberType, RevisionNumberType, VersionType, CalculationConfig

__all__ = [
    "BaseSchema",
    "BuildNumberType", "RevisionNumberType", "VersionType", "CalculationConfig",
]
