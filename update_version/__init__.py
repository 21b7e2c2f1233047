"""Update the version attribute of .NET source files."""

from .errors import UpdateVersionError, FormatError, InvalidConfiguration, VersionOverflowError
from .models import VersionValue
from .schemas import BuildNumberType, RevisionNumberType, VersionType, CalculationConfig
from .services import VersionCalculator, VersionUpdater, UpdateResult, update_version_text

__all__ = [
    "UpdateVersionError", "FormatError", "InvalidConfiguration", "VersionOverflowError",
    "VersionValue",
    "BuildNumberType", "RevisionNumberType", "VersionType", "CalculationConfig",
    "VersionCalculator", "VersionUpdater", "UpdateResult", "update_version_text",
]
