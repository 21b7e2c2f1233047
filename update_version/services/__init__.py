from .calculator import VersionCalculator, calculate_version
from .updater import VersionUpdater, UpdateResult, VersionMatch, find_version, substitute, update_version_text

__all__ = [
    "VersionCalculator", "calculate_version",
    "VersionUpdater", "UpdateResult", "VersionMatch", "find_version", "substitute", "update_version_text",
]
