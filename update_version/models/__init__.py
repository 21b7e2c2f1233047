from .version import VersionValue, MAX_COMPONENT

__all__ = ["VersionValue", "MAX_COMPONENT"]
