"""Exceptions raised while resolving options or updating a version.

A missing version attribute is not an error: see ``UpdateResult.matched``.
"""


class UpdateVersionError(Exception):
    """Base class for every failure raised by update_version."""


class FormatError(UpdateVersionError, ValueError):
    """A version string is not four dot-separated non-negative integers."""


class InvalidConfiguration(UpdateVersionError, ValueError):
    """The supplied options violate a configuration rule."""


class VersionOverflowError(UpdateVersionError, OverflowError):
    """An incremented component would exceed the largest allowed value."""
