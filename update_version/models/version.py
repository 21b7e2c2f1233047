from __future__ import annotations

import re
from functools import total_ordering
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from update_version.errors import FormatError

# Largest value a version component can hold (signed 32-bit).
MAX_COMPONENT = 2**31 - 1

VERSION_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)\.([0-9]+)")


@total_ordering
class VersionValue(BaseModel):
    """
    Version number made of four non-negative integers.

    Values are immutable and compare component by component, in the order
    major, minor, build, revision.
    """
    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0, le=MAX_COMPONENT)
    minor: int = Field(ge=0, le=MAX_COMPONENT)
    build: int = Field(ge=0, le=MAX_COMPONENT)
    revision: int = Field(ge=0, le=MAX_COMPONENT)

    @classmethod
    def parse(cls, text: str) -> "VersionValue":
        """
        Parse a dotted version such as ``1.0.2.37``.

        Args:
            text: Four runs of decimal digits separated by dots

        Returns:
            The parsed VersionValue

        Raises:
            FormatError: If the text has another shape or a component is too large
        """
        if not isinstance(text, str):
            raise FormatError(f"Expected a version string, got {type(text).__name__}")
        match = VERSION_PATTERN.fullmatch(text.strip())
        if not match:
            raise FormatError(
                f"'{text}' is not a version number in the form major.minor.build.revision"
            )
        major, minor, build, revision = (int(part) for part in match.groups())
        for name, value in (("major", major), ("minor", minor), ("build", build), ("revision", revision)):
            if value > MAX_COMPONENT:
                raise FormatError(f"The {name} number in '{text}' is larger than {MAX_COMPONENT}")
        return cls(major=major, minor=minor, build=build, revision=revision)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.build, self.revision)

    def format(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"

    def __str__(self) -> str:
        return self.format()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionValue):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()
