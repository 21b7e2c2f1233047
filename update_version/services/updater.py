"""
Finds a version attribute in source text and rewrites it.

Two attributes are recognised, each with or without the ``Attribute`` suffix:

    AssemblyVersion("1.0.0.0")
    AssemblyFileVersion("1.0.0.0")

Only the quoted version of the first occurrence is replaced. The attribute
name, the whitespace inside the parentheses and every other byte of the input
are kept as they were.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from update_version.models.version import VersionValue
from update_version.schemas.options import CalculationConfig, VersionType
from update_version.services.calculator import VersionCalculator
from update_version.utils.clock import Clock

logger = logging.getLogger("update_version")

_VERSION_LITERAL = r'\(\s*?"(?P<version>[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)"\s*?\)'

PATTERNS = {
    VersionType.ASSEMBLY: re.compile(r"AssemblyVersion(?:Attribute)?" + _VERSION_LITERAL),
    VersionType.FILE: re.compile(r"AssemblyFileVersion(?:Attribute)?" + _VERSION_LITERAL),
}

NOT_FOUND_WARNING = "Version not found in input. Output equals input."


@dataclass(frozen=True)
class VersionMatch:
    """Location of the quoted version inside the input text."""
    version: str
    start: int
    end: int
    attribute: str


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of one update. ``matched`` is False when no attribute was found."""
    input: str
    output: str
    matched: bool
    original_version: Optional[VersionValue] = None
    new_version: Optional[VersionValue] = None

    @property
    def changed(self) -> bool:
        return self.output != self.input


def find_version(text: str, version_type: VersionType) -> Optional[VersionMatch]:
    """Return the first version attribute of the given kind, or None."""
    match = PATTERNS[version_type].search(text)
    if match is None:
        return None
    return VersionMatch(
        version=match.group("version"),
        start=match.start("version"),
        end=match.end("version"),
        attribute=match.group(0),
    )


def substitute(text: str, match: VersionMatch, new_version: VersionValue) -> str:
    """Replace the version literal at ``match`` and nothing else."""
    return text[:match.start] + new_version.format() + text[match.end:]


class VersionUpdater:
    """
    Updates the version attribute in a text.

    Pipeline: find the attribute, parse its version, calculate the new
    version, substitute it back.
    """

    def __init__(self, config: CalculationConfig, clock: Optional[Clock] = None) -> None:
        self.config = config
        self.calculator = VersionCalculator(config, clock)

    def update(self, text: str) -> UpdateResult:
        """
        Update the first matching version attribute in ``text``.

        Args:
            text: Input text, already decoded

        Returns:
            UpdateResult with the output text. When no attribute is found the
            output equals the input and a warning is logged.

        Raises:
            FormatError: If the matched version can not be parsed
            VersionOverflowError: If an incremented number is too large
        """
        match = find_version(text, self.config.version_type)
        if match is None:
            logger.warning(NOT_FOUND_WARNING)
            return UpdateResult(input=text, output=text, matched=False)

        original = VersionValue.parse(match.version)
        new_version = self.calculator.calculate(original)
        output = substitute(text, match, new_version)
        logger.info(
            "[VersionUpdater] %s: %s -> %s",
            self.config.version_type.attribute_name, original, new_version,
        )
        return UpdateResult(
            input=text,
            output=output,
            matched=True,
            original_version=original,
            new_version=new_version,
        )


def update_version_text(
    text: str,
    config: CalculationConfig,
    clock: Optional[Clock] = None,
) -> UpdateResult:
    """Shortcut for ``VersionUpdater(config, clock).update(text)``."""
    return VersionUpdater(config, clock).update(text)
