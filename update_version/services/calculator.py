"""
Calculates new version numbers.

The major and minor numbers never change. The build and revision numbers are
derived from the original version, the current date and time, and the
algorithms selected in a CalculationConfig. A pinned version replaces the
whole result.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from update_version.errors import VersionOverflowError
from update_version.models.version import MAX_COMPONENT, VersionValue
from update_version.schemas.options import BuildNumberType, CalculationConfig, RevisionNumberType
from update_version.utils.clock import Clock, SystemClock

logger = logging.getLogger("update_version")


class VersionCalculator:
    """Calculator for new version numbers."""

    def __init__(self, config: CalculationConfig, clock: Optional[Clock] = None) -> None:
        self.config = config
        self.clock = clock or SystemClock()

    def calculate(self, original: VersionValue) -> VersionValue:
        """
        Calculate the version that replaces ``original``.

        Args:
            original: Version found in the input

        Returns:
            The new version, or the pinned version when one is configured

        Raises:
            VersionOverflowError: If an increment goes past MAX_COMPONENT
        """
        if self.config.pin_version is not None:
            logger.debug("[VersionCalculator] Version pinned to %s", self.config.pin_version)
            return self.config.pin_version

        # Read the clock once so build and revision agree on "now"
        now = self.clock.now()
        return VersionValue(
            major=original.major,
            minor=original.minor,
            build=self.build_number(original, now),
            revision=self.revision_number(original, now),
        )

    def build_number(self, original: VersionValue, now: datetime) -> int:
        build_type = self.config.build_type

        if build_type is BuildNumberType.FIXED:
            return original.build

        if build_type is BuildNumberType.INCREMENT:
            return _increment(original.build, "build")

        if build_type is BuildNumberType.MONTH_DAY:
            start = self.config.start_date
            if start is None:
                # CalculationConfig already downgrades this case
                return original.build
            months = (now.year - start.year) * 12 + (now.month - start.month)
            return months * 100 + now.day

        if build_type is BuildNumberType.YEAR_DAY_OF_YEAR:
            # Last digit of the year followed by the three digit day of the year
            return int(f"{now.year % 10:02d}{now.timetuple().tm_yday:03d}")

        raise ValueError(f"Unknown build number type: {build_type!r}")

    def revision_number(self, original: VersionValue, now: datetime) -> int:
        revision_type = self.config.revision_type

        if revision_type is RevisionNumberType.FIXED:
            return original.revision

        if revision_type is RevisionNumberType.INCREMENT:
            return _increment(original.revision, "revision")

        if revision_type is RevisionNumberType.AUTOMATIC:
            midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
            return int((now - midnight).total_seconds() // 10)

        raise ValueError(f"Unknown revision number type: {revision_type!r}")


def _increment(value: int, name: str) -> int:
    if value >= MAX_COMPONENT:
        raise VersionOverflowError(f"Can not increment the {name} number past {MAX_COMPONENT}")
    return value + 1


def calculate_version(
    original: VersionValue,
    config: CalculationConfig,
    clock: Optional[Clock] = None,
) -> VersionValue:
    """Shortcut for ``VersionCalculator(config, clock).calculate(original)``."""
    return VersionCalculator(config, clock).calculate(original)
