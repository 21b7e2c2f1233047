from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import ValidationError, ValidationInfo, field_validator, model_validator

from update_version.errors import InvalidConfiguration
from update_version.models.version import VersionValue
from update_version.schemas.base import BaseSchema
from update_version.utils.clock import Clock, SystemClock, today

logger = logging.getLogger("update_version")


class _NamedChoice(str, Enum):
    """Enum whose members can be looked up by name, ignoring case."""

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        return None


class BuildNumberType(_NamedChoice):
    """Algorithm used to calculate the new build number."""
    FIXED = "Fixed"
    INCREMENT = "Increment"
    MONTH_DAY = "MonthDay"
    YEAR_DAY_OF_YEAR = "YearDayOfYear"

    @classmethod
    def _missing_(cls, value: object):
        # "BuildDay" is the name shown in the usage text
        if isinstance(value, str) and value.strip().lower() == "buildday":
            return cls.YEAR_DAY_OF_YEAR
        return super()._missing_(value)


class RevisionNumberType(_NamedChoice):
    """Algorithm used to calculate the new revision number."""
    AUTOMATIC = "Automatic"
    INCREMENT = "Increment"
    FIXED = "Fixed"


class VersionType(_NamedChoice):
    """Which version attribute to look for."""
    ASSEMBLY = "Assembly"
    FILE = "File"

    @property
    def attribute_name(self) -> str:
        if self is VersionType.FILE:
            return "AssemblyFileVersion"
        return "AssemblyVersion"


class CalculationConfig(BaseSchema):
    """
    Resolved options for one update.

    ``None`` means the option was not given. A MonthDay build type without a
    start date falls back to Fixed.
    """
    start_date: Optional[date] = None
    build_type: BuildNumberType = BuildNumberType.FIXED
    revision_type: RevisionNumberType = RevisionNumberType.AUTOMATIC
    pin_version: Optional[VersionValue] = None
    version_type: VersionType = VersionType.ASSEMBLY

    @property
    def is_pinned(self) -> bool:
        return self.pin_version is not None

    @model_validator(mode="before")
    @classmethod
    def _fall_back_without_start_date(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("start_date") is not None:
            return data
        build_type = data.get("build_type")
        try:
            build_type = BuildNumberType(build_type) if build_type is not None else None
        except ValueError:
            # Reported by the field validator
            return data
        if build_type is BuildNumberType.MONTH_DAY:
            logger.warning("[CalculationConfig] MonthDay build numbers need a start date; using Fixed instead")
            data = {**data, "build_type": BuildNumberType.FIXED}
        return data

    @field_validator("build_type", mode="before")
    @classmethod
    def _parse_build_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return BuildNumberType(value)
        return value

    @field_validator("revision_type", mode="before")
    @classmethod
    def _parse_revision_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return RevisionNumberType(value)
        return value

    @field_validator("version_type", mode="before")
    @classmethod
    def _parse_version_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return VersionType(value)
        return value

    @field_validator("pin_version", mode="before")
    @classmethod
    def _parse_pin_version(cls, value: Any) -> Any:
        if isinstance(value, str):
            return VersionValue.parse(value)
        return value

    @field_validator("start_date")
    @classmethod
    def _start_date_not_in_future(cls, value: Optional[date], info: ValidationInfo) -> Optional[date]:
        if value is None:
            return value
        now = (info.context or {}).get("today") or date.today()
        if value > now:
            raise ValueError(f"The start date {value.isoformat()} can not be after today's date ({now.isoformat()})")
        return value

    @classmethod
    def resolve(cls, clock: Optional[Clock] = None, **options: Any) -> "CalculationConfig":
        """
        Build a configuration, checking it against the clock's current date.

        Args:
            clock: Clock used to reject start dates in the future
            **options: Field values; enum fields and ``pin_version`` accept text

        Returns:
            The validated configuration

        Raises:
            InvalidConfiguration: If any option is invalid
        """
        clock = clock or SystemClock()
        try:
            return cls.model_validate(options, context={"today": today(clock)})
        except ValidationError as exc:
            raise InvalidConfiguration(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)
