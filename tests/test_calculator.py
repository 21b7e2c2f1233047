from datetime import date, datetime

import pytest

from update_version.errors import VersionOverflowError
from update_version.models.version import MAX_COMPONENT, VersionValue
from update_version.schemas import BuildNumberType, CalculationConfig, RevisionNumberType
from update_version.services.calculator import VersionCalculator, calculate_version
from update_version.utils.clock import FixedClock, SystemClock

ORIGINAL = VersionValue.parse("1.2.3.4")


def make_config(**options):
    options.setdefault("build_type", BuildNumberType.FIXED)
    options.setdefault("revision_type", RevisionNumberType.FIXED)
    return CalculationConfig(**options)


def at(*args):
    return FixedClock(datetime(*args))


def test_fixed_keeps_original_version():
    calculator = VersionCalculator(make_config(), at(2007, 2, 17, 12, 0, 0))
    assert calculator.calculate(ORIGINAL) == ORIGINAL


def test_major_and_minor_never_change():
    config = make_config(
        start_date=date(2000, 1, 1),
        build_type=BuildNumberType.MONTH_DAY,
        revision_type=RevisionNumberType.AUTOMATIC,
    )
    new = calculate_version(ORIGINAL, config, at(2007, 2, 17, 12, 0, 0))
    assert (new.major, new.minor) == (1, 2)


def test_increment_build():
    new = calculate_version(ORIGINAL, make_config(build_type=BuildNumberType.INCREMENT), at(2007, 2, 17))
    assert new == VersionValue(major=1, minor=2, build=4, revision=4)


def test_increment_revision():
    new = calculate_version(ORIGINAL, make_config(revision_type=RevisionNumberType.INCREMENT), at(2007, 2, 17))
    assert new == VersionValue(major=1, minor=2, build=3, revision=5)


def test_month_day_in_start_month():
    """Teste para verificar MonthDay no mesmo mês da data inicial (0 meses * 100 + dia 23)."""
    config = make_config(start_date=date(2002, 11, 1), build_type=BuildNumberType.MONTH_DAY)
    new = calculate_version(ORIGINAL, config, at(2002, 11, 23, 9, 0, 0))
    assert new.build == 23


def test_month_day_across_years():
    # 2 years and -9 months after November 2002 is 15 months
    config = make_config(start_date=date(2002, 11, 20), build_type=BuildNumberType.MONTH_DAY)
    new = calculate_version(ORIGINAL, config, at(2004, 2, 5))
    assert new.build == 1505


def test_month_day_without_start_date_keeps_build():
    config = make_config(build_type=BuildNumberType.MONTH_DAY)
    assert config.build_type is BuildNumberType.FIXED
    assert calculate_version(ORIGINAL, config, at(2004, 2, 5)).build == 3


@pytest.mark.parametrize("moment, expected", [
    (datetime(2007, 2, 17), 7048),
    (datetime(2010, 1, 1), 1),
    (datetime(2009, 12, 31), 9365),
    (datetime(2012, 12, 31), 2366),
])
def test_year_day_of_year(moment, expected):
    config = make_config(build_type=BuildNumberType.YEAR_DAY_OF_YEAR)
    assert calculate_version(ORIGINAL, config, FixedClock(moment)).build == expected


@pytest.mark.parametrize("moment, expected", [
    (datetime(2002, 11, 23, 0, 0, 0), 0),
    (datetime(2002, 11, 23, 0, 0, 9), 0),
    (datetime(2002, 11, 23, 0, 0, 30), 3),
    (datetime(2002, 11, 23, 1, 0, 0), 360),
    (datetime(2002, 11, 23, 23, 59, 59, 999999), 8639),
])
def test_automatic_revision(moment, expected):
    config = make_config(revision_type=RevisionNumberType.AUTOMATIC)
    assert calculate_version(ORIGINAL, config, FixedClock(moment)).revision == expected


def test_pin_overrides_every_policy():
    config = make_config(
        pin_version=VersionValue.parse("1.2.3.4"),
        build_type=BuildNumberType.INCREMENT,
        revision_type=RevisionNumberType.AUTOMATIC,
    )
    new = calculate_version(VersionValue.parse("9.9.9.9"), config, at(2007, 2, 17, 10, 0, 0))
    assert new == VersionValue.parse("1.2.3.4")


def test_increment_past_largest_component_fails():
    original = VersionValue(major=1, minor=0, build=MAX_COMPONENT, revision=MAX_COMPONENT)
    with pytest.raises(VersionOverflowError):
        calculate_version(original, make_config(build_type=BuildNumberType.INCREMENT), at(2007, 2, 17))
    with pytest.raises(VersionOverflowError):
        calculate_version(original, make_config(revision_type=RevisionNumberType.INCREMENT), at(2007, 2, 17))


def test_increment_up_to_largest_component():
    original = VersionValue(major=1, minor=0, build=MAX_COMPONENT - 1, revision=0)
    new = calculate_version(original, make_config(build_type=BuildNumberType.INCREMENT), at(2007, 2, 17))
    assert new.build == MAX_COMPONENT


def test_clock_is_read_once():
    class CountingClock:
        calls = 0

        def now(self):
            self.calls += 1
            return datetime(2007, 2, 17, 0, 0, 30)

    clock = CountingClock()
    config = make_config(build_type=BuildNumberType.YEAR_DAY_OF_YEAR, revision_type=RevisionNumberType.AUTOMATIC)
    new = calculate_version(ORIGINAL, config, clock)
    assert (new.build, new.revision) == (7048, 3)
    assert clock.calls == 1


def test_system_clock_is_the_default():
    calculator = VersionCalculator(make_config())
    assert isinstance(calculator.clock, SystemClock)
