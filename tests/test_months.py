# tests/test_months.py

import pytest

from luach import CalendarValidationError, HebrewMonth


def test_civil_values():
    assert HebrewMonth.TISHRI.civil_value(False) == 1
    assert HebrewMonth.ADAR_II.civil_value(False) == 6
    assert HebrewMonth.ELUL.civil_value(False) == 12
    assert HebrewMonth.ADAR_II.civil_value(True) == 7
    assert HebrewMonth.ELUL.civil_value(True) == 13
    with pytest.raises(CalendarValidationError):
        HebrewMonth.ADAR_I.civil_value(False)


def test_biblical_values():
    assert HebrewMonth.NISAN.biblical_value(True) == 1
    assert HebrewMonth.NISAN.biblical_value(False) == 1
    assert HebrewMonth.TISHRI.biblical_value(False) == 7
    assert HebrewMonth.ADAR_I.biblical_value(True) == 12
    assert HebrewMonth.ADAR_II.biblical_value(True) == 13
    # with leap=False the leap month and its successor share ordinal 12
    assert HebrewMonth.ADAR_I.biblical_value(False) == 12
    assert HebrewMonth.ADAR_II.biblical_value(False) == 12


@pytest.mark.parametrize("leap", [True, False])
def test_ordinals_invert(leap):
    top = 13 if leap else 12
    for v in range(1, top + 1):
        assert HebrewMonth.of_civil(v, leap).civil_value(leap) == v
        assert HebrewMonth.of_biblical(v, leap).biblical_value(leap) == v


def test_of_biblical_last_month():
    assert HebrewMonth.of_biblical(12, False) is HebrewMonth.ADAR_II
    assert HebrewMonth.of_biblical(12, True) is HebrewMonth.ADAR_I
    assert HebrewMonth.of_biblical(13, True) is HebrewMonth.ADAR_II


@pytest.mark.parametrize("value,leap", [(0, True), (14, True), (13, False)])
def test_bad_ordinals(value, leap):
    with pytest.raises(CalendarValidationError):
        HebrewMonth.of_civil(value, leap)
    with pytest.raises(CalendarValidationError):
        HebrewMonth.of_biblical(value, leap)


def test_parse():
    assert HebrewMonth.parse("adar i") is HebrewMonth.ADAR_I
    assert HebrewMonth.parse("Nisan") is HebrewMonth.NISAN
    with pytest.raises(CalendarValidationError):
        HebrewMonth.parse("Marheshvan")
