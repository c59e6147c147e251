# tests/test_anniversary.py

import random
from datetime import date

import pytest

import luach
from luach import Anniversary, GregorianDate, HebrewDate, HebrewMonth
from luach.engines import hebrew_year as hy
from luach.engines.calendar import hebrew_from_jdn

BIRTHDAY = Anniversary.BIRTHDAY
YAHRZEIT = Anniversary.YAHRZEIT

H = HebrewDate
M = HebrewMonth


def _random_dates(n, seed):
    random.seed(seed)
    lo, hi = hy.new_year_jdn(5600), hy.new_year_jdn(5900)
    return [hebrew_from_jdn(random.randint(lo, hi)) for _ in range(n)]


# ---------------------------------------------------------
# BIRTHDAY
# ---------------------------------------------------------

def test_bar_mitzvah_of_30_adar_i():
    birth = H(5776, M.ADAR_I, 30)
    assert BIRTHDAY.in_hebrew_year(birth, 5789) == H(5789, M.NISAN, 1)
    assert luach.bar_mitzvah(birth) == H(5789, M.NISAN, 1)


def test_birthday_adar_ii_goes_to_last_adar():
    assert BIRTHDAY.in_hebrew_year(H(5784, M.ADAR_II, 14), 5785) == H(5785, M.ADAR_II, 14)
    # Adar of a common year becomes Adar II of a leap year
    assert BIRTHDAY.in_hebrew_year(H(5785, M.ADAR_II, 14), 5787) == H(5787, M.ADAR_II, 14)


def test_birthday_adar_i():
    assert BIRTHDAY.in_hebrew_year(H(5784, M.ADAR_I, 10), 5787) == H(5787, M.ADAR_I, 10)
    assert BIRTHDAY.in_hebrew_year(H(5784, M.ADAR_I, 10), 5785) == H(5785, M.ADAR_II, 10)
    assert BIRTHDAY.in_hebrew_year(H(5784, M.ADAR_I, 30), 5785) == H(5785, M.NISAN, 1)


def test_birthday_30th_rolls_forward():
    assert BIRTHDAY.in_hebrew_year(H(5785, M.HESHVAN, 30), 5786) == H(5786, M.KISLEV, 1)
    assert BIRTHDAY.in_hebrew_year(H(5783, M.KISLEV, 30), 5784) == H(5784, M.TEVET, 1)
    assert BIRTHDAY.in_hebrew_year(H(5783, M.KISLEV, 30), 5785) == H(5785, M.KISLEV, 30)


def test_birthday_keeps_month_when_leap_status_agrees():
    for event in _random_dates(500, seed=11):
        if event.day > 29:
            continue
        for target in (event.year + 19, event.year + 38):
            assert hy.is_leap_year(target) == hy.is_leap_year(event.year)
            out = BIRTHDAY.in_hebrew_year(event, target)
            assert out.month is event.month
            assert out.day == event.day


# ---------------------------------------------------------
# YAHRZEIT
# ---------------------------------------------------------

def test_yahrzeit_long_heshvan_followed_by_short_one():
    # 5785 is complete, 5786 has a 29-day Heshvan
    event = H(5785, M.HESHVAN, 30)
    assert YAHRZEIT.in_hebrew_year(event, 5786) == H(5786, M.HESHVAN, 29)
    assert YAHRZEIT.in_hebrew_year(event, 5786) == H(5786, M.KISLEV, 1).minus_days(1)
    assert YAHRZEIT.in_hebrew_year(event, 5783) == H(5783, M.HESHVAN, 30)


def test_yahrzeit_long_kislev_followed_by_short_one():
    # 5783 is complete, 5784 is deficient
    event = H(5783, M.KISLEV, 30)
    assert YAHRZEIT.in_hebrew_year(event, 5784) == H(5784, M.KISLEV, 29)
    assert YAHRZEIT.in_hebrew_year(event, 5785) == H(5785, M.KISLEV, 30)


def test_yahrzeit_adar_ii_of_leap_year():
    event = H(5784, M.ADAR_II, 14)
    assert YAHRZEIT.in_hebrew_year(event, 5785) == H(5785, M.ADAR_II, 14)
    assert YAHRZEIT.in_hebrew_year(event, 5787) == H(5787, M.ADAR_II, 14)


def test_yahrzeit_adar_of_common_year_goes_to_adar_i():
    assert YAHRZEIT.in_hebrew_year(H(5785, M.ADAR_II, 14), 5787) == H(5787, M.ADAR_I, 14)


def test_yahrzeit_leap_month():
    event = H(5784, M.ADAR_I, 10)
    assert YAHRZEIT.in_hebrew_year(event, 5787) == H(5787, M.ADAR_I, 10)
    assert YAHRZEIT.in_hebrew_year(event, 5785) == H(5785, M.ADAR_II, 10)


def test_yahrzeit_30_adar_i_in_common_year():
    event = H(5784, M.ADAR_I, 30)
    assert YAHRZEIT.in_hebrew_year(event, 5785) == H(5785, M.SHEVAT, 30)
    assert YAHRZEIT.in_hebrew_year(event, 5787) == H(5787, M.ADAR_I, 30)


def test_yahrzeit_never_exceeds_month_length():
    for event in _random_dates(400, seed=5):
        for target in range(event.year + 1, event.year + 20):
            out = YAHRZEIT.in_hebrew_year(event, target)
            assert out.year == target
            assert 1 <= out.day <= hy.month_length(target, out.month)


def test_resolve_accepts_gregorian_events():
    # 2024-10-03 is 1 Tishri 5785
    assert luach.resolve_anniversary("yahrzeit", date(2024, 10, 3), 5790) == H(5790, M.TISHRI, 1)
    assert luach.resolve_anniversary(BIRTHDAY, GregorianDate(2024, 10, 3), 5790) == H(5790, M.TISHRI, 1)


def test_rule_parse():
    assert Anniversary.parse("Yahrzeit") is YAHRZEIT
    assert Anniversary.parse(BIRTHDAY) is BIRTHDAY
    with pytest.raises(KeyError):
        Anniversary.parse("wedding")


# ---------------------------------------------------------
# Gregorian-year projection
# ---------------------------------------------------------

def test_two_anniversaries_in_one_gregorian_year():
    event = H(5700, M.TEVET, 1)
    assert luach.anniversaries_in_gregorian_year(BIRTHDAY, event, 2025) == [
        GregorianDate(2025, 1, 1),
        GregorianDate(2025, 12, 21),
    ]


def test_no_anniversary_in_a_gregorian_year():
    event = H(5700, M.TEVET, 1)
    assert luach.anniversaries_in_gregorian_year(BIRTHDAY, event, 2024) == []


def test_single_anniversary():
    # 15 Nisan 5784 = 2024-04-23
    dates = YAHRZEIT.in_gregorian_year(date(2024, 4, 23), 2030)
    assert len(dates) == 1
    assert luach.to_hebrew(dates[0]) == H(5790, M.NISAN, 15)


@pytest.mark.parametrize("rule", [BIRTHDAY, YAHRZEIT])
def test_projection_cardinality_and_order(rule):
    events = _random_dates(60, seed=17)
    for event in events:
        for gy in range(2000, 2040):
            dates = rule.in_gregorian_year(event, gy)
            assert 0 <= len(dates) <= 2
            assert all(d.year == gy for d in dates)
            if len(dates) == 2:
                assert dates[0] < dates[1]


def test_projection_at_end_of_supported_span():
    # AM 9999 ends in Gregorian 6239; AM 10000 is never consulted
    event = H(9990, M.NISAN, 1)
    expected = luach.to_gregorian(H(9999, M.NISAN, 1))
    assert expected.year == 6239
    assert luach.anniversaries_in_gregorian_year("birthday", event, 6239) == [expected]
    assert YAHRZEIT.in_gregorian_year(event, 6239) == [expected]


def test_projection_at_start_of_supported_span():
    # Gregorian -3760 opens in AM 0, outside the span
    event = H(1, M.TISHRI, 1)
    expected = luach.to_gregorian(event)
    assert expected.year == -3760
    assert luach.anniversaries_in_gregorian_year("birthday", event, -3760) == [expected]
    assert YAHRZEIT.in_gregorian_year(event, -3760) == [expected]
