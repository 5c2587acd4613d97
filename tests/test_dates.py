from datetime import date, datetime, time

from voiceplan.nlp.dates import add_months, extract_date_time, extract_time, next_weekday

MONDAY = datetime(2024, 5, 13, 9, 0)


def test_relative_days():
    assert extract_date_time("hoy", MONDAY) == (date(2024, 5, 13), None)
    assert extract_date_time("tomorrow", MONDAY) == (date(2024, 5, 14), None)
    assert extract_date_time("pasado mañana", MONDAY) == (date(2024, 5, 15), None)
    assert extract_date_time("the day after tomorrow", MONDAY) == (date(2024, 5, 15), None)
    assert extract_date_time("próxima semana", MONDAY) == (date(2024, 5, 20), None)
    assert extract_date_time("next month", MONDAY) == (date(2024, 6, 13), None)


def test_weekday_never_same_day():
    assert extract_date_time("el lunes", MONDAY) == (date(2024, 5, 20), None)
    assert extract_date_time("friday", MONDAY) == (date(2024, 5, 17), None)
    assert extract_date_time("el domingo", MONDAY) == (date(2024, 5, 19), None)
    assert next_weekday(date(2024, 5, 17), 0) == date(2024, 5, 20)


def test_add_months_clamps_day():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)


def test_short_hour_convention():
    assert extract_date_time("a las 3", MONDAY) == (date(2024, 5, 13), time(15, 0))
    assert extract_time("a las 14") == time(14, 0)
    assert extract_time("a las 8") == time(8, 0)
    assert extract_time("at 7") == time(19, 0)
    assert extract_time("a la 1") == time(13, 0)


def test_meridiem_suffix_does_not_change_hour():
    assert extract_time("at 6 am") == time(18, 0)
    assert extract_time("at 9pm") == time(9, 0)


def test_short_hour_after_other_spanish_prepositions():
    assert extract_date_time("entregar el informe para las 5", MONDAY) == (date(2024, 5, 13), time(17, 0))
    assert extract_time("trabajar hasta las 6") == time(18, 0)


def test_clock_time():
    assert extract_date_time("standup 17:45", MONDAY) == (date(2024, 5, 13), time(17, 45))
    assert extract_date_time("mañana 9:05", MONDAY) == (date(2024, 5, 14), time(9, 5))


def test_short_hour_checked_before_clock():
    assert extract_time("a las 3:30") == time(15, 0)


def test_unparseable_time_is_ignored():
    assert extract_date_time("a las 25", MONDAY) == (None, None)
    assert extract_date_time("nota 25:99", MONDAY) == (None, None)
    assert extract_time("call that 10 times") is None
    assert extract_time("a las 123") is None
    assert extract_date_time("comprar pan", MONDAY) == (None, None)
