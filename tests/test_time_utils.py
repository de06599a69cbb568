import pytest
from datetime import datetime

import pytz

from datez.time_utils import current_time, format_line, format_time, parse_time

EXPECTED = datetime(2021, 7, 21, 16, 0, 0)


@pytest.mark.parametrize("text", [
    "2021-07-21.16:00:00",
    "2021-07-21T16:00:00",
    "2021-07-21 16:00:00",
    "20210721160000",
    "20210721.160000",
    "20210721T160000",
    "20210721 160000",
    " 2021-07-21.16:00:00",
])
def test_parse_time_formats(text):
    assert parse_time(text) == EXPECTED


@pytest.mark.parametrize("text", [
    "",
    "bad",
    "3000:13:0034:34:33",
    "3000:13:00 34:34:33",
    "3000:13:00.34:34:33",
    "3000:13:00T34:34:33",
    "2021-13-21.16:00:00",
    "2021-07-21.16:00:00+02:00",
    "2021-07-21T16:00:00Z",
    "2021-07-21.16:00:00.5",
])
def test_parse_time_bad(text):
    with pytest.raises(ValueError, match="without a UTC offset"):
        parse_time(text)


def test_parse_time_result_is_naive():
    assert parse_time("2021-07-21.16:00:00").tzinfo is None


def test_format_time_includes_offset():
    dt = pytz.timezone("Asia/Kolkata").localize(EXPECTED)
    assert format_time(dt) == "2021-07-21.16:00:00+0530"


def test_format_line():
    dt = pytz.utc.localize(EXPECTED)
    assert format_line(dt, "UTC") == "2021-07-21.16:00:00+0000 (UTC)"


def test_current_time_is_aware_whole_seconds():
    now = current_time(pytz.timezone("Europe/Paris"))
    assert now.tzinfo.zone == "Europe/Paris"
    assert now.microsecond == 0


@pytest.mark.parametrize("year, text", [
    (1, "0001-01-01.00:00:00+0000"),
    (999, "0999-01-01.00:00:00+0000"),
    (9999, "9999-01-01.00:00:00+0000"),
])
def test_format_time_pads_year(year, text):
    dt = pytz.utc.localize(datetime(year, 1, 1))
    assert format_time(dt) == text
    assert parse_time(text[:-5]) == dt.replace(tzinfo=None)
