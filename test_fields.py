import pytest

from notionical.core.fields import (
    DateRange,
    read_category,
    read_date_range,
    read_location,
    read_title,
)
from notionical.exceptions.errors import RecordDataError


def test_read_title_uses_first_run(make_page) -> None:
    props = make_page(title="Standup")["properties"]
    props["Name"]["title"].append({"type": "text", "plain_text": " (ignored)"})
    assert read_title(props, "Name") == "Standup"


def test_read_title_empty_runs_raise(make_page) -> None:
    props = make_page(title=None)["properties"]
    with pytest.raises(RecordDataError, match="no text"):
        read_title(props, "Name")


def test_read_title_missing_property_raises(make_page) -> None:
    props = make_page()["properties"]
    with pytest.raises(RecordDataError, match="missing"):
        read_title(props, "Title")


def test_wrong_property_type_raises(make_page) -> None:
    props = make_page()["properties"]
    with pytest.raises(RecordDataError, match="expected 'select'"):
        read_category(props, "Name")


def test_read_category(make_page) -> None:
    assert read_category(make_page(category="Work")["properties"], "Category") == "Work"
    assert read_category(make_page(category=None)["properties"], "Category") is None
    assert read_category(make_page()["properties"], "Not There") is None


def test_read_date_range(make_page) -> None:
    props = make_page(start="2024-03-01", end="2024-03-03")["properties"]
    assert read_date_range(props, "When") == DateRange(start="2024-03-01", end="2024-03-03")


def test_read_date_range_keeps_time_zone(make_page) -> None:
    props = make_page(start="2024-03-01T09:00:00.000", time_zone="Europe/Berlin")["properties"]
    assert read_date_range(props, "When").time_zone == "Europe/Berlin"


def test_read_date_range_null_date(make_page) -> None:
    assert read_date_range(make_page(start=None)["properties"], "When") is None


def test_read_date_range_missing_property_raises(make_page) -> None:
    with pytest.raises(RecordDataError):
        read_date_range(make_page()["properties"], "Date")


def test_read_location(make_page) -> None:
    assert read_location(make_page(location="Room 4")["properties"], "Place") == "Room 4"
    assert read_location(make_page(location=None)["properties"], "Place") is None
    assert read_location(make_page()["properties"], "Not There") is None


def test_read_date_range_empty_start(make_page) -> None:
    page = make_page()
    page["properties"]["When"]["date"] = {"start": None, "end": None, "time_zone": None}
    assert read_date_range(page["properties"], "When") is None


@pytest.mark.parametrize(
    "date_value",
    [
        {"start": 20240301, "end": None},
        {"start": "2024-03-01", "end": 20240303},
    ],
)
def test_read_date_range_non_string_values_raise(make_page, date_value) -> None:
    page = make_page()
    page["properties"]["When"]["date"] = date_value
    with pytest.raises(RecordDataError, match="non-string"):
        read_date_range(page["properties"], "When")
