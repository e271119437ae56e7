import datetime

import pytest
import pytz
from pydantic import BaseModel, TypeAdapter, ValidationError

from zdrofit.utils.time_utils import (
    Date,
    DateTime,
    DateTimeParseError,
    decode_date,
    decode_datetime,
    encode_date,
    encode_datetime,
)


def test_encode_date():
    assert encode_date(datetime.date(2021, 1, 1)) == "2021-01-01"
    assert (
        encode_date(datetime.datetime(2021, 1, 1, 10, 10, 15, tzinfo=pytz.UTC))
        == "2021-01-01"
    )


def test_encode_date_normalizes_to_utc():
    warsaw = pytz.timezone("Europe/Warsaw")
    just_after_midnight = warsaw.localize(datetime.datetime(2021, 1, 1, 0, 30))
    assert encode_date(just_after_midnight) == "2020-12-31"


def test_decode_date():
    assert decode_date("2021-01-01") == datetime.date(2021, 1, 1)


def test_encode_datetime():
    assert (
        encode_datetime(datetime.datetime(1975, 12, 8, 10, 10, 15, tzinfo=pytz.UTC))
        == "1975-12-08T10:10:15"
    )
    # naive values are taken as UTC
    assert encode_datetime(datetime.datetime(1975, 12, 8, 10, 10, 15)) == "1975-12-08T10:10:15"


def test_encode_datetime_normalizes_to_utc():
    warsaw = pytz.timezone("Europe/Warsaw")
    summer_evening = warsaw.localize(datetime.datetime(2021, 8, 12, 19, 0, 0))
    assert encode_datetime(summer_evening) == "2021-08-12T17:00:00"


def test_encode_datetime_truncates_sub_seconds():
    assert (
        encode_datetime(datetime.datetime(2021, 1, 1, 1, 15, 34, 999999, tzinfo=pytz.UTC))
        == "2021-01-01T01:15:34"
    )


def test_decode_datetime():
    assert decode_datetime("2021-01-01T01:15:34") == datetime.datetime(
        2021, 1, 1, 1, 15, 34, tzinfo=pytz.UTC
    )


@pytest.mark.parametrize("text", ["2021-01-01T01:15:34Z", "01.01.2021", "", "2021-13-01"])
def test_decode_rejects_other_formats(text):
    with pytest.raises(DateTimeParseError):
        decode_datetime(text)
    with pytest.raises(DateTimeParseError):
        decode_date(text)


def test_round_trip():
    warsaw = pytz.timezone("Europe/Warsaw")
    for value in [
        datetime.datetime(2021, 1, 1, 1, 15, 34, tzinfo=pytz.UTC),
        warsaw.localize(datetime.datetime(2021, 8, 12, 19, 0, 0)),
        datetime.datetime(2000, 2, 29, 23, 59, 59, tzinfo=pytz.UTC),
    ]:
        assert decode_datetime(encode_datetime(value)) == value
    for day in [datetime.date(2021, 1, 1), datetime.date(2000, 2, 29)]:
        assert decode_date(encode_date(day)) == day


def test_json_form_is_quoted_string():
    assert (
        TypeAdapter(Date).dump_json(datetime.date(2021, 1, 1)) == b'"2021-01-01"'
    )
    assert (
        TypeAdapter(DateTime).dump_json(
            datetime.datetime(1975, 12, 8, 10, 10, 15, tzinfo=pytz.UTC)
        )
        == b'"1975-12-08T10:10:15"'
    )
    assert TypeAdapter(DateTime).validate_json(b'"2021-01-01T01:15:34"') == datetime.datetime(
        2021, 1, 1, 1, 15, 34, tzinfo=pytz.UTC
    )


def test_malformed_value_fails_model_validation():
    class Slot(BaseModel):
        start_time: DateTime

    with pytest.raises(ValidationError):
        Slot.model_validate({"start_time": "2021-01-01 01:15"})
