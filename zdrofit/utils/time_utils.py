import datetime
from typing import Annotated, Union

import pytz
from pydantic import BeforeValidator, PlainSerializer

from zdrofit.consts import DATE_FORMAT, DATETIME_FORMAT


class DateTimeParseError(ValueError):
    pass


def as_utc(value: datetime.datetime) -> datetime.datetime:
    # naive values are taken to already be in UTC
    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value.astimezone(pytz.UTC)


def encode_date(value: Union[datetime.date, datetime.datetime]) -> str:
    if isinstance(value, datetime.datetime):
        value = as_utc(value).date()
    return value.strftime(DATE_FORMAT)


def encode_datetime(value: datetime.datetime) -> str:
    return as_utc(value).strftime(DATETIME_FORMAT)


def decode_date(text: str) -> datetime.date:
    try:
        return datetime.datetime.strptime(text, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise DateTimeParseError(
            f"'{text}' does not match date format '{DATE_FORMAT}'"
        ) from e


def decode_datetime(text: str) -> datetime.datetime:
    try:
        return pytz.UTC.localize(datetime.datetime.strptime(text, DATETIME_FORMAT))
    except (TypeError, ValueError) as e:
        raise DateTimeParseError(
            f"'{text}' does not match datetime format '{DATETIME_FORMAT}'"
        ) from e


def _validate_date(value):
    if isinstance(value, datetime.datetime):
        return as_utc(value).date()
    if isinstance(value, datetime.date):
        return value
    return decode_date(value)


def _validate_datetime(value):
    if isinstance(value, datetime.datetime):
        return as_utc(value)
    return decode_datetime(value)


Date = Annotated[
    datetime.date,
    BeforeValidator(_validate_date),
    PlainSerializer(encode_date, return_type=str),
]

DateTime = Annotated[
    datetime.datetime,
    BeforeValidator(_validate_datetime),
    PlainSerializer(encode_datetime, return_type=str),
]
