"""Date/time transform implementation."""

import math
import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

from fieldtransform.core.exceptions import FormatParseError, TypeConversionError
from fieldtransform.core.type_mapping import (
    NUMERIC_KINDS,
    ValueKind,
    describe_type,
    kind_of,
)
from fieldtransform.transforms.layouts import (
    compile_pattern,
    format_offset,
    fraction_nanoseconds,
    nanoseconds,
    parse_offset,
    with_nanoseconds,
)
from fieldtransform.transforms.registry import string_option

RFC3339 = "RFC3339"
RFC3339_NANO = "RFC3339Nano"
DATE_TIME = "DateTime"
DATE = "Date"
UNIX = "Unix"
UNIX_MILLI = "UnixMilli"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339_TEXT = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})"
)
_DATE_TIME_TEXT = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?"
)
_DATE_TEXT = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


class DateFormat(Protocol):
    def parse(self, text: str) -> datetime: ...

    def format(self, moment: datetime) -> str: ...


def _moment(fields: tuple[str, ...], fraction: str | None, tz: timezone) -> datetime:
    nanos = fraction_nanoseconds(fraction)
    year, month, day, hour, minute, second = (int(f) for f in fields)
    moment = datetime(year, month, day, hour, minute, second, nanos // 1000, tzinfo=tz)
    return with_nanoseconds(moment, nanos)


def _calendar(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def _clock(moment: datetime) -> str:
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


class RFC3339Format:
    """RFC 3339 timestamps, optionally rendering fractional seconds."""

    def __init__(self, nano: bool = False):
        self.nano = nano

    def parse(self, text: str) -> datetime:
        match = _RFC3339_TEXT.fullmatch(text)
        if match is None:
            raise ValueError(f"{text!r} is not an RFC 3339 timestamp")
        *fields, fraction, offset = match.groups()
        return _moment(tuple(fields), fraction, parse_offset(offset))

    def format(self, moment: datetime) -> str:
        text = f"{_calendar(moment)}T{_clock(moment)}"
        nanos = nanoseconds(moment)
        if self.nano and nanos:
            text += "." + f"{nanos:09d}".rstrip("0")
        return text + format_offset(moment)


class DateTimeFormat:
    """``YYYY-MM-DD HH:MM:SS`` in UTC, no offset."""

    def parse(self, text: str) -> datetime:
        match = _DATE_TIME_TEXT.fullmatch(text)
        if match is None:
            raise ValueError(f"{text!r} is not a YYYY-MM-DD HH:MM:SS timestamp")
        *fields, fraction = match.groups()
        return _moment(tuple(fields), fraction, timezone.utc)

    def format(self, moment: datetime) -> str:
        return f"{_calendar(moment)} {_clock(moment)}"


class DateOnlyFormat:
    """``YYYY-MM-DD`` in UTC."""

    def parse(self, text: str) -> datetime:
        match = _DATE_TEXT.fullmatch(text)
        if match is None:
            raise ValueError(f"{text!r} is not a YYYY-MM-DD date")
        year, month, day = match.groups()
        return datetime(int(year), int(month), int(day), tzinfo=timezone.utc)

    def format(self, moment: datetime) -> str:
        return _calendar(moment)


class EpochFormat:
    """Output-only decimal count of seconds or milliseconds since the epoch."""

    def __init__(self, unit: timedelta):
        self.unit = unit

    def parse(self, text: str) -> datetime:
        raise ValueError("epoch formats are output-only")

    def format(self, moment: datetime) -> str:
        return str((moment - EPOCH) // self.unit)


_INPUT_FORMATS: dict[str, DateFormat] = {
    RFC3339: RFC3339Format(),
    RFC3339_NANO: RFC3339Format(nano=True),
    DATE_TIME: DateTimeFormat(),
    DATE: DateOnlyFormat(),
}

_OUTPUT_FORMATS: dict[str, DateFormat] = {
    **_INPUT_FORMATS,
    UNIX: EpochFormat(timedelta(seconds=1)),
    UNIX_MILLI: EpochFormat(timedelta(milliseconds=1)),
}


def resolve_input_format(name: str) -> DateFormat:
    """Return the parser for a named input format or literal pattern."""
    return _INPUT_FORMATS.get(name) or compile_pattern(name)


def resolve_output_format(name: str) -> DateFormat:
    """Return the formatter for a named output format or literal pattern."""
    return _OUTPUT_FORMATS.get(name) or compile_pattern(name)


class DateTransform:
    """Parses timestamps and re-renders them in another format.

    Config:
        input_format: str - named format or literal pattern used to parse
                      string input (default "RFC3339")
        output_format: str - named format or literal pattern used to render
                       the result (default "RFC3339")

    Named formats: RFC3339, RFC3339Nano, DateTime, Date, plus the output-only
    Unix and UnixMilli. Numeric input is read as Unix epoch seconds in UTC,
    with any fractional part truncated. None passes through unchanged. Fractional
    seconds in text are kept to nanosecond precision.
    """

    name = "date"

    def __init__(self, config: Mapping[str, Any] | None = None):
        self.input_format = string_option(config, "input_format", RFC3339, self.name)
        self.output_format = string_option(config, "output_format", RFC3339, self.name)
        self._parser = resolve_input_format(self.input_format)
        self._formatter = resolve_output_format(self.output_format)

    def transform(self, value: Any) -> str | None:
        kind = kind_of(value)
        if kind == ValueKind.NULL:
            return None
        if kind == ValueKind.STRING:
            moment = self._parse(value)
        elif kind in NUMERIC_KINDS:
            moment = self._from_epoch(value)
        else:
            raise TypeConversionError(
                self.name,
                describe_type(value),
                f"cannot parse date from {describe_type(value)}",
            )
        return self._formatter.format(moment)

    def _parse(self, text: str) -> datetime:
        try:
            return self._parser.parse(text)
        except ValueError as e:
            raise FormatParseError(self.name, text, str(e)) from e

    def _from_epoch(self, value: int | float) -> datetime:
        if isinstance(value, float) and not math.isfinite(value):
            raise TypeConversionError(
                self.name, describe_type(value), f"non-finite epoch timestamp {value!r}"
            )
        try:
            return EPOCH + timedelta(seconds=math.trunc(value))
        except OverflowError as e:
            raise TypeConversionError(
                self.name,
                describe_type(value),
                f"epoch timestamp {value!r} is out of range",
            ) from e

    def __repr__(self) -> str:
        return f"DateTransform(input_format={self.input_format!r}, output_format={self.output_format!r})"


def create_date_transform(config: Mapping[str, Any] | None) -> DateTransform:
    """Factory function for DateTransform."""
    return DateTransform(config)
