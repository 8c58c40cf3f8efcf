"""Literal date pattern engine used for formats outside the named set.

Two pattern styles are accepted:

* Patterns containing ``%`` are handed to ``datetime.strptime`` /
  ``datetime.strftime`` unchanged.
* Any other pattern is a reference-time layout: each component of the
  reference moment ``Mon Jan 2 15:04:05 MST 2006`` (zone offset ``-0700``)
  written in the pattern stands for that component, e.g. ``2006-01-02 15:04``.

Layout tokens:

    2006 06            four / two digit year
    01 1 Jan January   month (padded, unpadded, abbreviated, full name)
    02 2 _2 002        day of month (padded, unpadded, space padded), day of year
    15 03 3            hour (24h, 12h padded, 12h unpadded)
    04 4 05 5          minute, second
    .000 .999          fractional seconds (fixed width, trailing zeros trimmed)
    PM pm              AM/PM marker
    Mon Monday         weekday name (ignored when parsing)
    MST                zone abbreviation (UTC/GMT recognised, others read as UTC)
    Z07:00 Z0700 Z07   zone offset, "Z" for UTC
    -07:00 -0700 -07   zone offset

Everything else is literal text. Parsed moments without zone information are
taken as UTC. Support is best effort: layouts are not validated and unknown
text is copied through verbatim.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Callable

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

_FRACTION = re.compile(r"[.,](0+|9+)(?![0-9])")


def _names(names: tuple[str, ...], width: int | None = None) -> str:
    options = [name[:width] if width else name for name in names]
    return "(?i:" + "|".join(options) + ")"


def format_offset(moment: datetime, colon: bool = True, utc_z: bool = True, minutes: bool = True) -> str:
    """Render a moment's UTC offset as Z, +HH:MM, +HHMM or +HH."""
    offset = moment.utcoffset() or timedelta(0)
    total = int(offset.total_seconds()) // 60
    if total == 0 and utc_z:
        return "Z"
    sign = "-" if total < 0 else "+"
    hours, mins = divmod(abs(total), 60)
    if not minutes:
        return f"{sign}{hours:02d}"
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{mins:02d}"


def parse_offset(text: str) -> timezone:
    """Parse Z, +HH:MM, +HHMM or +HH into a fixed-offset timezone."""
    if text.upper() == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours = int(digits[:2])
    mins = int(digits[2:4] or "0")
    return timezone(sign * timedelta(hours=hours, minutes=mins))


class NanoDatetime(datetime):
    """A datetime that also carries a sub-microsecond fraction.

    ``nanosecond`` holds the whole fraction of the second in nanoseconds, so
    ``nanosecond // 1000 == microsecond``.
    """

    nanosecond: int


def fraction_nanoseconds(digits: str | None) -> int:
    """Read fractional-second digits (without separator) as nanoseconds."""
    return int((digits or "")[:9].ljust(9, "0"))


def with_nanoseconds(moment: datetime, nanos: int) -> datetime:
    """Return moment carrying nanos; plain datetimes suffice at microsecond precision."""
    if nanos % 1000 == 0:
        return moment
    precise = NanoDatetime(
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        nanos // 1000,
        tzinfo=moment.tzinfo,
        fold=moment.fold,
    )
    precise.nanosecond = nanos
    return precise


def nanoseconds(moment: datetime) -> int:
    """Fraction of the second in nanoseconds."""
    return getattr(moment, "nanosecond", moment.microsecond * 1000)


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


@dataclass(frozen=True)
class _Token:
    regex: str
    field: str | None
    render: Callable[[datetime], str]


_TOKENS: dict[str, _Token] = {
    "January": _Token(_names(MONTH_NAMES), "month_name", lambda m: MONTH_NAMES[m.month - 1]),
    "Monday": _Token(_names(WEEKDAY_NAMES), None, lambda m: WEEKDAY_NAMES[m.weekday()]),
    "Z07:00": _Token(r"Z|[+-][0-9]{2}:[0-9]{2}", "offset", lambda m: format_offset(m)),
    "-07:00": _Token(r"[+-][0-9]{2}:[0-9]{2}", "offset", lambda m: format_offset(m, utc_z=False)),
    "Z0700": _Token(r"Z|[+-][0-9]{4}", "offset", lambda m: format_offset(m, colon=False)),
    "-0700": _Token(r"[+-][0-9]{4}", "offset", lambda m: format_offset(m, colon=False, utc_z=False)),
    "2006": _Token(r"[0-9]{4}", "year", lambda m: f"{m.year:04d}"),
    "Jan": _Token(_names(MONTH_NAMES, 3), "month_abbr", lambda m: MONTH_NAMES[m.month - 1][:3]),
    "Mon": _Token(_names(WEEKDAY_NAMES, 3), None, lambda m: WEEKDAY_NAMES[m.weekday()][:3]),
    "MST": _Token(r"[A-Za-z]{3,5}", "zone_name", lambda m: _zone_name(m)),
    "Z07": _Token(r"Z|[+-][0-9]{2}", "offset", lambda m: format_offset(m, minutes=False)),
    "-07": _Token(r"[+-][0-9]{2}", "offset", lambda m: format_offset(m, utc_z=False, minutes=False)),
    "002": _Token(r"[0-9]{3}", "yday", lambda m: f"{m.timetuple().tm_yday:03d}"),
    "01": _Token(r"[0-9]{2}", "month", lambda m: f"{m.month:02d}"),
    "02": _Token(r"[0-9]{2}", "day", lambda m: f"{m.day:02d}"),
    "_2": _Token(r"[ 0-9][0-9]", "day", lambda m: f"{m.day:>2}"),
    "03": _Token(r"[0-9]{2}", "hour12", lambda m: f"{_hour12(m):02d}"),
    "04": _Token(r"[0-9]{2}", "minute", lambda m: f"{m.minute:02d}"),
    "05": _Token(r"[0-9]{2}", "second", lambda m: f"{m.second:02d}"),
    "06": _Token(r"[0-9]{2}", "year2", lambda m: f"{m.year % 100:02d}"),
    "15": _Token(r"[0-9]{2}", "hour", lambda m: f"{m.hour:02d}"),
    "PM": _Token(r"(?i:AM|PM)", "ampm", lambda m: "PM" if m.hour >= 12 else "AM"),
    "pm": _Token(r"(?i:am|pm)", "ampm", lambda m: "pm" if m.hour >= 12 else "am"),
    "1": _Token(r"[0-9]{1,2}", "month", lambda m: str(m.month)),
    "2": _Token(r"[0-9]{1,2}", "day", lambda m: str(m.day)),
    "3": _Token(r"[0-9]{1,2}", "hour12", lambda m: str(_hour12(m))),
    "4": _Token(r"[0-9]{1,2}", "minute", lambda m: str(m.minute)),
    "5": _Token(r"[0-9]{1,2}", "second", lambda m: str(m.second)),
}
# Longest first so "2006" wins over "2" and "January" over "Jan".
_TOKEN_NAMES = sorted(_TOKENS, key=len, reverse=True)


def _zone_name(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return "UTC"
    return format_offset(moment, colon=False, utc_z=False)


def _fraction_token(separator: str, digits: str) -> _Token:
    width = len(digits)

    def render(moment: datetime) -> str:
        nanos = f"{nanoseconds(moment):09d}"[:width]
        if digits[0] == "9":
            nanos = nanos.rstrip("0")
            return f"{separator}{nanos}" if nanos else ""
        return f"{separator}{nanos}"

    if digits[0] == "9":
        regex = r"(?:[.,][0-9]+)?"
    else:
        regex = rf"[.,][0-9]{{{width}}}"
    return _Token(regex, "fraction", render)


class LayoutPattern:
    """A compiled reference-time layout."""

    def __init__(self, layout: str):
        self.layout = layout
        self._parts: list[str | _Token] = _tokenize(layout)
        regex_parts = []
        self._groups: list[tuple[str, str]] = []
        for index, part in enumerate(self._parts):
            if isinstance(part, str):
                regex_parts.append(re.escape(part))
                continue
            group = f"g{index}"
            regex_parts.append(f"(?P<{group}>{part.regex})")
            if part.field is not None:
                self._groups.append((group, part.field))
            if part.field == "second" and not _is_fraction(self._parts, index + 1):
                # seconds accept a fraction the layout does not spell out
                regex_parts.append(f"(?P<{group}f>[.,][0-9]+)?")
                self._groups.append((f"{group}f", "fraction"))
        self._regex = re.compile("".join(regex_parts))

    def parse(self, text: str) -> datetime:
        match = self._regex.fullmatch(text)
        if match is None:
            raise ValueError(f"{text!r} does not match layout {self.layout!r}")
        fields = {
            field: match.group(group)
            for group, field in self._groups
            if match.group(group) is not None
        }
        return _assemble(fields)

    def format(self, moment: datetime) -> str:
        return "".join(
            part if isinstance(part, str) else part.render(moment) for part in self._parts
        )


class StrftimePattern:
    """A pattern made of strftime/strptime directives."""

    def __init__(self, pattern: str):
        self.pattern = pattern

    def parse(self, text: str) -> datetime:
        moment = datetime.strptime(text, self.pattern)
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment

    def format(self, moment: datetime) -> str:
        return moment.strftime(self.pattern)


def compile_pattern(pattern: str) -> LayoutPattern | StrftimePattern:
    """Compile a literal date pattern into a parser/formatter."""
    if "%" in pattern:
        return StrftimePattern(pattern)
    return LayoutPattern(pattern)


def _tokenize(layout: str) -> list[str | _Token]:
    parts: list[str | _Token] = []
    literal = ""
    i = 0
    while i < len(layout):
        token, length = _next_token(layout, i)
        if token is None:
            literal += layout[i]
            i += 1
            continue
        if literal:
            parts.append(literal)
            literal = ""
        parts.append(token)
        i += length
    if literal:
        parts.append(literal)
    return parts


def _next_token(layout: str, i: int) -> tuple[_Token | None, int]:
    if layout[i] in ".,":
        match = _FRACTION.match(layout, i)
        if match:
            return _fraction_token(layout[i], match.group(1)), match.end() - i
    for name in _TOKEN_NAMES:
        if layout.startswith(name, i) and not _is_word_prefix(layout, i, name):
            return _TOKENS[name], len(name)
    return None, 0


def _is_fraction(parts: list[str | _Token], index: int) -> bool:
    return index < len(parts) and isinstance(parts[index], _Token) and parts[index].field == "fraction"


def _is_word_prefix(layout: str, i: int, name: str) -> bool:
    """Jan and Mon followed by a lowercase letter are ordinary text (Month, Monsoon)."""
    end = i + len(name)
    return name in ("Jan", "Mon") and end < len(layout) and layout[end].islower()


def _assemble(fields: dict[str, str]) -> datetime:
    if "year" in fields:
        year = int(fields["year"])
    elif "year2" in fields:
        short = int(fields["year2"])
        year = short + (1900 if short >= 69 else 2000)
    else:
        year = 1900

    if "month_name" in fields:
        month = _name_index(fields["month_name"], MONTH_NAMES, None)
    elif "month_abbr" in fields:
        month = _name_index(fields["month_abbr"], MONTH_NAMES, 3)
    else:
        month = int(fields.get("month", "1"))

    day = int(fields.get("day", "1").strip())

    if "hour" in fields:
        hour = int(fields["hour"])
    else:
        hour = int(fields.get("hour12", "0"))
        if hour > 12:
            raise ValueError(f"hour out of range: {hour}")
        marker = fields.get("ampm", "").upper()
        if marker == "PM" and hour < 12:
            hour += 12
        elif marker == "AM" and hour == 12:
            hour = 0

    nanos = fraction_nanoseconds(fields.get("fraction", "")[1:])

    tz = timezone.utc
    if "offset" in fields:
        tz = parse_offset(fields["offset"])

    moment = datetime(
        year,
        month,
        day,
        hour,
        int(fields.get("minute", "0")),
        int(fields.get("second", "0")),
        nanos // 1000,
        tzinfo=tz,
    )
    if "yday" in fields and not fields.keys() & {"month", "month_name", "month_abbr", "day"}:
        start = date(year, 1, 1) + timedelta(days=int(fields["yday"]) - 1)
        if start.year != year:
            raise ValueError(f"day of year out of range: {fields['yday']}")
        moment = moment.replace(month=start.month, day=start.day)
    return with_nanoseconds(moment, nanos)


def _name_index(text: str, names: tuple[str, ...], width: int | None) -> int:
    lowered = text.lower()
    for index, name in enumerate(names):
        candidate = name[:width] if width else name
        if candidate.lower() == lowered:
            return index + 1
    raise ValueError(f"unknown name: {text!r}")
