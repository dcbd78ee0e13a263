"""Format patterns — compile, render, and parse token-based date patterns.

Pattern letters (date fields only):

    y, u   year              yy = two digits (2000-2099), otherwise padded to count
    M, L   month             M, MM numeric; MMM short name; MMMM full name; MMMMM narrow
    d      day of month      d, dd
    D      day of year       D, DD, DDD
    E      day of week       E..EEE short name; EEEE full name; EEEEE narrow

Any other ASCII letter is rejected. Text between single quotes is
literal and ``''`` is a single quote. ``#``, ``{``, ``}``, ``[`` and ``]``
are reserved.

Compiled patterns are cached; compilation is pure so a cached
:class:`CompiledPattern` can be shared freely.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from functools import lru_cache
from typing import Literal

from datectl.domain.arithmetic import days_in_month
from datectl.domain.errors import InvalidPatternError, ParseError
from datectl.domain.locales import LocaleData, get_locale
from datectl.domain.types import ResolverStyle

# Maximum letter count per field letter.
FIELD_LIMITS: dict[str, int] = {
    "y": 19,
    "u": 19,
    "M": 5,
    "L": 5,
    "d": 2,
    "D": 3,
    "E": 5,
}

RESERVED_CHARS = frozenset("#{}[]")

TWO_DIGIT_YEAR_BASE = 2000

# Longest digit run a variable-width numeric field consumes.
MAX_DIGITS = 19

TokenKind = Literal["literal", "field"]


@dataclass(frozen=True)
class Token:
    """One element of a compiled pattern: a literal run or a field."""

    kind: TokenKind
    text: str = ""
    letter: str = ""
    count: int = 0

    @property
    def is_text_field(self) -> bool:
        if self.kind != "field":
            return False
        if self.letter in ("M", "L"):
            return self.count >= 3
        return self.letter == "E"


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split *pattern* into literal and field tokens.

    Raises:
        InvalidPatternError: on unknown letters, reserved characters,
            unterminated quotes, or too many letters for a field.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    n = len(pattern)
    i = 0

    def flush() -> None:
        if literal:
            tokens.append(Token(kind="literal", text="".join(literal)))
            literal.clear()

    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            j = i + 1
            while True:
                if j >= n:
                    raise InvalidPatternError(pattern, "unterminated quote", index=i)
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            i = j + 1
        elif ch in RESERVED_CHARS:
            raise InvalidPatternError(pattern, f"reserved character {ch!r}", index=i)
        elif ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            count = j - i
            limit = FIELD_LIMITS.get(ch)
            if limit is None:
                raise InvalidPatternError(pattern, f"unsupported pattern letter {ch!r}", index=i)
            if count > limit:
                raise InvalidPatternError(pattern, f"too many pattern letters: {ch}", index=i)
            flush()
            tokens.append(Token(kind="field", letter=ch, count=count))
            i = j
        else:
            literal.append(ch)
            i += 1

    flush()
    return tuple(tokens)


# ── Formatting ───────────────────────────────────────────────────────


def _require_names(names: LocaleData | None) -> LocaleData:
    if names is None:
        msg = "text field reached without resolved locale data"
        raise RuntimeError(msg)
    return names


def _format_year(year: int, count: int) -> str:
    if count == 2:
        return f"{year % 100:02d}"
    return f"{year:0{count}d}"


def _format_month(month: int, count: int, names: LocaleData | None) -> str:
    if count <= 2:
        return f"{month:0{count}d}"
    names = _require_names(names)
    if count == 3:
        return names.months_short[month - 1]
    if count == 4:
        return names.months[month - 1]
    return names.months_narrow[month - 1]


def _format_weekday(weekday: int, count: int, names: LocaleData) -> str:
    if count <= 3:
        return names.weekdays_short[weekday]
    if count == 4:
        return names.weekdays[weekday]
    return names.weekdays_narrow[weekday]


# ── Parsing ──────────────────────────────────────────────────────────


def _alternation(names: tuple[str, ...]) -> str:
    """Regex alternation preferring the longest name first."""
    ordered = sorted(set(names), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(name) for name in ordered) + ")"


def _numeric_regex(letter: str, count: int) -> str:
    """Digit-run regex for a numeric field; variable widths stop at MAX_DIGITS."""
    if letter in ("y", "u"):
        if count == 2:
            return r"\d{2}"
        return rf"\d{{{count},{MAX_DIGITS}}}"
    if letter == "D":
        return {1: r"\d{1,3}", 2: r"\d{2,3}", 3: r"\d{3}"}[count]
    # M, L, d
    return rf"\d{{1,{MAX_DIGITS}}}" if count == 1 else r"\d{2}"


@dataclass(frozen=True)
class _Parser:
    regex: re.Pattern[str]
    fields: dict[str, Token]
    names: LocaleData | None


@dataclass(frozen=True)
class CompiledPattern:
    """A validated pattern ready to render and parse dates."""

    pattern: str
    tokens: tuple[Token, ...]

    @property
    def has_text_fields(self) -> bool:
        return any(t.is_text_field for t in self.tokens)

    def format(self, d: date, locale: str) -> str:
        """Render *d*. The locale is resolved only for text fields."""
        names = get_locale(locale) if self.has_text_fields else None
        out: list[str] = []
        for tok in self.tokens:
            if tok.kind == "literal":
                out.append(tok.text)
            elif tok.letter in ("y", "u"):
                out.append(_format_year(d.year, tok.count))
            elif tok.letter in ("M", "L"):
                out.append(_format_month(d.month, tok.count, names))
            elif tok.letter == "d":
                out.append(f"{d.day:0{tok.count}d}")
            elif tok.letter == "D":
                out.append(f"{d.timetuple().tm_yday:0{tok.count}d}")
            else:
                names = _require_names(names)
                out.append(_format_weekday(d.weekday(), tok.count, names))
        return "".join(out)

    def parse(
        self,
        text: str,
        locale: str,
        resolver: ResolverStyle = ResolverStyle.SMART,
    ) -> date:
        """Parse *text*, which must match the whole pattern.

        Raises:
            ParseError: if the text does not match or does not resolve
                to a single valid date.
        """
        parser = _build_parser(self, locale if self.has_text_fields else "")
        m = parser.regex.fullmatch(text)
        if m is None:
            raise ParseError(
                f"Text {text!r} does not match pattern {self.pattern!r}",
                text=text,
                pattern=self.pattern,
            )

        values: dict[str, int] = {}
        for group, tok in parser.fields.items():
            raw = m.group(group)
            value = _field_value(tok, raw, parser.names)
            key = _FIELD_KEYS[tok.letter]
            if key in values and values[key] != value:
                raise ParseError(
                    f"Conflicting values for {key} in {text!r}",
                    text=text,
                    pattern=self.pattern,
                )
            values[key] = value

        return _resolve(values, resolver, text=text, pattern=self.pattern)


_FIELD_KEYS: dict[str, str] = {
    "y": "year",
    "u": "year",
    "M": "month",
    "L": "month",
    "d": "day",
    "D": "day_of_year",
    "E": "weekday",
}


def _field_value(tok: Token, raw: str, names: LocaleData | None) -> int:
    if tok.letter in ("M", "L") and tok.count >= 3:
        names = _require_names(names)
        table = names.months_short if tok.count == 3 else names.months
        return table.index(raw) + 1
    if tok.letter == "E":
        names = _require_names(names)
        table = names.weekdays if tok.count == 4 else names.weekdays_short
        return table.index(raw)
    value = int(raw)
    if tok.letter in ("y", "u") and tok.count == 2:
        return TWO_DIGIT_YEAR_BASE + value
    return value


def _resolve(values: dict[str, int], resolver: ResolverStyle, *, text: str, pattern: str) -> date:
    def fail(reason: str) -> ParseError:
        msg = f"Text {text!r} could not be parsed: {reason}"
        return ParseError(msg, text=text, pattern=pattern)

    year = values.get("year")
    if year is None:
        raise fail("no year field")
    if not MINYEAR <= year <= MAXYEAR:
        raise fail(f"year {year} is outside {MINYEAR}..{MAXYEAR}")

    month = values.get("month")
    day = values.get("day")
    day_of_year = values.get("day_of_year")

    if month is not None and not 1 <= month <= 12:
        raise fail(f"invalid month {month}")

    result: date | None = None
    if month is not None and day is not None:
        length = days_in_month(year, month)
        if resolver == ResolverStyle.STRICT:
            if not 1 <= day <= length:
                raise fail(f"invalid date {year:04d}-{month:02d}-{day:02d}")
        else:
            if not 1 <= day <= 31:
                raise fail(f"invalid day of month {day}")
            day = min(day, length)
        result = date(year, month, day)

    if day_of_year is not None:
        year_length = 366 if days_in_month(year, 2) == 29 else 365
        if not 1 <= day_of_year <= year_length:
            raise fail(f"invalid day of year {day_of_year}")
        from_doy = date(year, 1, 1) + timedelta(days=day_of_year - 1)
        if result is not None and result != from_doy:
            raise fail("day of year conflicts with month and day")
        if month is not None and from_doy.month != month:
            raise fail("day of year conflicts with month")
        result = from_doy

    if result is None:
        raise fail("not enough fields to obtain a date")

    weekday = values.get("weekday")
    if weekday is not None and result.weekday() != weekday:
        raise fail(f"day of week does not match {result.isoformat()}")

    return result


@lru_cache(maxsize=256)
def _build_parser(compiled: CompiledPattern, locale: str) -> _Parser:
    names = get_locale(locale) if compiled.has_text_fields else None
    parts: list[str] = []
    fields: dict[str, Token] = {}
    for index, tok in enumerate(compiled.tokens):
        if tok.kind == "literal":
            parts.append(re.escape(tok.text))
            continue
        if tok.count == 5 and tok.letter in ("M", "L", "E"):
            raise InvalidPatternError(
                compiled.pattern, f"narrow form {tok.letter * 5} cannot be parsed"
            )
        if tok.is_text_field:
            names = _require_names(names)
            if tok.letter == "E":
                table = names.weekdays if tok.count == 4 else names.weekdays_short
            else:
                table = names.months_short if tok.count == 3 else names.months
            body = _alternation(table)
        else:
            body = _numeric_regex(tok.letter, tok.count)
        group = f"f{index}"
        fields[group] = tok
        parts.append(f"(?P<{group}>{body})")
    return _Parser(regex=re.compile("".join(parts), re.ASCII), fields=fields, names=names)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> CompiledPattern:
    return CompiledPattern(pattern=pattern, tokens=tokenize(pattern))


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile (or fetch from cache) the pattern *pattern*."""
    if not isinstance(pattern, str):
        raise InvalidPatternError(repr(pattern), "pattern must be a string")
    if not pattern:
        raise InvalidPatternError(pattern, "pattern is empty")
    return _compile(pattern)
