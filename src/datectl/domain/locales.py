"""Locale data for text fields — month and weekday names.

Names follow the CLDR "format" forms for each language. Only the
language subtag of a locale identifier selects data, so ``es-MX``,
``es_ES`` and ``ES`` all resolve to ``es``.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import BaseModel, field_validator

from datectl.domain.errors import UnsupportedLocaleError

DEFAULT_LOCALE = "en"

_LOCALE_RE = re.compile(r"^(?P<lang>[A-Za-z]{2,3})(?:[-_][A-Za-z0-9]+)*$")


class LocaleData(BaseModel):
    """Month and weekday names for one language.

    Weekday tuples start on Monday to match ``date.weekday()``.
    """

    model_config = {"frozen": True}

    language: str
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays: tuple[str, ...]
    weekdays_short: tuple[str, ...]

    @field_validator("months", "months_short")
    @classmethod
    def _twelve_months(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != 12:
            raise ValueError("expected 12 month names")
        return v

    @field_validator("weekdays", "weekdays_short")
    @classmethod
    def _seven_days(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != 7:
            raise ValueError("expected 7 weekday names")
        return v

    @property
    def months_narrow(self) -> tuple[str, ...]:
        return tuple(name[0].upper() for name in self.months)

    @property
    def weekdays_narrow(self) -> tuple[str, ...]:
        return tuple(name[0].upper() for name in self.weekdays)


_LOCALES: dict[str, LocaleData] = {
    "en": LocaleData(
        language="en",
        months=(
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        months_short=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
        weekdays_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    ),
    "es": LocaleData(
        language="es",
        months=(
            "enero",
            "febrero",
            "marzo",
            "abril",
            "mayo",
            "junio",
            "julio",
            "agosto",
            "septiembre",
            "octubre",
            "noviembre",
            "diciembre",
        ),
        months_short=(
            "ene", "feb", "mar", "abr", "may", "jun",
            "jul", "ago", "sept", "oct", "nov", "dic",
        ),
        weekdays=("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"),
        weekdays_short=("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
    ),
    "pt": LocaleData(
        language="pt",
        months=(
            "janeiro",
            "fevereiro",
            "março",
            "abril",
            "maio",
            "junho",
            "julho",
            "agosto",
            "setembro",
            "outubro",
            "novembro",
            "dezembro",
        ),
        months_short=(
            "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
            "jul.", "ago.", "set.", "out.", "nov.", "dez.",
        ),
        weekdays=(
            "segunda-feira",
            "terça-feira",
            "quarta-feira",
            "quinta-feira",
            "sexta-feira",
            "sábado",
            "domingo",
        ),
        weekdays_short=("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom."),
    ),
    "fr": LocaleData(
        language="fr",
        months=(
            "janvier",
            "février",
            "mars",
            "avril",
            "mai",
            "juin",
            "juillet",
            "août",
            "septembre",
            "octobre",
            "novembre",
            "décembre",
        ),
        months_short=(
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ),
        weekdays=("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
        weekdays_short=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
    ),
    "de": LocaleData(
        language="de",
        months=(
            "Januar",
            "Februar",
            "März",
            "April",
            "Mai",
            "Juni",
            "Juli",
            "August",
            "September",
            "Oktober",
            "November",
            "Dezember",
        ),
        months_short=(
            "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
            "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
        ),
        weekdays=(
            "Montag",
            "Dienstag",
            "Mittwoch",
            "Donnerstag",
            "Freitag",
            "Samstag",
            "Sonntag",
        ),
        weekdays_short=("Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.", "So."),
    ),
    "it": LocaleData(
        language="it",
        months=(
            "gennaio",
            "febbraio",
            "marzo",
            "aprile",
            "maggio",
            "giugno",
            "luglio",
            "agosto",
            "settembre",
            "ottobre",
            "novembre",
            "dicembre",
        ),
        months_short=(
            "gen", "feb", "mar", "apr", "mag", "giu",
            "lug", "ago", "set", "ott", "nov", "dic",
        ),
        weekdays=("lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica"),
        weekdays_short=("lun", "mar", "mer", "gio", "ven", "sab", "dom"),
    ),
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(sorted(_LOCALES))


def normalize_locale(locale: str) -> str:
    """Reduce a locale identifier to its lowercase language subtag.

    Examples:
        >>> normalize_locale("es-MX")
        'es'
        >>> normalize_locale("pt_BR")
        'pt'
    """
    m = _LOCALE_RE.match(locale.strip()) if isinstance(locale, str) else None
    if m is None:
        raise UnsupportedLocaleError(str(locale))
    return m.group("lang").lower()


@lru_cache(maxsize=64)
def get_locale(locale: str) -> LocaleData:
    """Return name data for *locale*, or raise :class:`UnsupportedLocaleError`."""
    data = _LOCALES.get(normalize_locale(locale))
    if data is None:
        raise UnsupportedLocaleError(locale)
    return data


def is_supported(locale: str) -> bool:
    """Check whether *locale* resolves to a language with name data."""
    try:
        get_locale(locale)
    except UnsupportedLocaleError:
        return False
    return True
