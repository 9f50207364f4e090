"""This module defines the timezone choices used by timezone form fields.

Timezones are grouped by region, i.e. the first segment of their IANA identifier.
The grouped choices are built once and then shared by all fields of the process.
"""
from __future__ import annotations

import types as _types
import typing as _typ

from django.utils import timezone as _dj_tz
import pytz as _pytz

from .. import settings as _settings

GroupedChoices = _typ.Mapping[str, _typ.Mapping[str, str] | str]


class TimezoneSource(_typ.Protocol):
    """Protocol for objects that provide timezone identifiers."""

    def list_identifiers(self) -> _typ.Sequence[str] | None:
        """Return all valid timezone identifiers, or None if they are unavailable."""
        ...

    def get_default_identifier(self) -> str:
        """Return the identifier of the currently configured default timezone."""
        ...


class PytzTimezoneSource:
    """Timezone source backed by pytz’s database and Django’s current timezone."""

    def list_identifiers(self) -> _typ.Sequence[str] | None:
        return _pytz.common_timezones

    def get_default_identifier(self) -> str:
        return _dj_tz.get_current_timezone_name()


_source: TimezoneSource = PytzTimezoneSource()
_grouped_choices: GroupedChoices | None = None


def classify(identifier: str) -> tuple[str, str]:
    """Return the region and display label of the given timezone identifier.

    Only the first three segments of an identifier are considered.

    :param identifier: An IANA timezone identifier.
    :return: A (region, label) tuple.
    """
    parts = identifier.split('/')
    if len(parts) > 2:
        region, name = parts[0], parts[1] + _settings.LABEL_SEPARATOR + parts[2]
    elif len(parts) > 1:
        region, name = parts
    else:
        region, name = _settings.OTHER_REGION, parts[0]
    return region, name.replace('_', ' ')


def get_grouped_choices() -> GroupedChoices:
    """Return the timezone choices grouped by region.

    The mapping is built on first access then cached.
    Both the returned mapping and its groups are read-only.
    """
    global _grouped_choices
    if _grouped_choices is None:
        _grouped_choices = _group(_source.list_identifiers() or ())
    return _grouped_choices


def _group(identifiers: _typ.Iterable[str]) -> GroupedChoices:
    _settings.LOGGER.info('Building timezone choices…')
    groups: dict[str, dict[str, str]] = {}
    nb = 0
    for tz in identifiers:
        if not isinstance(tz, str) or not tz:
            _settings.LOGGER.warning(f'Ignored invalid timezone identifier {tz!r}')
            continue
        region, name = classify(tz)
        group = groups.setdefault(region, {})
        if tz not in group:
            group[tz] = name
            nb += 1
    _settings.LOGGER.info(f'Built {nb} timezone choice(s) in {len(groups)} region(s).')
    return _types.MappingProxyType({
        region: _types.MappingProxyType(group) for region, group in groups.items()
    })


def build_choices(empty_value: str | bool = False) -> GroupedChoices:
    """Return the choices of a timezone field.

    :param empty_value: If not False, the label of an empty option
        that is added before all timezone groups.
    :return: The grouped timezone choices, preceded by the empty option if any.
    """
    choices = get_grouped_choices()
    if empty_value is not False:
        choices = _types.MappingProxyType({'': empty_value, **choices})
    return choices


def get_default_timezone() -> str:
    """Return the identifier of the current default timezone."""
    return _source.get_default_identifier()


def clear_cache():
    """Clear the cached timezone choices. They will be rebuilt on next access."""
    global _grouped_choices
    _grouped_choices = None


def use_source(source: TimezoneSource) -> TimezoneSource:
    """Set the source of timezone identifiers and clear the cached choices.

    :param source: The new source.
    :return: The previous source.
    """
    global _source
    previous = _source
    _source = source
    clear_cache()
    return previous


def to_django_choices(choices: GroupedChoices) -> tuple[tuple[str, str | tuple[tuple[str, str], ...]], ...]:
    """Convert grouped choices into a choice list usable by ChoiceField objects.

    Groups become (region, ((value, label), …)) tuples,
    other entries become (value, label) tuples.
    """
    return tuple(
        (key, value if isinstance(value, str) else tuple(value.items()))
        for key, value in choices.items()
    )
