"""This module defines the grouped choice field and timezone forms."""
import typing as _typ

import django.forms as _dj_forms

from .api import timezones as _tz


class GroupedChoiceField(_dj_forms.ChoiceField):
    """Choice field whose choices and default value are supplied by providers.

    Choices are given as a mapping of group names to {value: label} mappings.
    Top-level entries whose value is a plain label are rendered as ungrouped options.
    """

    def __init__(self, choices_provider: _typ.Callable[[], _tz.GroupedChoices],
                 default_provider: _typ.Callable[[], str] | None = None, **kwargs):
        """Create a grouped choice field.

        :param choices_provider: Function that returns the grouped choices.
        :param default_provider: Function that returns the value to display
            when the field is required and has no value. May be None.
        """
        super().__init__(choices=lambda: _tz.to_django_choices(choices_provider()), **kwargs)
        self._default_provider = default_provider

    def displayed_value(self, value):
        """Return the value to display for the given one.

        If the value is empty and the field is required,
        the default provider’s value is returned instead.
        """
        if value in self.empty_values and self.required and self._default_provider:
            return self._default_provider()
        return value

    def prepare_value(self, value):
        return super().prepare_value(self.displayed_value(value))


def timezone_field(empty_value: str | bool = False, **kwargs) -> GroupedChoiceField:
    """Create a field where each timezone is grouped by region.

    If the field is required and empty, the current timezone is preselected.

    :param empty_value: If not False, an empty option with this label is added
        at the top of the timezone choices, e.g. 'Choose a timezone'.
    :param kwargs: Additional arguments for the field.
    """
    return GroupedChoiceField(
        choices_provider=lambda: _tz.build_choices(empty_value),
        default_provider=_tz.get_default_timezone,
        **kwargs,
    )


class TimezoneForm(_dj_forms.Form):
    """Form with a single timezone field."""

    def __init__(self, post=None, initial=None, empty_value: str | bool = False, required: bool = True):
        super().__init__(post, initial=initial)
        self.fields['timezone'] = timezone_field(
            empty_value=empty_value,
            required=required,
            label='timezone',
        )
