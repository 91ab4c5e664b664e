"""Typed, named rule preferences and the provider that resolves them."""
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from utils.formatters import format_duration, parse_duration


@dataclass(frozen=True)
class TypedPreference:
    identifier: str
    name: str
    description: str
    default: Any
    parse: Callable[[Any], Any] = field(default=lambda v: v, compare=False, repr=False)
    display: Callable[[Any], str] = field(default=str, compare=False, repr=False)

    def coerce(self, raw):
        try:
            return self.parse(raw)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for preference '{self.identifier}': {raw!r}") from e


def duration_preference(identifier, name, description, default_ms):
    return TypedPreference(
        identifier=identifier,
        name=name,
        description=description,
        default=float(default_ms),
        parse=parse_duration,
        display=format_duration,
    )


class PreferenceProvider:
    """Resolves preference values from a mapping of identifier -> raw value."""

    def __init__(self, values: Mapping[str, Any] = None):
        self._values = dict(values or {})

    @classmethod
    def from_config(cls, config):
        return cls(config.get("preferences") or {})

    def with_values(self, overrides: Mapping[str, Any]):
        """New provider with the given identifier -> value overrides applied."""
        values = dict(self._values)
        values.update(overrides)
        return PreferenceProvider(values)

    def get_preference_value(self, preference: TypedPreference):
        raw = self._values.get(preference.identifier)
        if raw is None:
            return preference.default
        return preference.coerce(raw)
