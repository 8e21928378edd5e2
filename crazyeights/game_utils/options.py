"""
Declarative game options.

An option is an ordinary dataclass field whose metadata carries an
``OptionMeta``. The meta knows the option's label key, how to parse a
command line string into a value, and how to describe itself for
``show-options``:

    @dataclass
    class CrazyEightsOptions(GameOptions):
        opponent_delay_ms: int = option_field(
            IntOption(default=1500, min_val=0, max_val=10000, value_key="ms",
                      label="crazyeights-set-opponent-delay"))
"""

from dataclasses import dataclass, field, fields
from typing import Any

from mashumaro.mixins.json import DataClassJSONMixin

from ..messages.localization import Localization

OPTION_META_KEY = "option_meta"


@dataclass
class OptionMeta:
    default: Any
    label: str  # Localization key; the current value is passed as value_key
    value_key: str = "value"

    @property
    def type_name(self) -> str:
        raise NotImplementedError

    def display_value(self, locale: str, value: Any) -> Any:
        return value

    def get_label(self, locale: str, value: Any) -> str:
        """Localized label with ``value`` filled in."""
        return Localization.get(
            locale, self.label, **{self.value_key: self.display_value(locale, value)}
        )

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        """Parse ``value``.

        Returns:
            ``(True, converted)`` on success, ``(False, value)`` otherwise.
        """
        raise NotImplementedError

    def describe(self) -> dict[str, Any]:
        return {"type": self.type_name, "default": self.default}


@dataclass
class IntOption(OptionMeta):
    """Whole number; out-of-range input is clamped rather than rejected."""

    min_val: int = 0
    max_val: int = 100

    @property
    def type_name(self) -> str:
        return "int"

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        try:
            number = int(value)
        except ValueError:
            return False, value
        return True, min(max(number, self.min_val), self.max_val)

    def describe(self) -> dict[str, Any]:
        return {**super().describe(), "min": self.min_val, "max": self.max_val}


@dataclass
class MenuOption(OptionMeta):
    """One of a fixed list of string choices."""

    choices: list[str] = field(default_factory=list)
    choice_labels: dict[str, str] | None = None  # choice -> localization key
    value_key: str = "mode"

    @property
    def type_name(self) -> str:
        return "menu"

    def display_value(self, locale: str, value: Any) -> Any:
        key = (self.choice_labels or {}).get(value)
        return Localization.get(locale, key) if key else value

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        return value in self.choices, value

    def describe(self) -> dict[str, Any]:
        return {**super().describe(), "choices": list(self.choices)}


TRUE_WORDS = ("true", "1", "yes", "on")
FALSE_WORDS = ("false", "0", "no", "off")


@dataclass
class BoolOption(OptionMeta):
    """On/off switch."""

    value_key: str = "enabled"

    @property
    def type_name(self) -> str:
        return "bool"

    def display_value(self, locale: str, value: Any) -> Any:
        return Localization.get(locale, "option-on" if value else "option-off")

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True, True
        if word in FALSE_WORDS:
            return True, False
        return False, value


def option_field(meta: OptionMeta) -> Any:
    """A dataclass field defaulting to ``meta.default`` and carrying ``meta``."""
    return field(default=meta.default, metadata={OPTION_META_KEY: meta})


def get_all_option_metas(options_class: type) -> dict[str, OptionMeta]:
    """Field name -> OptionMeta for every declared option, in field order."""
    return {
        f.name: f.metadata[OPTION_META_KEY]
        for f in fields(options_class)
        if OPTION_META_KEY in f.metadata
    }


def get_option_meta(options_class: type, field_name: str) -> OptionMeta | None:
    return get_all_option_metas(options_class).get(field_name)


@dataclass
class GameOptions(DataClassJSONMixin):
    """Base for a game's options. Fields without option_field() are plain state."""

    def get_option_metas(self) -> dict[str, OptionMeta]:
        return get_all_option_metas(type(self))

    def set_option(self, name: str, value: str) -> bool:
        """Parse ``value`` into option ``name``.

        Unknown names and rejected values leave the options untouched and
        return False.
        """
        meta = get_option_meta(type(self), name)
        if meta is None:
            return False
        ok, converted = meta.validate_and_convert(value)
        if ok:
            setattr(self, name, converted)
        return ok

    def describe(self, locale: str = "en") -> list[dict[str, Any]]:
        """One dict per option: name, type, default, value, label and any range/choices."""
        described = []
        for name, meta in self.get_option_metas().items():
            value = getattr(self, name)
            info = {"name": name, **meta.describe(), "value": value}
            info["label"] = meta.get_label(locale, value)
            described.append(info)
        return described
