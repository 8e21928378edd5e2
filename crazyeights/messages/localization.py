"""Fluent message lookup for every string the player sees."""

from pathlib import Path

from fluent_compiler.bundle import FluentBundle
from babel.lists import format_list

DEFAULT_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
FALLBACK_LOCALE = "en"


class Localization:
    """
    Process-wide message catalogue.

    Each locale is a directory of .ftl files under ``locales/``; all files
    of a locale are compiled into one bundle the first time it is used.
    Locales without a directory are served from English.
    """

    _bundles: dict[str, FluentBundle] = {}
    _locales_dir: Path | None = None

    @classmethod
    def init(cls, locales_dir: Path | str = DEFAULT_LOCALES_DIR) -> None:
        """Point the catalogue at ``locales_dir`` and drop compiled bundles."""
        cls._locales_dir = Path(locales_dir)
        cls._bundles = {}

    @classmethod
    def _get_bundle(cls, locale: str) -> FluentBundle:
        bundle = cls._bundles.get(locale)
        if bundle is not None:
            return bundle

        if cls._locales_dir is None:
            raise RuntimeError("Call Localization.init() before looking up messages")

        source_locale = locale
        source_dir = cls._locales_dir / locale
        if not source_dir.is_dir():
            source_locale = FALLBACK_LOCALE
            source_dir = cls._locales_dir / FALLBACK_LOCALE
        sources = [path.read_text(encoding="utf-8") for path in sorted(source_dir.glob("*.ftl"))]
        if not sources:
            raise RuntimeError(f"No .ftl files for '{locale}' under {cls._locales_dir}")

        bundle = FluentBundle.from_string(source_locale, "\n".join(sources))
        cls._bundles[locale] = bundle
        return bundle

    # Fluent wraps placeables in FSI/PDI marks; the window and the terminal
    # show them as stray glyphs.
    _ISOLATE_MARKS = "\u2068\u2069"

    @classmethod
    def get(cls, locale: str, message_id: str, **kwargs) -> str:
        """
        Render ``message_id`` in ``locale``.

        Never raises: a message that cannot be rendered comes back as its id.
        """
        try:
            text, _errors = cls._get_bundle(locale).format(message_id, kwargs)
        except Exception:
            return message_id
        for mark in cls._ISOLATE_MARKS:
            text = text.replace(mark, "")
        return text

    @classmethod
    def format_list_or(cls, locale: str, items: list[str]) -> str:
        """Join ``items`` as alternatives ("a, b, or c") in ``locale``."""
        return format_list(items, style="or", locale=locale)


def get_message(locale: str, message_id: str, **kwargs) -> str:
    """Shorthand for :meth:`Localization.get`."""
    return Localization.get(locale, message_id, **kwargs)
