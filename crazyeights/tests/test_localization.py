"""Tests for message lookup."""

from pathlib import Path

from crazyeights.messages.localization import DEFAULT_LOCALES_DIR, Localization, get_message


class TestLocalization:
    """Fluent message lookup."""

    def test_bundled_locales(self):
        locales = {path.name for path in Path(DEFAULT_LOCALES_DIR).iterdir() if path.is_dir()}
        assert {"en", "zh"} <= locales

    def test_message_with_variable(self):
        assert Localization.get("en", "crazyeights-deck-count", count=12) == "Draw pile: 12"
        assert get_message("en", "crazyeights-top-card", card="8♠") == "Top card: 8♠"

    def test_plural(self):
        assert Localization.get("en", "crazyeights-opponent-cards", count=1) == "Opponent: 1 card"
        assert Localization.get("en", "crazyeights-opponent-cards", count=5) == "Opponent: 5 cards"

    def test_missing_message_returns_id(self):
        assert Localization.get("en", "no-such-message") == "no-such-message"

    def test_every_english_message_exists_in_chinese(self):
        def ids(locale):
            text = (Path(DEFAULT_LOCALES_DIR) / locale / "crazyeights.ftl").read_text(
                encoding="utf-8"
            )
            return {
                line.split("=", 1)[0].strip()
                for line in text.splitlines()
                if "=" in line and line[:1].isalpha()
            }

        assert ids("en") == ids("zh")

    def test_format_list_or(self):
        text = Localization.format_list_or("en", ["hearts", "clubs", "spades"])
        assert text == "hearts, clubs, or spades"
