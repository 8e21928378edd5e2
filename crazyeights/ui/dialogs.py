"""Dialogs for the Crazy Eights window."""

import wx

from ..game_utils.cards import SUITS, SUIT_SYMBOLS, Suit
from ..messages.localization import Localization


class SuitDialog(wx.Dialog):
    """Suit picker shown after the player's eight."""

    def __init__(self, parent, locale: str):
        super().__init__(
            parent, title=Localization.get(locale, "crazyeights-choose-suit-title")
        )
        self.suit: Suit | None = None

        sizer = wx.BoxSizer(wx.VERTICAL)
        button_sizer = wx.BoxSizer(wx.HORIZONTAL)
        for suit in SUITS:
            label = f"{SUIT_SYMBOLS[suit]} {Localization.get(locale, f'suit-{suit.value}')}"
            button = wx.Button(self, label=label)
            button.Bind(wx.EVT_BUTTON, lambda event, s=suit: self.on_suit(s))
            button_sizer.Add(button, 0, wx.ALL, 5)
        sizer.Add(button_sizer, 0, wx.ALL | wx.CENTER, 10)

        self.SetSizerAndFit(sizer)
        self.CenterOnParent()

    def on_suit(self, suit: Suit):
        self.suit = suit
        self.EndModal(wx.ID_OK)


class RulesDialog(wx.Dialog):
    """Rules summary."""

    def __init__(self, parent, locale: str):
        super().__init__(
            parent,
            title=Localization.get(locale, "crazyeights-rules-title"),
            size=(520, 300),
        )
        sizer = wx.BoxSizer(wx.VERTICAL)

        text = wx.StaticText(self, label=Localization.get(locale, "crazyeights-rules"))
        text.Wrap(480)
        sizer.Add(text, 1, wx.ALL | wx.EXPAND, 15)

        close_btn = wx.Button(self, wx.ID_OK, Localization.get(locale, "crazyeights-close"))
        close_btn.SetDefault()
        sizer.Add(close_btn, 0, wx.ALL | wx.CENTER, 10)

        self.SetSizer(sizer)
        self.CenterOnParent()


class GameOverDialog(wx.Dialog):
    """Announces the winner; OK starts another round."""

    def __init__(self, parent, locale: str, player_won: bool, quote: str):
        super().__init__(
            parent, title=Localization.get(locale, "crazyeights-game-over-title")
        )
        sizer = wx.BoxSizer(wx.VERTICAL)

        key = "crazyeights-winner-player" if player_won else "crazyeights-winner-ai"
        title = wx.StaticText(self, label=Localization.get(locale, key))
        title_font = title.GetFont()
        title_font.PointSize += 6
        title.SetFont(title_font.Bold())
        sizer.Add(title, 0, wx.ALL | wx.CENTER, 15)

        if quote:
            quote_text = wx.StaticText(self, label=quote)
            quote_text.Wrap(400)
            sizer.Add(quote_text, 0, wx.LEFT | wx.RIGHT | wx.CENTER, 15)

        button_sizer = wx.BoxSizer(wx.HORIZONTAL)
        again_btn = wx.Button(
            self, wx.ID_OK, Localization.get(locale, "crazyeights-play-again")
        )
        again_btn.SetDefault()
        button_sizer.Add(again_btn, 0, wx.RIGHT, 5)
        close_btn = wx.Button(
            self, wx.ID_CANCEL, Localization.get(locale, "crazyeights-close")
        )
        button_sizer.Add(close_btn, 0)
        sizer.Add(button_sizer, 0, wx.ALL | wx.CENTER, 15)

        self.SetSizerAndFit(sizer)
        self.CenterOnParent()
