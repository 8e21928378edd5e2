"""Main window for Crazy Eights."""

import wx

from ..game_utils.bot_helper import TICKS_PER_SECOND
from ..game_utils.cards import SUIT_SYMBOLS
from ..games.base import Actor
from ..games.crazyeights.game import CrazyEightsGame, Phase
from ..logging_utils import get_logger
from ..messages.localization import Localization
from .dialogs import GameOverDialog, RulesDialog, SuitDialog

logger = get_logger(__name__)


class MainWindow(wx.Frame):
    """Table view. Reads the game's snapshot and forwards clicks as actions."""

    def __init__(self, game: CrazyEightsGame):
        self.game = game
        self.locale = game.options.locale
        super().__init__(
            parent=None,
            title=Localization.get(self.locale, game.get_name_key()),
            size=(900, 520),
        )

        self._last_state = None
        self._dialog_open = False
        self._shown_round: int | None = None

        self._create_ui()

        # Drive the game clock (bot thinking pause) at the game's tick rate
        self.timer = wx.Timer(self)
        self.Bind(wx.EVT_TIMER, self.on_timer, self.timer)
        self.Bind(wx.EVT_CLOSE, self.on_close)

        self.refresh()

    def _create_ui(self):
        """Create the UI components."""
        self.panel = wx.Panel(self)
        sizer = wx.BoxSizer(wx.VERTICAL)

        self.status_text = wx.StaticText(self.panel, label="")
        status_font = self.status_text.GetFont()
        status_font.PointSize += 3
        self.status_text.SetFont(status_font.Bold())
        sizer.Add(self.status_text, 0, wx.ALL | wx.EXPAND, 10)

        info_sizer = wx.BoxSizer(wx.HORIZONTAL)
        self.opponent_text = wx.StaticText(self.panel, label="")
        self.deck_text = wx.StaticText(self.panel, label="")
        self.top_text = wx.StaticText(self.panel, label="")
        self.suit_text = wx.StaticText(self.panel, label="")
        for text in (self.opponent_text, self.deck_text, self.top_text, self.suit_text):
            info_sizer.Add(text, 1, wx.RIGHT, 20)
        sizer.Add(info_sizer, 0, wx.ALL | wx.EXPAND, 10)

        hand_label = wx.StaticText(
            self.panel, label=Localization.get(self.locale, "crazyeights-your-hand")
        )
        sizer.Add(hand_label, 0, wx.LEFT | wx.TOP, 10)

        self.hand_sizer = wx.WrapSizer(wx.HORIZONTAL)
        sizer.Add(self.hand_sizer, 1, wx.ALL | wx.EXPAND, 10)

        self.action_sizer = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(self.action_sizer, 0, wx.ALL | wx.CENTER, 10)

        self.panel.SetSizer(sizer)

    def start(self):
        """Show the rules if configured, deal and start the clock."""
        if self.game.options.show_rules:
            with RulesDialog(self, self.locale) as dialog:
                dialog.ShowModal()
        self.game.init_round()
        self.refresh()
        self.timer.Start(1000 // TICKS_PER_SECOND)

    # ==========================================================================
    # Rendering
    # ==========================================================================

    def _state_key(self):
        game = self.game
        return (
            game.round,
            game.phase,
            game.turn,
            game.current_suit,
            len(game.player_hand),
            len(game.ai_hand),
            len(game.discard_pile),
            game.deck.size(),
        )

    def refresh(self):
        """Redraw everything from a fresh snapshot."""
        snap = self.game.snapshot()
        self._last_state = self._state_key()

        self.status_text.SetLabel(snap.message)
        self.opponent_text.SetLabel(
            Localization.get(self.locale, "crazyeights-opponent-cards", count=len(snap.ai_hand))
        )
        self.deck_text.SetLabel(
            Localization.get(self.locale, "crazyeights-deck-count", count=snap.deck_count)
        )
        top = snap.top_card.short_name() if snap.top_card else "-"
        self.top_text.SetLabel(Localization.get(self.locale, "crazyeights-top-card", card=top))
        if snap.current_suit:
            suit = f"{SUIT_SYMBOLS[snap.current_suit]} {self.game.suit_name(snap.current_suit)}"
        else:
            suit = "-"
        self.suit_text.SetLabel(Localization.get(self.locale, "crazyeights-active-suit", suit=suit))

        self.hand_sizer.Clear(delete_windows=True)
        self.action_sizer.Clear(delete_windows=True)
        for resolved in self.game.get_actions(Actor.PLAYER):
            action_id = resolved.action.id
            if action_id.startswith("play_card_"):
                parent_sizer = self.hand_sizer
            else:
                parent_sizer = self.action_sizer
            button = wx.Button(self.panel, label=resolved.label)
            button.Enable(resolved.enabled)
            button.Bind(wx.EVT_BUTTON, lambda event, aid=action_id: self.on_action(aid))
            parent_sizer.Add(button, 0, wx.ALL, 4)

        self.panel.Layout()

    # ==========================================================================
    # Events
    # ==========================================================================

    def on_action(self, action_id: str):
        if not self.game.execute_action(Actor.PLAYER, action_id):
            logger.debug("Action %s was not accepted", action_id)
        # The clicked button is rebuilt by refresh(), so defer until its handler returns
        wx.CallAfter(self._after_action)

    def _after_action(self):
        self.refresh()
        self._prompt_for_phase()

    def on_timer(self, event):
        self.game.on_tick()
        if self._state_key() != self._last_state:
            self.refresh()
            wx.CallAfter(self._prompt_for_phase)

    def _prompt_for_phase(self):
        """Open the suit picker or game-over dialog the current phase calls for."""
        if self._dialog_open:
            return
        phase = self.game.phase
        if phase == Phase.SUIT_SELECTION:
            self._dialog_open = True
            try:
                with SuitDialog(self, self.locale) as dialog:
                    if dialog.ShowModal() == wx.ID_OK and dialog.suit is not None:
                        self.game.choose_suit(dialog.suit)
            finally:
                self._dialog_open = False
            self.refresh()
            # A last-card eight ends the round here
            wx.CallAfter(self._prompt_for_phase)
        elif phase == Phase.GAME_OVER and self._shown_round != self.game.round:
            self._shown_round = self.game.round
            self._dialog_open = True
            try:
                with GameOverDialog(
                    self,
                    self.locale,
                    player_won=self.game.winner == Actor.PLAYER,
                    quote=self.game.win_message,
                ) as dialog:
                    play_again = dialog.ShowModal() == wx.ID_OK
            finally:
                self._dialog_open = False
            if play_again:
                self.game.init_round()
            self.refresh()

    def on_close(self, event):
        self.timer.Stop()
        event.Skip()
