"""
Crazy Eights desktop client

A wxPython window around CrazyEightsGame:
- One button per card in hand, enabled only when the play is legal
- Draw / suit / new round buttons from the game's action set
- Suit picker, rules and game-over dialogs
"""

import wx

from ..games.crazyeights.game import CrazyEightsGame, CrazyEightsOptions
from ..logging_utils import get_logger
from .main_window import MainWindow

logger = get_logger(__name__)


def run_app(options: CrazyEightsOptions | None = None, seed: int | None = None) -> int:
    """Open the game window and run the wx main loop until it closes."""
    app = wx.App(False)

    game = CrazyEightsGame(options=options or CrazyEightsOptions(), seed=seed)
    logger.info("Starting Crazy Eights (locale=%s, seed=%s)", game.options.locale, seed)

    frame = MainWindow(game)
    frame.Show()
    wx.CallAfter(frame.start)
    app.MainLoop()
    return 0
