"""Declarative actions: what a side may do, and whether it may do it now."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from mashumaro.mixins.json import DataClassJSONMixin

if TYPE_CHECKING:
    from ..games.base import Actor, Game


class Visibility(str, Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"


@dataclass
class Action(DataClassJSONMixin):
    """
    One thing a side can do, e.g. play a given card or draw.

    Callbacks are stored as names of methods on the game so the whole set
    survives a save/reload. They are called as:

    - handler(actor, action_id) -> bool
    - is_enabled(actor, *, action_id) -> reason key, or None when allowed
    - is_hidden(actor, *, action_id) -> Visibility
    - get_label(actor, action_id) -> str
    """

    id: str
    label: str  # Shown as-is unless get_label is set
    handler: str
    is_enabled: str
    is_hidden: str
    get_label: str | None = None


@dataclass
class ResolvedAction:
    """An action with its callbacks evaluated for one side. Never stored."""

    action: Action
    label: str
    enabled: bool
    disabled_reason: str | None
    visible: bool


@dataclass
class ActionSet(DataClassJSONMixin):
    """Actions under one name ("hand", "turn"), kept in insertion order."""

    name: str
    _actions: dict[str, Action] = field(default_factory=dict)
    _order: list[str] = field(default_factory=list)

    def add(self, action: Action) -> None:
        """Add ``action``, or replace the one with the same id in place."""
        if action.id not in self._actions:
            self._order.append(action.id)
        self._actions[action.id] = action

    def remove(self, action_id: str) -> None:
        if self._actions.pop(action_id, None) is not None:
            self._order.remove(action_id)

    def remove_by_prefix(self, prefix: str) -> None:
        for action_id in [aid for aid in self._order if aid.startswith(prefix)]:
            self.remove(action_id)

    def get_action(self, action_id: str) -> Action | None:
        return self._actions.get(action_id)

    def resolve_action(self, game: "Game", actor: "Actor", action: Action) -> ResolvedAction:
        """Evaluate ``action``'s callbacks on ``game`` for ``actor``."""

        def callback(name: str | None):
            return getattr(game, name, None) if name else None

        is_enabled = callback(action.is_enabled)
        reason = is_enabled(actor, action_id=action.id) if is_enabled else None

        is_hidden = callback(action.is_hidden)
        visible = (
            is_hidden(actor, action_id=action.id) == Visibility.VISIBLE if is_hidden else True
        )

        get_label = callback(action.get_label)
        label = get_label(actor, action.id) if get_label else action.label

        return ResolvedAction(
            action=action,
            label=label,
            enabled=reason is None,
            disabled_reason=reason,
            visible=visible,
        )

    def resolve_actions(self, game: "Game", actor: "Actor") -> list[ResolvedAction]:
        return [self.resolve_action(game, actor, self._actions[aid]) for aid in self._order]

    def get_visible_actions(self, game: "Game", actor: "Actor") -> list[ResolvedAction]:
        """Visible actions, disabled ones included so the front end can grey them out."""
        return [resolved for resolved in self.resolve_actions(game, actor) if resolved.visible]
