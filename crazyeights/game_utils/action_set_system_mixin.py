"""Mixin providing action set management for games."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Actor

from .actions import Action, ActionSet, ResolvedAction


class ActionSetSystemMixin:
    """Mixin providing action set management (get, add, find, resolve).

    Expects on the Game class:
        - self.actor_action_sets: dict[str, list[ActionSet]]
    """

    def get_action_sets(self, actor: "Actor") -> list[ActionSet]:
        """Get ordered list of action sets for one side."""
        return self.actor_action_sets.get(actor.value, [])

    def get_action_set(self, actor: "Actor", name: str) -> ActionSet | None:
        """Get a specific action set by name."""
        for action_set in self.get_action_sets(actor):
            if action_set.name == name:
                return action_set
        return None

    def add_action_set(self, actor: "Actor", action_set: ActionSet) -> None:
        """Add an action set (appended to end of list)."""
        self.actor_action_sets.setdefault(actor.value, []).append(action_set)

    def find_action(self, actor: "Actor", action_id: str) -> Action | None:
        """Find an action by ID across all of a side's action sets."""
        for action_set in self.get_action_sets(actor):
            action = action_set.get_action(action_id)
            if action:
                return action
        return None

    def resolve_action(self, actor: "Actor", action: Action) -> ResolvedAction:
        """Resolve a single action's state."""
        for action_set in self.get_action_sets(actor):
            if action_set.get_action(action.id):
                return action_set.resolve_action(self, actor, action)
        # Fallback - resolve with defaults
        return ResolvedAction(
            action=action,
            label=action.label,
            enabled=True,
            disabled_reason=None,
            visible=True,
        )

    def get_all_visible_actions(self, actor: "Actor") -> list[ResolvedAction]:
        """Get all visible actions for a side, in order."""
        result = []
        for action_set in self.get_action_sets(actor):
            result.extend(action_set.get_visible_actions(self, actor))
        return result
