"""Mixin providing action execution for games."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Actor


class ActionExecutionMixin:
    """Mixin providing action execution.

    Expects on the Game class:
        - self.find_action(actor, action_id) -> Action | None
        - self.resolve_action(actor, action) -> ResolvedAction
        - self.logger
    """

    def execute_action(self, actor: "Actor", action_id: str) -> bool:
        """Execute an action for one side.

        Returns:
            False when the action is unknown or disabled, otherwise the
            handler's own result.
        """
        action = self.find_action(actor, action_id)
        if not action:
            self.logger.debug("Unknown action %s for %s", action_id, actor.value)
            return False

        # Check if action is enabled using declarative callback
        resolved = self.resolve_action(actor, action)
        if not resolved.enabled:
            self.logger.debug(
                "Rejected %s for %s: %s", action_id, actor.value, resolved.disabled_reason
            )
            return False

        # Look up the handler method by name on this game object
        handler = getattr(self, action.handler, None)
        if not handler:
            return False
        return bool(handler(actor, action_id))
