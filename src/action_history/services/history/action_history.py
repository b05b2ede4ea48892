"""
Action History - undo/redo manager over reversible actions.

Keeps two stacks: ``history`` holds applied actions, ``future`` holds
undone ones. Both are ordered oldest-first, the tail being the top.
"""

import logging
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from ...models.config.history_settings import validate_flag, validate_max_history
from .action_interface import Action

logger = logging.getLogger(__name__)


def _describe(action) -> str:
    return getattr(action, "description", "") or ""


class ActionHistory(QObject):
    """Undo/redo history of recorded actions."""

    # Emitted after every change of either stack
    history_changed = Signal()
    can_undo_changed = Signal(bool)
    can_redo_changed = Signal(bool)

    def __init__(self, max_history: Optional[int] = None,
                 clear_future_on_record: bool = False,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        validate_max_history(max_history)
        validate_flag("clear_future_on_record", clear_future_on_record)
        self._history: List[Action] = []
        self._future: List[Action] = []
        self._max_history = max_history
        self._clear_future_on_record = clear_future_on_record

    @classmethod
    def from_settings(cls, settings, parent: Optional[QObject] = None) -> 'ActionHistory':
        """Create a history configured from HistorySettings."""
        return cls(
            max_history=settings.max_history,
            clear_future_on_record=settings.clear_future_on_record,
            parent=parent,
        )

    @property
    def max_history(self) -> Optional[int]:
        return self._max_history

    @max_history.setter
    def max_history(self, value: Optional[int]) -> None:
        validate_max_history(value)
        could_undo, could_redo = self.can_undo(), self.can_redo()
        self._max_history = value
        if self._trim_history():
            self._notify(could_undo, could_redo)

    @property
    def clear_future_on_record(self) -> bool:
        return self._clear_future_on_record

    @clear_future_on_record.setter
    def clear_future_on_record(self, value: bool) -> None:
        validate_flag("clear_future_on_record", value)
        self._clear_future_on_record = value

    @property
    def history(self) -> Tuple[Action, ...]:
        """Applied actions, oldest first."""
        return tuple(self._history)

    @property
    def future(self) -> Tuple[Action, ...]:
        """Undone actions, oldest undone first."""
        return tuple(self._future)

    def record(self, action: Action) -> None:
        """Add an action to the history and apply it."""
        could_undo, could_redo = self.can_undo(), self.can_redo()

        if self.clear_future_on_record and self._future:
            logger.debug("Discarding %d redoable action(s)", len(self._future))
            self._future.clear()

        self._history.append(action)
        self._trim_history()
        logger.debug("Record: %s", _describe(action) or type(action).__name__)

        try:
            action.apply()
        finally:
            self._notify(could_undo, could_redo)

    def undo(self) -> None:
        """Revert the most recently applied action."""
        if not self._history:
            return

        could_undo, could_redo = self.can_undo(), self.can_redo()
        action = self._history.pop()
        self._future.append(action)
        logger.debug("Undo: %s", _describe(action) or type(action).__name__)

        try:
            action.revert()
        finally:
            self._notify(could_undo, could_redo)

    def redo(self) -> None:
        """Re-apply the most recently undone action."""
        if not self._future:
            return

        could_undo, could_redo = self.can_undo(), self.can_redo()
        action = self._future.pop()
        self._history.append(action)
        self._trim_history()
        logger.debug("Redo: %s", _describe(action) or type(action).__name__)

        try:
            action.apply()
        finally:
            self._notify(could_undo, could_redo)

    def can_undo(self) -> bool:
        return len(self._history) > 0

    def can_redo(self) -> bool:
        return len(self._future) > 0

    def undo_text(self) -> str:
        """Description of the action undo() would revert."""
        return _describe(self._history[-1]) if self._history else ""

    def redo_text(self) -> str:
        """Description of the action redo() would re-apply."""
        return _describe(self._future[-1]) if self._future else ""

    def count(self) -> int:
        return len(self._history) + len(self._future)

    def clear(self) -> None:
        """Forget all actions without applying or reverting them."""
        if not self._history and not self._future:
            return

        could_undo, could_redo = self.can_undo(), self.can_redo()
        self._history.clear()
        self._future.clear()
        logger.debug("History cleared")
        self._notify(could_undo, could_redo)

    def _trim_history(self) -> bool:
        """Evict the oldest applied actions above max_history."""
        if self._max_history is None:
            return False

        overflow = len(self._history) - self._max_history
        if overflow <= 0:
            return False

        del self._history[:overflow]
        logger.debug("Evicted %d oldest action(s)", overflow)
        return True

    def _notify(self, could_undo: bool, could_redo: bool) -> None:
        self.history_changed.emit()

        if self.can_undo() != could_undo:
            self.can_undo_changed.emit(self.can_undo())
        if self.can_redo() != could_redo:
            self.can_redo_changed.emit(self.can_redo())

