"""History System - Command pattern for undo/redo."""

from .action_interface import Action
from .action_history import ActionHistory
from .actions import (
    CallbackAction,
    ClearItemsAction,
    InsertItemAction,
    RemoveItemAction,
    SetAttributeAction,
)

__all__ = [
    'Action',
    'ActionHistory',
    'CallbackAction',
    'ClearItemsAction',
    'InsertItemAction',
    'RemoveItemAction',
    'SetAttributeAction',
]
