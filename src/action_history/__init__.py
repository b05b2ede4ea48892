"""Action History - undo/redo of reversible actions."""

from .services.history import (
    Action,
    ActionHistory,
    CallbackAction,
    ClearItemsAction,
    InsertItemAction,
    RemoveItemAction,
    SetAttributeAction,
)
from .models.config.history_settings import HistorySettings

__version__ = "1.0.0"

__all__ = [
    'Action',
    'ActionHistory',
    'CallbackAction',
    'ClearItemsAction',
    'HistorySettings',
    'InsertItemAction',
    'RemoveItemAction',
    'SetAttributeAction',
]
