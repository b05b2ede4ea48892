"""
Stock actions for common edits on plain Python objects and lists.

Each action captures everything revert() needs when it is constructed.
"""

from typing import Any, Callable, List, Optional

from .action_interface import Action


class CallbackAction(Action):
    """Action built from a pair of callables."""

    def __init__(self, apply_func: Callable[[], None],
                 revert_func: Callable[[], None],
                 description: str = ""):
        super().__init__(description)
        self.apply_func = apply_func
        self.revert_func = revert_func

    def apply(self):
        self.apply_func()

    def revert(self):
        self.revert_func()


class SetAttributeAction(Action):
    """Change one attribute of an object."""

    def __init__(self, target: Any, name: str, new_value: Any, description: str = ""):
        super().__init__(description or f"Set {name}")
        self.target = target
        self.name = name
        self.old_value = getattr(target, name)
        self.new_value = new_value

    def apply(self):
        setattr(self.target, self.name, self.new_value)

    def revert(self):
        setattr(self.target, self.name, self.old_value)


class InsertItemAction(Action):
    """Insert an item into a list (append when no index is given)."""

    def __init__(self, items: List, item: Any, index: Optional[int] = None,
                 description: str = ""):
        super().__init__(description or "Insert item")
        self.items = items
        self.item = item
        self.index = index
        self._position: Optional[int] = None

    def apply(self):
        size = len(self.items)
        if self.index is None:
            self._position = size
        elif self.index < 0:
            self._position = max(0, size + self.index)
        else:
            self._position = min(self.index, size)
        self.items.insert(self._position, self.item)

    def revert(self):
        del self.items[self._position]


class RemoveItemAction(Action):
    """Remove the item at an index from a list."""

    def __init__(self, items: List, index: int, description: str = ""):
        super().__init__(description or "Remove item")
        if not -len(items) <= index < len(items):
            raise IndexError(f"index {index} out of range for {len(items)} item(s)")

        self.items = items
        self.index = index % len(items)
        self.item = items[self.index]

    def apply(self):
        del self.items[self.index]

    def revert(self):
        self.items.insert(self.index, self.item)


class ClearItemsAction(Action):
    """Remove every item from a list."""

    def __init__(self, items: List, description: str = ""):
        super().__init__(description or "Clear items")
        self.items = items
        self.saved_items = list(items)

    def apply(self):
        self.items.clear()

    def revert(self):
        self.items.clear()
        self.items.extend(self.saved_items)
