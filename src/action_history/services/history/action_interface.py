from abc import ABC, abstractmethod


class Action(ABC):
    """A reversible edit recorded in an ActionHistory.

    ``apply()`` and ``revert()`` may be called many times, alternating:
    each ``revert()`` must exactly undo the latest ``apply()``, and an
    ``apply()`` after a ``revert()`` must reproduce the original effect.
    Everything needed for that is captured when the action is built.

    ActionHistory only calls ``apply()`` and ``revert()``, so any object
    providing both works; subclassing is optional.
    """

    def __init__(self, description: str = ""):
        # Shown as "Undo <description>" / "Redo <description>"
        self.description = description

    @abstractmethod
    def apply(self):
        """Perform the forward effect."""

    @abstractmethod
    def revert(self):
        """Restore the state from before the most recent apply()."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"
