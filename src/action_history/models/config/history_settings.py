from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class HistorySettings:
    """Configuration of an ActionHistory."""

    # None - unbounded history
    max_history: Optional[int] = None

    # Drop redoable actions when a new action is recorded
    clear_future_on_record: bool = False

    def __post_init__(self):
        validate_max_history(self.max_history)
        validate_flag('clear_future_on_record', self.clear_future_on_record)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        return {
            'max_history': self.max_history,
            'clear_future_on_record': self.clear_future_on_record,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistorySettings':
        """Create from a dictionary."""
        return cls(
            max_history=data.get('max_history', cls.max_history),
            clear_future_on_record=data.get('clear_future_on_record', cls.clear_future_on_record),
        )


def validate_max_history(value: Optional[int]) -> None:
    """Accept None or an int of at least 1."""
    if value is None:
        return
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"max_history must be None or an int, got {value!r}")
    if value < 1:
        raise ValueError(f"max_history must be None or at least 1, got {value}")


def validate_flag(name: str, value: bool) -> None:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a bool, got {value!r}")
