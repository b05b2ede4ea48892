from .history_settings import HistorySettings

__all__ = ['HistorySettings']
