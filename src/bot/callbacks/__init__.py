# Callback Data Factories
from .data import (
    CategoryCallback,
    ConsecrationAction,
    ConsecrationCallback,
    LanguageCallback,
    ReminderAction,
    ReminderCallback,
)

__all__ = [
    "CategoryCallback",
    "LanguageCallback",
    "ConsecrationCallback",
    "ReminderCallback",
    "ConsecrationAction",
    "ReminderAction",
]
