"""
FSM States for the Lumen Viae bot.

Flows:
- Journal: free-text reflection after a Rosary or a consecration day
- Settings: reminder time input
"""

from aiogram.fsm.state import State, StatesGroup


class JournalStates(StatesGroup):
    """Writing a reflection."""

    waiting_for_text = State()


class SettingsStates(StatesGroup):
    waiting_for_reminder_time = State()  # HH:MM
