"""Registration of all bot routers."""

from aiogram import Dispatcher

from .consecration import router as consecration_router
from .fallback import router as fallback_router
from .journal import router as journal_router
from .rosary import router as rosary_router
from .settings import router as settings_router
from .start import router as start_router
from .stats import router as stats_router


def register_routers(dp: Dispatcher) -> None:
    """
    Include all routers in the dispatcher.

    AICODE-NOTE: start_router goes first so /cancel wins over FSM text
    handlers; fallback_router must be LAST.
    """
    dp.include_routers(
        start_router,
        settings_router,
        journal_router,
        rosary_router,
        stats_router,
        consecration_router,
        fallback_router,
    )
