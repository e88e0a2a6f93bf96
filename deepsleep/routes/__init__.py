from deepsleep.routes.dashboard import router as dashboard_router
from deepsleep.routes.records import router as records_router

__all__ = [
    'dashboard_router',
    'records_router',
]
