from app.api.routes.auth import router as auth_router
from app.api.routes.properties import router as properties_router
from app.api.routes.customers import router as customers_router
from app.api.routes.receipts import router as receipts_router
from app.api.routes.transactions import router as transactions_router
from app.api.routes.rental_contracts import router as rental_contracts_router
from app.api.routes.documents import router as documents_router
from app.api.routes.rentals import router as rentals_router
from app.api.routes.dashboard import router as dashboard_router
from app.api.routes.reminders import router as reminders_router
from app.api.routes.upload import router as upload_router

__all__ = [
    "auth_router",
    "properties_router",
    "customers_router",
    "receipts_router",
    "transactions_router",
    "rental_contracts_router",
    "documents_router",
    "rentals_router",
    "dashboard_router",
    "reminders_router",
    "upload_router",
]
