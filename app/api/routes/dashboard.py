from fastapi import APIRouter, Depends, Query

from app.core.ids import utc_now
from app.database import JsonStore, get_store
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import dashboard_summary

router = APIRouter()


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    period: str = Query("this_month", description="this_week, this_month, this_year or all"),
    store: JsonStore = Depends(get_store),
):
    """Dashboard totals: revenue/expenses for the period, property and rental counts"""
    return dashboard_summary(store.load(), period, utc_now().date())
