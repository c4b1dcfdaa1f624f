from app.schemas.common import CamelModel


class FinancialSummary(CamelModel):
    revenue: float
    expenses: float
    net_income: float
    revenue_change: float
    expense_change: float


class PropertySummary(CamelModel):
    total: int
    available: int
    rented: int
    sold: int


class RentalSummary(CamelModel):
    total: int
    paid: int
    overdue: int
    unpaid: int


class DashboardResponse(CamelModel):
    financial: FinancialSummary
    properties: PropertySummary
    rentals: RentalSummary
    period: str
