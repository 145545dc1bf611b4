"""Response schemas for the dashboard."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from catalogue.api.schemas import ProductResponse


class RecentOrderSummary(BaseModel):
    id: str
    guest_name: str
    order_date: datetime
    total_amount: Decimal
    item_count: int


class OverviewResponse(BaseModel):
    total_products: int
    total_categories: int
    low_stock_count: int
    low_stock_products: list[ProductResponse] = []
    recent_orders: list[RecentOrderSummary] = []
