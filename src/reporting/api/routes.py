"""Dashboard endpoint."""

from fastapi import APIRouter

from catalogue.api.schemas import ProductResponse
from reporting.api.schemas import OverviewResponse, RecentOrderSummary
from reporting.overview import build_overview

dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@dashboard_router.get("", response_model=OverviewResponse)
async def dashboard() -> OverviewResponse:
    overview = build_overview()
    return OverviewResponse(
        total_products=overview.total_products,
        total_categories=overview.total_categories,
        low_stock_count=len(overview.low_stock_products),
        low_stock_products=[
            ProductResponse.from_listing(product, category) for product, category in overview.low_stock_products
        ],
        recent_orders=[
            RecentOrderSummary(
                id=str(detail.order.id),
                guest_name=detail.order.guest_name,
                order_date=detail.order.placed_at(),
                total_amount=detail.order.total(),
                item_count=sum(line.item.quantity for line in detail.lines),
            )
            for detail in overview.recent_orders
        ],
    )
