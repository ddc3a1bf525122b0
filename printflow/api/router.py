from fastapi import APIRouter

from printflow.domains.orders.api import router as orders_router
from printflow.domains.pricing.api import router as pricing_router

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(pricing_router)
api_router.include_router(orders_router)
