# backend/gateway/gateway_router.py
from fastapi import APIRouter

from routers.auth_router import router as auth_router
from routers.business_router import router as business_router
from routers.measurement_router import router as measurement_router
from routers.orders_router import router as orders_router
from routers.products_router import router as products_router

gateway_router = APIRouter()

gateway_router.include_router(auth_router)          # /api/auth/...
gateway_router.include_router(business_router)      # /api/business/..., /api/businesses
gateway_router.include_router(products_router)      # /api/products/...
gateway_router.include_router(orders_router)        # /api/createOrder, /api/orders/..., /api/my-orders
gateway_router.include_router(measurement_router)   # /api/measurement-boy/...
