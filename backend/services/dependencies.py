# backend/services/dependencies.py
from fastapi import Depends

from database.executor import QueryExecutor, get_executor
from services.address_repository import AddressRepository
from services.business_repository import BusinessRepository
from services.catalog_repository import CatalogRepository
from services.measurement_repository import MeasurementRepository
from services.order_repository import OrderRepository
from services.product_repository import ProductRepository
from services.user_repository import UserRepository


def get_user_repository(executor: QueryExecutor = Depends(get_executor)) -> UserRepository:
    return UserRepository(executor)


def get_business_repository(executor: QueryExecutor = Depends(get_executor)) -> BusinessRepository:
    return BusinessRepository(executor)


def get_catalog_repository(executor: QueryExecutor = Depends(get_executor)) -> CatalogRepository:
    return CatalogRepository(executor)


def get_product_repository(executor: QueryExecutor = Depends(get_executor)) -> ProductRepository:
    return ProductRepository(executor)


def get_order_repository(executor: QueryExecutor = Depends(get_executor)) -> OrderRepository:
    return OrderRepository(executor)


def get_address_repository(executor: QueryExecutor = Depends(get_executor)) -> AddressRepository:
    return AddressRepository(executor)


def get_measurement_repository(executor: QueryExecutor = Depends(get_executor)) -> MeasurementRepository:
    return MeasurementRepository(executor)
