# backend/models/__init__.py
from .user_model import User, Role, UserRole
from .business_model import BusinessInformation, TailorDateAvailability, TailorItemPrice
from .product_model import (
    Brand, Category, ProductType, Product,
    ProductPrice, ProductCompliance, ProductImage, UserProduct,
)
from .order_model import Order, OrderItem
from .address_model import DeliveryAddress, OrderDeliveryAddressMapping
from .measurement_model import Measurement, ItemTypeMeasurementKey, OrderMeasurementBoyAssignment

ROLE_NAMES = ("Admin", "Customer", "Seller", "Tailor", "MeasurementBoy", "Taylorseller")
