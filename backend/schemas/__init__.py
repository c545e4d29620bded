# backend/schemas/__init__.py

from .common import success_response

# users
from .users import RegisterPayload, LoginPayload, UserUpdate, RoleAssignment

# business
from .business import (
    BusinessPayload, BusinessUpdate, TailorAvailabilityIn, TailorItemPriceIn, TailorItemPricesPayload,
)

# products
from .products import ProductCreateForm, ProductUpdateForm

# orders, addresses, measurements
from .orders import (
    AddressIn, AddressUpdate, OrderAddressCreate,
    OrderCreate, OrderUpdate, OrderItemIn, OrderItemUpdate,
    MeasurementSubmission,
)

__all__ = [
    "success_response",
    # users
    "RegisterPayload", "LoginPayload", "UserUpdate", "RoleAssignment",
    # business
    "BusinessPayload", "BusinessUpdate", "TailorAvailabilityIn", "TailorItemPriceIn", "TailorItemPricesPayload",
    # products
    "ProductCreateForm", "ProductUpdateForm",
    # orders
    "AddressIn", "AddressUpdate", "OrderAddressCreate",
    "OrderCreate", "OrderUpdate", "OrderItemIn", "OrderItemUpdate",
    "MeasurementSubmission",
]
