# backend/schemas/orders.py
from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

AddressKind = Literal["Delivery", "Measurement"]


class AddressIn(BaseModel):
    fullName: str = Field(min_length=2, max_length=100)
    phoneNumber: str = Field(min_length=10, max_length=15, pattern=r"^[\+]?[0-9\s\-\(\)]+$")
    alternatePhone: Optional[str] = Field(default=None, max_length=15)
    addressLine1: str = Field(min_length=1, max_length=255)
    addressLine2: Optional[str] = Field(default=None, max_length=255)
    landmark: Optional[str] = Field(default=None, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    pincode: str = Field(pattern=r"^\d{4,10}$")
    addressType: Optional[str] = Field(default="Home", max_length=20)
    deliveryInstructions: Optional[str] = Field(default=None, max_length=500)
    googleMapLink: Optional[str] = Field(default=None, max_length=500)


class AddressUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fullName: Optional[str] = Field(default=None, min_length=2, max_length=100)
    phoneNumber: Optional[str] = Field(default=None, min_length=10, max_length=15)
    alternatePhone: Optional[str] = Field(default=None, max_length=15)
    addressLine1: Optional[str] = Field(default=None, min_length=1, max_length=255)
    addressLine2: Optional[str] = Field(default=None, max_length=255)
    landmark: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, min_length=1, max_length=100)
    pincode: Optional[str] = Field(default=None, pattern=r"^\d{4,10}$")
    addressType: Optional[str] = Field(default=None, max_length=20)
    deliveryInstructions: Optional[str] = Field(default=None, max_length=500)
    googleMapLink: Optional[str] = Field(default=None, max_length=500)


class OrderAddressCreate(BaseModel):
    """Attach an address to an order, either an existing one or a new record."""
    deliveryAddressType: AddressKind = "Delivery"
    deliveryAddressId: Optional[int] = Field(default=None, gt=0)
    address: Optional[AddressIn] = None


class OrderItemIn(BaseModel):
    # itemTotal is computed by the database; a client value is dropped
    model_config = ConfigDict(extra="ignore")

    itemType: Optional[str] = Field(default=None, max_length=100)
    productCode: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    shopId: Optional[int] = Field(default=None, gt=0)
    tailorId: Optional[int] = Field(default=None, gt=0)
    quantity: int = Field(default=1, gt=0)
    unit: Optional[str] = Field(default=None, max_length=20)
    unitPrice: float = Field(default=0, ge=0)
    status: Optional[str] = Field(default="Pending", max_length=30)
    notes: Optional[str] = None
    measurementDate: Optional[date] = None
    measurementSlot: Optional[str] = Field(default=None, max_length=50)
    stitchingDate: Optional[date] = None


class OrderItemUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    itemType: Optional[str] = Field(default=None, max_length=100)
    productCode: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    shopId: Optional[int] = Field(default=None, gt=0)
    tailorId: Optional[int] = Field(default=None, gt=0)
    quantity: Optional[int] = Field(default=None, gt=0)
    unit: Optional[str] = Field(default=None, max_length=20)
    unitPrice: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = Field(default=None, max_length=30)
    notes: Optional[str] = None
    measurementDate: Optional[date] = None
    measurementSlot: Optional[str] = Field(default=None, max_length=50)
    stitchingDate: Optional[date] = None
    isMeasurementDone: Optional[bool] = None


class OrderCreate(BaseModel):
    customerId: Optional[int] = Field(default=None, gt=0)
    orderDate: Optional[datetime] = None
    orderType: Optional[str] = Field(default=None, max_length=50)
    totalAmount: Optional[float] = Field(default=None, ge=0)
    paymentStatus: Optional[str] = Field(default="Pending", max_length=30)
    advancePaid: Optional[float] = Field(default=0, ge=0)
    deliveryDate: Optional[date] = None
    notes: Optional[str] = None
    orderItems: List[OrderItemIn] = []

    deliveryAddressId: Optional[int] = Field(default=None, gt=0)
    deliveryAddress: Optional[AddressIn] = None
    measurementAddressId: Optional[int] = Field(default=None, gt=0)
    measurementAddress: Optional[AddressIn] = None


class OrderUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    orderDate: Optional[datetime] = None
    orderType: Optional[str] = Field(default=None, max_length=50)
    totalAmount: Optional[float] = Field(default=None, ge=0)
    paymentStatus: Optional[str] = Field(default=None, max_length=30)
    advancePaid: Optional[float] = Field(default=None, ge=0)
    deliveryDate: Optional[date] = None
    notes: Optional[str] = None


class MeasurementSubmission(BaseModel):
    """Flat measurement object: orderId, orderItemId, itemType, notes plus one key per field."""
    measurements: Optional[dict] = None
