# backend/models/address_model.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.types import Unicode

from database.session import Base


class DeliveryAddress(Base):
    __tablename__ = "DeliveryAddresses"
    deliveryAddressId    = Column(Integer, primary_key=True, autoincrement=True)
    userId               = Column(Integer, ForeignKey("Users.userId"), nullable=False, index=True)
    fullName             = Column(Unicode(100), nullable=False)
    phoneNumber          = Column(Unicode(20), nullable=False)
    alternatePhone       = Column(Unicode(20))
    addressLine1         = Column(Unicode(255), nullable=False)
    addressLine2         = Column(Unicode(255))
    landmark             = Column(Unicode(255))
    city                 = Column(Unicode(100), nullable=False)
    state                = Column(Unicode(100), nullable=False)
    pincode              = Column(Unicode(10), nullable=False)
    addressType          = Column(Unicode(20), default="Home")
    deliveryInstructions = Column(Unicode(500))
    googleMapLink        = Column(Unicode(500))
    createdAt            = Column(DateTime)
    updatedAt            = Column(DateTime)


class OrderDeliveryAddressMapping(Base):
    __tablename__ = "OrderDeliveryAddressMapping"
    mappingId           = Column(Integer, primary_key=True, autoincrement=True)
    orderId             = Column(Integer, ForeignKey("Orders.orderId", ondelete="CASCADE"), nullable=False, index=True)
    deliveryAddressId   = Column(Integer, ForeignKey("DeliveryAddresses.deliveryAddressId", ondelete="CASCADE"), nullable=False)
    deliveryAddressType = Column(Unicode(20), nullable=False, default="Delivery")  # Delivery / Measurement
    createdAt           = Column(DateTime)
