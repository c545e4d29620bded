# backend/models/order_model.py
from sqlalchemy import Column, Computed, Integer, Boolean, Date, DateTime, ForeignKey, Numeric
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base


class Order(Base):
    __tablename__ = "Orders"
    orderId       = Column(Integer, primary_key=True, autoincrement=True)
    customerId    = Column(Integer, ForeignKey("Users.userId"), nullable=False, index=True)
    orderDate     = Column(DateTime, nullable=False)
    orderType     = Column(Unicode(50))
    totalAmount   = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    paymentStatus = Column(Unicode(30), default="Pending")
    advancePaid   = Column(Numeric(12, 2, asdecimal=False), default=0)
    deliveryDate  = Column(Date)
    notes         = Column(UnicodeText)
    createdBy     = Column(Integer)
    createdAt     = Column(DateTime)
    updatedAt     = Column(DateTime)


class OrderItem(Base):
    __tablename__ = "OrderItems"
    orderItemId       = Column(Integer, primary_key=True, autoincrement=True)
    orderId           = Column(Integer, ForeignKey("Orders.orderId", ondelete="CASCADE"), nullable=False, index=True)
    itemType          = Column(Unicode(100))
    productCode       = Column(Unicode(100))
    description       = Column(Unicode(500))
    shopId            = Column(Integer, index=True)      # BusinessInformation.businessId of the seller
    tailorId          = Column(Integer, index=True)      # BusinessInformation.businessId of the tailor
    quantity          = Column(Integer, nullable=False, default=1)
    unit              = Column(Unicode(20))
    unitPrice         = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    itemTotal         = Column(Numeric(14, 2, asdecimal=False), Computed("quantity * unitPrice"))
    status            = Column(Unicode(30), default="Pending")
    notes             = Column(UnicodeText)
    measurementDate   = Column(Date)
    measurementSlot   = Column(Unicode(50))
    stitchingDate     = Column(Date)
    isMeasurementDone = Column(Boolean, nullable=False, default=False)
    createdAt         = Column(DateTime)
    updatedAt         = Column(DateTime)
