# backend/models/measurement_model.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.types import Unicode

from database.session import Base


class Measurement(Base):
    __tablename__ = "Measurements"
    __table_args__ = (UniqueConstraint("orderItemId", "measurementKey", name="uq_measurement_item_key"),)
    measurementId    = Column(Integer, primary_key=True, autoincrement=True)
    orderItemId      = Column(Integer, ForeignKey("OrderItems.orderItemId", ondelete="CASCADE"), nullable=False, index=True)
    measurementKey   = Column(Unicode(50), nullable=False)   # always upper case
    measurementValue = Column(Unicode(100), nullable=False)
    notes            = Column(Unicode(500))
    createdAt        = Column(DateTime)
    updatedAt        = Column(DateTime)


class ItemTypeMeasurementKey(Base):
    __tablename__ = "ItemTypeMeasurementKeys"
    __table_args__ = (UniqueConstraint("itemType", "measurementKey", name="uq_item_type_key"),)
    id             = Column(Integer, primary_key=True, autoincrement=True)
    itemType       = Column(Unicode(100), nullable=False)
    measurementKey = Column(Unicode(50), nullable=False)


class OrderMeasurementBoyAssignment(Base):
    __tablename__ = "OrderMeasurementBoyAssignments"
    assignmentId     = Column(Integer, primary_key=True, autoincrement=True)
    orderId          = Column(Integer, ForeignKey("Orders.orderId", ondelete="CASCADE"), nullable=False, index=True)
    measurementBoyId = Column(Integer, ForeignKey("Users.userId"), nullable=False, index=True)
    assignmentStatus = Column(Unicode(30), nullable=False, default="Assigned")
    assignedAt       = Column(DateTime)
    startedAt        = Column(DateTime)
    completedAt      = Column(DateTime)
