# backend/models/user_model.py
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.types import Unicode

from database.session import Base


class User(Base):
    __tablename__ = "Users"
    userId       = Column(Integer, primary_key=True, autoincrement=True)
    email        = Column(Unicode(255), unique=True, nullable=False)
    passwordHash = Column(Unicode(255), nullable=False)
    firstName    = Column(Unicode(50), nullable=False)
    lastName     = Column(Unicode(50), nullable=False)
    phoneNumber  = Column(Unicode(20))
    isActive     = Column(Boolean, nullable=False, default=True)
    createdAt    = Column(DateTime)
    modifiedAt   = Column(DateTime)


class Role(Base):
    __tablename__ = "Roles"
    roleId      = Column(Integer, primary_key=True, autoincrement=True)
    roleName    = Column(Unicode(50), unique=True, nullable=False)  # Admin / Customer / Seller / Tailor / MeasurementBoy / Taylorseller
    description = Column(Unicode(255))


class UserRole(Base):
    __tablename__ = "UserRoles"
    __table_args__ = (UniqueConstraint("userId", "roleId", name="uq_user_role"),)
    userRoleId = Column(Integer, primary_key=True, autoincrement=True)
    userId     = Column(Integer, ForeignKey("Users.userId", ondelete="CASCADE"), nullable=False, index=True)
    roleId     = Column(Integer, ForeignKey("Roles.roleId"), nullable=False)
    assignedAt = Column(DateTime)
