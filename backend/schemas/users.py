# backend/schemas/users.py
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

NAME_RE = re.compile(r"^[a-zA-Z\s'-]+$")
PHONE_RE = re.compile(r"^[\+]?[0-9\s\-\(\)]+$")
SPECIAL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
REGISTER_ROLES = ("Admin", "Customer", "Seller", "Tailor", "Taylorseller")


def check_password(value: str) -> str:
    if not (re.search(r"[a-z]", value) and re.search(r"[A-Z]", value) and re.search(r"\d", value)):
        raise ValueError("Password must contain at least one uppercase letter, one lowercase letter, and one number")
    if not SPECIAL_RE.search(value):
        raise ValueError("Password must contain at least one special character")
    return value


def check_name(value: str) -> str:
    value = value.strip()
    if not 2 <= len(value) <= 50:
        raise ValueError("Name must be between 2 and 50 characters")
    if not NAME_RE.match(value):
        raise ValueError("Name can only contain letters, spaces, hyphens, and apostrophes")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), value)


def check_phone(value: str) -> str:
    value = value.strip()
    if not 10 <= len(value) <= 15:
        raise ValueError("Phone number must be between 10 and 15 characters")
    if not PHONE_RE.match(value):
        raise ValueError("Please provide a valid phone number")
    # keep digits and a leading +
    return re.sub(r"[^\d+]", "", value)


class RegisterPayload(BaseModel):
    email: EmailStr = Field(max_length=255)
    password: str = Field(min_length=6, max_length=128)
    firstName: str
    lastName: str
    phoneNumber: Optional[str] = None
    roleName: Optional[str] = "Customer"

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password(value)

    @field_validator("firstName", "lastName")
    @classmethod
    def validate_names(cls, value: str) -> str:
        return check_name(value)

    @field_validator("phoneNumber")
    @classmethod
    def validate_phone(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_phone(value)

    @field_validator("roleName")
    @classmethod
    def validate_role(cls, value: Optional[str]) -> str:
        if not value or not value.strip():
            return "Customer"
        value = value.strip()
        value = value[0].upper() + value[1:].lower()
        if value not in REGISTER_ROLES:
            raise ValueError(f"Role name must be one of: {', '.join(REGISTER_ROLES)}")
        return value


class LoginPayload(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phoneNumber: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)

    @field_validator("firstName", "lastName")
    @classmethod
    def validate_names(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_name(value)

    @field_validator("phoneNumber")
    @classmethod
    def validate_phone(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_phone(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_password(value)


class RoleAssignment(BaseModel):
    roleName: str = Field(min_length=1)
