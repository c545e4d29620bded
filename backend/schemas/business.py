# backend/schemas/business.py
from datetime import date
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field


class TailorItemPriceIn(BaseModel):
    itemId: int = Field(gt=0)
    price: float = Field(ge=0)
    isAvailable: bool = True
    estimatedDays: Optional[int] = Field(default=None, ge=0)


class TailorItemPricesPayload(BaseModel):
    tailorItemPrices: List[TailorItemPriceIn] = Field(min_length=1)


class TailorAvailabilityIn(BaseModel):
    availabilityDate: date = Field(validation_alias=AliasChoices("availabilityDate", "date"))
    isClosed: bool = False


class BusinessFields(BaseModel):
    ownerName: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None
    mobileNumber: Optional[str] = Field(default=None, max_length=20)
    alternateNumber: Optional[str] = Field(default=None, max_length=20)
    shopAddress: Optional[str] = Field(default=None, max_length=500)
    googleMapLink: Optional[str] = Field(default=None, max_length=500)
    gpsLatitude: Optional[float] = Field(default=None, ge=-90, le=90)
    gpsLongitude: Optional[float] = Field(default=None, ge=-180, le=180)
    workingCity: Optional[str] = None
    serviceTypes: Optional[str] = None
    specialization: Optional[str] = None
    yearsOfExperience: Optional[int] = Field(default=None, ge=0)
    portfolioPhotos: Optional[str] = None
    certifications: Optional[str] = None
    openingTime: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}(:\d{2})?$")
    closingTime: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}(:\d{2})?$")
    weeklyOff: Optional[str] = None
    businessDescription: Optional[str] = None
    gstNumber: Optional[str] = Field(default=None, max_length=20)
    panNumber: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipCode: Optional[str] = Field(default=None, max_length=20)
    businessType: Optional[str] = None


class BusinessPayload(BusinessFields):
    """Create-or-update body for POST /business (keyed by userId)."""
    userId: Optional[int] = Field(default=None, gt=0)
    businessName: str = Field(min_length=1, max_length=255)


class BusinessUpdate(BusinessFields):
    """Partial update by businessId; keys outside the column allow-list are rejected."""
    model_config = ConfigDict(extra="allow")

    businessName: Optional[str] = Field(default=None, min_length=1, max_length=255)
    businessLogo: Optional[str] = None
    tailorItemPrices: Optional[List[TailorItemPriceIn]] = None
