# backend/models/business_model.py
from sqlalchemy import Column, Integer, Boolean, Float, Date, DateTime, ForeignKey, Numeric, UniqueConstraint
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base


class BusinessInformation(Base):
    __tablename__ = "BusinessInformation"
    businessId          = Column(Integer, primary_key=True, autoincrement=True)
    userId              = Column(Integer, ForeignKey("Users.userId"), nullable=False, index=True)
    ownerName           = Column(Unicode(100))
    businessName        = Column(Unicode(255), nullable=False)
    email               = Column(Unicode(255))
    mobileNumber        = Column(Unicode(20))
    alternateNumber     = Column(Unicode(20))
    shopAddress         = Column(Unicode(500))
    googleMapLink       = Column(Unicode(500))
    gpsLatitude         = Column(Float)
    gpsLongitude        = Column(Float)
    workingCity         = Column(Unicode(100))
    serviceTypes        = Column(UnicodeText)        # comma separated
    specialization      = Column(UnicodeText)
    yearsOfExperience   = Column(Integer)
    portfolioPhotos     = Column(UnicodeText)
    certifications      = Column(UnicodeText)
    openingTime         = Column(Unicode(10))        # "HH:MM"
    closingTime         = Column(Unicode(10))
    weeklyOff           = Column(Unicode(50))
    businessLogo        = Column(Unicode(500))
    businessDescription = Column(UnicodeText)
    gstNumber           = Column(Unicode(20))
    panNumber           = Column(Unicode(20))
    address             = Column(Unicode(500))
    city                = Column(Unicode(100))
    state               = Column(Unicode(100))
    country             = Column(Unicode(100))
    zipCode             = Column(Unicode(20))
    businessType        = Column(Unicode(50))
    isDeleted           = Column(Boolean, nullable=False, default=False)
    createdAt           = Column(DateTime)
    updatedAt           = Column(DateTime)


class TailorDateAvailability(Base):
    __tablename__ = "TailorDateAvailability"
    __table_args__ = (UniqueConstraint("businessId", "availabilityDate", name="uq_tailor_availability_date"),)
    availabilityId   = Column(Integer, primary_key=True, autoincrement=True)
    businessId       = Column(Integer, ForeignKey("BusinessInformation.businessId"), nullable=False)
    availabilityDate = Column(Date, nullable=False)
    isClosed         = Column(Boolean, nullable=False, default=False)
    createdAt        = Column(DateTime)
    updatedAt        = Column(DateTime)


class TailorItemPrice(Base):
    __tablename__ = "TailorItemPrices"
    __table_args__ = (UniqueConstraint("businessId", "itemId", name="uq_tailor_item_price"),)
    tailorItemPriceId = Column(Integer, primary_key=True, autoincrement=True)
    businessId        = Column(Integer, ForeignKey("BusinessInformation.businessId"), nullable=False)
    itemId            = Column(Integer, nullable=False)
    price             = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    isAvailable       = Column(Boolean, nullable=False, default=True)
    estimatedDays     = Column(Integer)
    createdAt         = Column(DateTime)
    updatedAt         = Column(DateTime)
