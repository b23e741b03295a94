from .agreement import CreateAgreementData, RentalAgreement, Signature
from .application import (
    Application,
    ApplicationForm,
    ApplicationFormData,
    BackgroundCheckData,
    BackgroundCheckResults,
    Employment,
    PreviousRental,
    Reference,
    StatusUpdate,
)
from .auth import AuthResponse, LoginRequest, MessageResponse, ProfileUpdate, RegisterRequest, User
from .dashboard import OwnerDashboard, OwnerStats, TenantDashboard
from .payment import BillingPeriod, Payment, PaymentIntent
from .property import (
    Coordinates,
    CreatePropertyData,
    ImageUploadResponse,
    Pagination,
    Property,
    PropertyAddress,
    PropertyFilters,
    PropertyPage,
    PropertyUpdate,
)

__all__ = [
    "Application",
    "ApplicationForm",
    "ApplicationFormData",
    "AuthResponse",
    "BackgroundCheckData",
    "BackgroundCheckResults",
    "BillingPeriod",
    "Coordinates",
    "CreateAgreementData",
    "CreatePropertyData",
    "Employment",
    "ImageUploadResponse",
    "LoginRequest",
    "MessageResponse",
    "OwnerDashboard",
    "OwnerStats",
    "Pagination",
    "Payment",
    "PaymentIntent",
    "PreviousRental",
    "ProfileUpdate",
    "Property",
    "PropertyAddress",
    "PropertyFilters",
    "PropertyPage",
    "PropertyUpdate",
    "Reference",
    "RegisterRequest",
    "RentalAgreement",
    "Signature",
    "StatusUpdate",
    "TenantDashboard",
    "User",
]
