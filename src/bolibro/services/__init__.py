from .agreement import AgreementService
from .application import ApplicationService
from .auth import AuthService
from .dashboard import DashboardService
from .payment import PaymentService
from .property import PropertyService
from .upload import UploadService

__all__ = [
    "AgreementService",
    "ApplicationService",
    "AuthService",
    "DashboardService",
    "PaymentService",
    "PropertyService",
    "UploadService",
]
