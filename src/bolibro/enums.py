"""
Status enums for marketplace records.

Values match the strings the backend API sends and accepts.
"""

from enum import Enum


class UserType(str, Enum):
    OWNER = "owner"
    TENANT = "tenant"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    IN_REVIEW = "in_review"
    BACKGROUND_CHECK = "background_check"
    APPROVED = "approved"
    REJECTED = "rejected"


class BackgroundCheckStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class AgreementStatus(str, Enum):
    DRAFT = "draft"
    TENANT_SIGNED = "tenant_signed"
    BOTH_SIGNED = "both_signed"
    TERMINATED = "terminated"
