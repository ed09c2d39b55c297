# clubshared
# Shared enums, data shapes and request validation for the club web application
__version__ = "0.1.0"

from .enums import (
    Role,
    Visibility,
    ApprovalStatus,
    EventStatus,
    RegistrationStatus,
    ReactionType,
    OfficerPosition,
    NotificationType,
    HomeSectionType,
    SortOrder,
    ErrorCode,
    APPROVAL_STATUS_LABELS,
    OFFICER_POSITION_LABELS,
    OFFICER_POSITION_DESCRIPTIONS,
    ROLE_LABELS,
    VISIBILITY_LABELS,
    label_for,
)
from .roles import ROLE_HIERARCHY, has_minimum_role, roles_at_least
from .schemas import SCHEMAS, RequestSchema, get_schema, partial
from .validation import (
    FieldError,
    ValidationResult,
    SchemaValidationError,
    validate,
    parse,
    to_payload,
)

__all__ = [
    "Role",
    "Visibility",
    "ApprovalStatus",
    "EventStatus",
    "RegistrationStatus",
    "ReactionType",
    "OfficerPosition",
    "NotificationType",
    "HomeSectionType",
    "SortOrder",
    "ErrorCode",
    "APPROVAL_STATUS_LABELS",
    "OFFICER_POSITION_LABELS",
    "OFFICER_POSITION_DESCRIPTIONS",
    "ROLE_LABELS",
    "VISIBILITY_LABELS",
    "label_for",
    "ROLE_HIERARCHY",
    "has_minimum_role",
    "roles_at_least",
    "SCHEMAS",
    "RequestSchema",
    "get_schema",
    "partial",
    "FieldError",
    "ValidationResult",
    "SchemaValidationError",
    "validate",
    "parse",
    "to_payload",
]
