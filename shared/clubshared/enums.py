"""
Club Enumerations

Closed sets of domain states shared by client and server, plus the static
label/description tables the UI renders them with.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Role(str, Enum):
    """Account role, ordered by privilege (see roles.ROLE_HIERARCHY)"""
    MEMBER = "MEMBER"
    OFFICER = "OFFICER"
    ADMIN = "ADMIN"


class Visibility(str, Enum):
    """Read access gate for events, blog posts and feed posts"""
    PUBLIC = "PUBLIC"
    MEMBER_ONLY = "MEMBER_ONLY"


class ApprovalStatus(str, Enum):
    """Membership approval state"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"


class EventStatus(str, Enum):
    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RegistrationStatus(str, Enum):
    REGISTERED = "REGISTERED"
    WAITLISTED = "WAITLISTED"
    CANCELLED = "CANCELLED"


class ReactionType(str, Enum):
    LIKE = "LIKE"
    HEART = "HEART"
    CELEBRATE = "CELEBRATE"
    SUPPORT = "SUPPORT"


class OfficerPosition(str, Enum):
    """Elected club officer positions"""
    PRESIDENT = "PRESIDENT"
    VICE_PRESIDENT = "VICE_PRESIDENT"
    SECRETARY = "SECRETARY"
    TREASURER = "TREASURER"
    SERGEANT_AT_ARMS = "SERGEANT_AT_ARMS"
    NEWS_REPORTER = "NEWS_REPORTER"
    RECREATION_LEADER = "RECREATION_LEADER"
    HISTORIAN = "HISTORIAN"


class NotificationType(str, Enum):
    NEW_EVENT = "NEW_EVENT"
    NEW_BLOG_POST = "NEW_BLOG_POST"
    NEW_POST = "NEW_POST"
    NEW_COMMENT = "NEW_COMMENT"
    NEW_REACTION = "NEW_REACTION"
    EVENT_REMINDER = "EVENT_REMINDER"
    ROLE_CHANGED = "ROLE_CHANGED"


class HomeSectionType(str, Enum):
    """Editable sections of the public home page"""
    MISSION = "MISSION"
    ABOUT = "ABOUT"
    CONTACT = "CONTACT"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ErrorCode(str, Enum):
    """API error codes returned in ApiError.code"""
    # Authentication
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    # Resources
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_ALREADY_EXISTS = "RESOURCE_ALREADY_EXISTS"

    # Permissions
    FORBIDDEN = "FORBIDDEN"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"

    # Server
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Rate limiting
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


# =============================================================================
# Label / description tables
# =============================================================================

def _total_table(enum_cls: type[Enum], entries: dict) -> Mapping:
    """Freeze a lookup table; RuntimeError unless it has exactly one entry per member"""
    missing = set(enum_cls) - set(entries)
    extra = set(entries) - set(enum_cls)
    if missing or extra:
        raise RuntimeError(
            f"{enum_cls.__name__} table mismatch: missing={sorted(m.value for m in missing)} "
            f"extra={sorted(map(str, extra))}"
        )
    return MappingProxyType(dict(entries))


ROLE_LABELS: Mapping[Role, str] = _total_table(Role, {
    Role.MEMBER: "Member",
    Role.OFFICER: "Officer",
    Role.ADMIN: "Admin",
})

VISIBILITY_LABELS: Mapping[Visibility, str] = _total_table(Visibility, {
    Visibility.PUBLIC: "Public",
    Visibility.MEMBER_ONLY: "Members Only",
})

APPROVAL_STATUS_LABELS: Mapping[ApprovalStatus, str] = _total_table(ApprovalStatus, {
    ApprovalStatus.PENDING: "Pending",
    ApprovalStatus.APPROVED: "Approved",
    ApprovalStatus.DECLINED: "Declined",
})

OFFICER_POSITION_LABELS: Mapping[OfficerPosition, str] = _total_table(OfficerPosition, {
    OfficerPosition.PRESIDENT: "President",
    OfficerPosition.VICE_PRESIDENT: "Vice President",
    OfficerPosition.SECRETARY: "Secretary",
    OfficerPosition.TREASURER: "Treasurer",
    OfficerPosition.SERGEANT_AT_ARMS: "Sergeant-at-Arms",
    OfficerPosition.NEWS_REPORTER: "News Reporter",
    OfficerPosition.RECREATION_LEADER: "Recreation/Song Leader",
    OfficerPosition.HISTORIAN: "Historian",
})

OFFICER_POSITION_DESCRIPTIONS: Mapping[OfficerPosition, str] = _total_table(OfficerPosition, {
    OfficerPosition.PRESIDENT: (
        "Presides over meetings, builds agendas, delegates tasks, "
        "and ensures order using parliamentary procedure."
    ),
    OfficerPosition.VICE_PRESIDENT: (
        "Fills in for the president, coordinates committees, and introduces guests."
    ),
    OfficerPosition.SECRETARY: (
        "Keeps accurate minutes of meetings, records attendance, and handles correspondence."
    ),
    OfficerPosition.TREASURER: (
        "Manages club funds, keeps financial records, and reports on the budget."
    ),
    OfficerPosition.SERGEANT_AT_ARMS: "Maintains order and sets up the room.",
    OfficerPosition.NEWS_REPORTER: "Writes articles about club activities for local media.",
    OfficerPosition.RECREATION_LEADER: "Leads games, icebreakers, and songs.",
    OfficerPosition.HISTORIAN: "Documents the club's year through photos and scrapbooks.",
})

_LABEL_TABLES: Mapping[type, Mapping] = MappingProxyType({
    Role: ROLE_LABELS,
    Visibility: VISIBILITY_LABELS,
    ApprovalStatus: APPROVAL_STATUS_LABELS,
    OfficerPosition: OFFICER_POSITION_LABELS,
})


def label_for(value: Enum) -> str:
    """
    Human-readable label for an enum member.

    Raises KeyError if the member's enum has no label table.
    """
    table = _LABEL_TABLES.get(type(value))
    if table is None:
        raise KeyError(f"No label table for {type(value).__name__}")
    return table[value]
