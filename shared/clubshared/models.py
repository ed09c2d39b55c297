"""
Club Data Models

Pydantic read models shared by client and server. Records are materialized
by the persistence layer; nothing here computes their lifecycle.
Wire names are camelCase; Python attributes are snake_case.
"""
import math
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
import ulid

from .enums import (
    ErrorCode,
    HomeSectionType,
    NotificationType,
    ReactionType,
    RegistrationStatus,
    Role,
    Visibility,
)

T = TypeVar("T")


def new_id() -> str:
    """Generate a new ULID record id"""
    return str(ulid.new())


class SharedModel(BaseModel):
    """Base for shapes exchanged between client and server"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthorSummary(SharedModel):
    """Denormalized author embedded in read models"""
    id: str
    first_name: str
    last_name: str
    profile_image_url: Optional[str] = None


# =============================================================================
# Users
# =============================================================================

class User(SharedModel):
    id: str = Field(default_factory=new_id)
    email: str
    first_name: str
    last_name: str
    role: Role = Role.MEMBER
    profile_image_url: Optional[str] = None
    bio: Optional[str] = None
    join_date: datetime
    last_login: Optional[datetime] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class UserProfile(User):
    """Public profile view (never carries credentials)"""


class AuthTokens(SharedModel):
    access_token: str
    refresh_token: str
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class AuthResponse(SharedModel):
    user: User
    tokens: AuthTokens


class RefreshTokenRequest(SharedModel):
    refresh_token: str


class ChangeRoleRequest(SharedModel):
    """Role change as seen by the service layer (body + target user)"""
    user_id: str
    new_role: Role


# =============================================================================
# Events
# =============================================================================

class Event(SharedModel):
    id: str = Field(default_factory=new_id)
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    location: Optional[str] = None
    visibility: Visibility
    google_calendar_id: Optional[str] = None
    facebook_event_id: Optional[str] = None
    created_by: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class EventWithCreator(Event):
    creator: AuthorSummary
    registration_count: int = Field(default=0, ge=0)
    user_registration_status: Optional[RegistrationStatus] = None


class EventRegistration(SharedModel):
    id: str = Field(default_factory=new_id)
    event_id: str
    user_id: str
    status: RegistrationStatus = RegistrationStatus.REGISTERED
    registered_at: datetime


class RegisterForEventRequest(SharedModel):
    event_id: str


class EventAttendee(SharedModel):
    id: str
    first_name: str
    last_name: str
    email: str
    profile_image_url: Optional[str] = None
    registration_status: RegistrationStatus
    registered_at: datetime


# =============================================================================
# Blog
# =============================================================================

class BlogPost(SharedModel):
    id: str = Field(default_factory=new_id)
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    author_id: str
    visibility: Visibility
    featured_image_url: Optional[str] = None
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class BlogPostWithAuthor(BlogPost):
    author: AuthorSummary


# =============================================================================
# Social feed
# =============================================================================

class Post(SharedModel):
    id: str = Field(default_factory=new_id)
    author_id: str
    content: str
    visibility: Visibility = Visibility.MEMBER_ONLY
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class Comment(SharedModel):
    id: str = Field(default_factory=new_id)
    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class Reaction(SharedModel):
    """
    A user's reaction to either a post or a comment.

    Exactly one of post_id / comment_id is set.
    """
    id: str = Field(default_factory=new_id)
    post_id: Optional[str] = None
    comment_id: Optional[str] = None
    user_id: str
    reaction_type: ReactionType
    created_at: datetime

    @model_validator(mode="after")
    def validate_single_target(self) -> "Reaction":
        if (self.post_id is None) == (self.comment_id is None):
            raise ValueError("reaction must target exactly one of postId or commentId")
        return self


class ReactionSummary(SharedModel):
    """Count of one reaction type on a single post or comment"""
    reaction_type: ReactionType
    count: int = Field(..., ge=0)


class CommentWithAuthor(Comment):
    author: AuthorSummary
    reactions: list[ReactionSummary] = Field(default_factory=list)
    user_reaction: Optional[ReactionType] = None


class PostWithDetails(Post):
    author: AuthorSummary
    comments: list[CommentWithAuthor] = Field(default_factory=list)
    reactions: list[ReactionSummary] = Field(default_factory=list)
    user_reaction: Optional[ReactionType] = None


# =============================================================================
# Site content
# =============================================================================

class HomePageContent(SharedModel):
    id: str = Field(default_factory=new_id)
    section_type: HomeSectionType
    title: Optional[str] = None
    content: str
    image_url: Optional[str] = None
    order_index: Optional[int] = None
    is_active: bool = True
    updated_by: str
    created_at: datetime
    updated_at: datetime


class Sponsor(SharedModel):
    id: str = Field(default_factory=new_id)
    name: str
    logo_url: str
    website_url: Optional[str] = None
    description: Optional[str] = None
    order_index: Optional[int] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class Testimonial(SharedModel):
    id: str = Field(default_factory=new_id)
    author_name: str
    author_role: Optional[str] = None
    content: str
    image_url: Optional[str] = None
    order_index: Optional[int] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


# =============================================================================
# Notifications
# =============================================================================

class Notification(SharedModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    type: NotificationType
    title: str
    content: Optional[str] = None
    related_post_id: Optional[str] = None
    related_event_id: Optional[str] = None
    related_blog_id: Optional[str] = None
    is_read: bool = False
    created_at: datetime


class RelatedPost(SharedModel):
    id: str
    content: str
    author_name: str


class RelatedTitle(SharedModel):
    id: str
    title: str


class NotificationWithDetails(Notification):
    related_post: Optional[RelatedPost] = None
    related_event: Optional[RelatedTitle] = None
    related_blog: Optional[RelatedTitle] = None


# =============================================================================
# API envelope
# =============================================================================

class ErrorDetail(SharedModel):
    field: str
    message: str


class ApiError(SharedModel):
    code: ErrorCode
    message: str
    details: Optional[list[ErrorDetail]] = None


class PaginationMeta(SharedModel):
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_more: bool

    @classmethod
    def build(cls, page: int, page_size: int, total: int) -> "PaginationMeta":
        """Derive page counts for a listing of `total` items"""
        total_pages = math.ceil(total / page_size)
        return cls(
            page=page,
            page_size=page_size,
            total=total,
            total_pages=total_pages,
            has_more=page < total_pages,
        )


class ApiResponse(SharedModel, Generic[T]):
    """Envelope for every API response"""
    success: bool
    data: Optional[T] = None
    error: Optional[ApiError] = None
    meta: Optional[PaginationMeta] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, meta: Optional[PaginationMeta] = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, meta=meta)

    @classmethod
    def fail(cls, error: ApiError) -> "ApiResponse[T]":
        return cls(success=False, error=error)
