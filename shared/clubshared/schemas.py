"""
Club Request Schemas

Pydantic models validating the body of every mutating request.

Per-field rules are pydantic constraints; messages shown to users come from
each schema's field_messages table (field name -> pydantic error type ->
message). Update variants are derived from their create schema with
partial() so the two rule sets cannot drift apart.

Use validation.validate() rather than instantiating these directly: it
collects field errors and cross-field errors into one list.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, create_model
from pydantic.alias_generators import to_camel

from .constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_POST_VISIBILITY,
    DEFAULT_SORT_ORDER,
    MAX_PAGE_SIZE,
)
from .enums import HomeSectionType, ReactionType, Role, SortOrder, Visibility
from .fields import CoercedDatetime, CoercedInt, Email, Password, UrlStr


@dataclass(frozen=True)
class LaterThan:
    """Cross-field rule: `field` must be strictly later than `other`"""
    field: str
    other: str
    message: str

    @property
    def fields(self) -> tuple[str, ...]:
        return (self.field, self.other)

    def check(self, values: Mapping[str, Any]) -> list[tuple[str, str]]:
        later, earlier = values.get(self.field), values.get(self.other)
        if later is None or earlier is None or later > earlier:
            return []
        return [(self.field, self.message)]


class RequestSchema(BaseModel):
    """Base for request body schemas (camelCase on the wire, unknown keys dropped)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    field_messages: ClassVar[Mapping[str, Mapping[str, str]]] = {}
    cross_field_rules: ClassVar[tuple[LaterThan, ...]] = ()


def partial(
    schema: type[RequestSchema],
    name: str,
    *,
    exclude: tuple[str, ...] = (),
    extra: Optional[dict[str, Any]] = None,
) -> type[RequestSchema]:
    """
    Derive an update schema from a create schema.

    Every kept field becomes optional with a None default while its
    constraints still apply when a value is supplied. Defaults and
    cross-field rules are not carried over. `extra` adds new fields as
    pydantic (annotation, FieldInfo) pairs.
    """
    fields: dict[str, Any] = {}
    for field_name, info in schema.model_fields.items():
        if field_name in exclude:
            continue
        fields[field_name] = (
            Optional[info.rebuild_annotation()],
            Field(default=None, description=info.description),
        )
    fields.update(extra or {})

    derived = create_model(
        name,
        __base__=RequestSchema,
        __module__=schema.__module__,
        __doc__=f"{schema.__name__} with every field optional",
        **fields,
    )
    derived.field_messages = MappingProxyType({
        field_name: messages
        for field_name, messages in schema.field_messages.items()
        if field_name not in exclude
    })
    return derived


# =============================================================================
# Accounts
# =============================================================================

class RegisterRequest(RequestSchema):
    email: Email
    password: Password
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)

    field_messages = {
        "first_name": {"string_too_short": "First name must be at least 2 characters"},
        "last_name": {"string_too_short": "Last name must be at least 2 characters"},
    }


class LoginRequest(RequestSchema):
    email: Email
    password: str = Field(min_length=1)

    field_messages = {
        "password": {"string_too_short": "Password is required"},
    }


class UpdateProfileRequest(RequestSchema):
    first_name: Optional[str] = Field(default=None, min_length=2)
    last_name: Optional[str] = Field(default=None, min_length=2)
    bio: Optional[str] = Field(default=None, max_length=500)
    profile_image_url: Optional[UrlStr] = None


class ForgotPasswordRequest(RequestSchema):
    email: Email


class ResetPasswordRequest(RequestSchema):
    token: str = Field(min_length=1)
    new_password: Password

    field_messages = {
        "token": {"string_too_short": "Token is required"},
    }


class ChangeRoleBody(RequestSchema):
    """Admin role change; the target user comes from the route"""
    new_role: Role


# =============================================================================
# Events
# =============================================================================

class CreateEventRequest(RequestSchema):
    title: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10)
    start_time: CoercedDatetime
    end_time: CoercedDatetime
    location: Optional[str] = None
    visibility: Visibility
    publish_to_google_calendar: Optional[StrictBool] = None
    publish_to_facebook: Optional[StrictBool] = None

    field_messages = {
        "title": {"string_too_short": "Title must be at least 3 characters"},
        "description": {"string_too_short": "Description must be at least 10 characters"},
    }
    cross_field_rules = (
        LaterThan(field="end_time", other="start_time", message="End time must be after start time"),
    )


UpdateEventRequest = partial(
    CreateEventRequest,
    "UpdateEventRequest",
    exclude=("publish_to_google_calendar", "publish_to_facebook"),
)


# =============================================================================
# Blog
# =============================================================================

class CreateBlogPostRequest(RequestSchema):
    title: str = Field(min_length=3, max_length=255)
    content: str = Field(min_length=50)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    visibility: Visibility
    featured_image_url: Optional[UrlStr] = None
    published_at: Optional[CoercedDatetime] = None
    publish_to_facebook: Optional[StrictBool] = None

    field_messages = {
        "title": {"string_too_short": "Title must be at least 3 characters"},
        "content": {"string_too_short": "Content must be at least 50 characters"},
    }


UpdateBlogPostRequest = partial(
    CreateBlogPostRequest,
    "UpdateBlogPostRequest",
    exclude=("publish_to_facebook",),
)


# =============================================================================
# Social feed
# =============================================================================

class CreatePostRequest(RequestSchema):
    content: str = Field(min_length=1, max_length=5000)
    visibility: Visibility = DEFAULT_POST_VISIBILITY

    field_messages = {
        "content": {"string_too_short": "Content is required"},
    }


UpdatePostRequest = partial(CreatePostRequest, "UpdatePostRequest")


class CreateCommentRequest(RequestSchema):
    """Comment body; the parent post comes from the route"""
    content: str = Field(min_length=1, max_length=2000)

    field_messages = {
        "content": {"string_too_short": "Comment cannot be empty"},
    }


UpdateCommentRequest = partial(CreateCommentRequest, "UpdateCommentRequest")


class AddReactionRequest(RequestSchema):
    reaction_type: ReactionType


# =============================================================================
# Site content
# =============================================================================

class UpdateHomeContentRequest(RequestSchema):
    section_type: Optional[HomeSectionType] = None
    title: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(min_length=1)
    image_url: Optional[UrlStr] = None

    field_messages = {
        "content": {"string_too_short": "Content is required"},
    }


class CreateSponsorRequest(RequestSchema):
    name: str = Field(min_length=2, max_length=255)
    logo_url: UrlStr
    website_url: Optional[UrlStr] = None
    description: Optional[str] = Field(default=None, max_length=1000)
    order_index: Optional[StrictInt] = Field(default=None, ge=0)

    field_messages = {
        "name": {"string_too_short": "Name must be at least 2 characters"},
        "logo_url": {"url": "Invalid logo URL"},
    }


UpdateSponsorRequest = partial(
    CreateSponsorRequest,
    "UpdateSponsorRequest",
    extra={"is_active": (Optional[StrictBool], None)},
)


class CreateTestimonialRequest(RequestSchema):
    author_name: str = Field(min_length=2, max_length=255)
    author_role: Optional[str] = Field(default=None, max_length=100)
    content: str = Field(min_length=10, max_length=1000)
    image_url: Optional[UrlStr] = None
    order_index: Optional[StrictInt] = Field(default=None, ge=0)

    field_messages = {
        "author_name": {"string_too_short": "Name must be at least 2 characters"},
        "content": {"string_too_short": "Testimonial must be at least 10 characters"},
    }


UpdateTestimonialRequest = partial(
    CreateTestimonialRequest,
    "UpdateTestimonialRequest",
    extra={"is_active": (Optional[StrictBool], None)},
)


# =============================================================================
# Listing queries
# =============================================================================

class PaginationQuery(RequestSchema):
    """Query-string pagination; numbers arrive as strings and are coerced"""
    page: CoercedInt = Field(default=DEFAULT_PAGE, ge=1)
    page_size: CoercedInt = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: Optional[str] = None
    sort_order: SortOrder = DEFAULT_SORT_ORDER


class SearchQuery(PaginationQuery):
    query: Optional[str] = None


SCHEMAS: Mapping[str, type[RequestSchema]] = MappingProxyType({
    "register": RegisterRequest,
    "login": LoginRequest,
    "update_profile": UpdateProfileRequest,
    "forgot_password": ForgotPasswordRequest,
    "reset_password": ResetPasswordRequest,
    "create_event": CreateEventRequest,
    "update_event": UpdateEventRequest,
    "create_blog_post": CreateBlogPostRequest,
    "update_blog_post": UpdateBlogPostRequest,
    "create_post": CreatePostRequest,
    "update_post": UpdatePostRequest,
    "create_comment": CreateCommentRequest,
    "update_comment": UpdateCommentRequest,
    "add_reaction": AddReactionRequest,
    "update_home_content": UpdateHomeContentRequest,
    "create_sponsor": CreateSponsorRequest,
    "update_sponsor": UpdateSponsorRequest,
    "create_testimonial": CreateTestimonialRequest,
    "update_testimonial": UpdateTestimonialRequest,
    "change_role": ChangeRoleBody,
    "pagination": PaginationQuery,
    "search": SearchQuery,
})

_SCHEMA_NAMES: Mapping[type, str] = MappingProxyType({cls: name for name, cls in SCHEMAS.items()})


def get_schema(name: str) -> type[RequestSchema]:
    """Look up a schema by registry name (KeyError if unknown)"""
    try:
        return SCHEMAS[name]
    except KeyError:
        raise KeyError(f"Unknown schema '{name}'. Known: {', '.join(sorted(SCHEMAS))}") from None


def schema_name(schema: type[RequestSchema]) -> str:
    """Registry name of a schema, or its class name if unregistered"""
    return _SCHEMA_NAMES.get(schema, schema.__name__)
