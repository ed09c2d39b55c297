"""
Club Request Validation

Single entry point between untrusted request bodies and the typed request
schemas. Rejection is a normal return value: validate() never raises for
bad input, it returns every field error it found.
"""
import logging
import time
from functools import lru_cache
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from . import observability
from .enums import ErrorCode
from .models import ApiError, ErrorDetail
from .schemas import RequestSchema, get_schema, schema_name

logger = logging.getLogger(__name__)

# Field path used when the payload itself has the wrong shape
ROOT_FIELD = "__root__"

SchemaRef = Union[str, type[RequestSchema]]


class FieldError(BaseModel):
    """One violated rule, located at the offending leaf field"""
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationResult(BaseModel):
    """Outcome of validating one payload against one schema"""
    valid: bool
    value: Optional[RequestSchema] = None
    errors: list[FieldError] = Field(default_factory=list)


class SchemaValidationError(Exception):
    """Raised by parse() when a payload is rejected; carries every field error"""

    def __init__(self, errors: list[FieldError], schema: str = None):
        self.errors = errors
        self.schema = schema
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema,
            "errors": [e.to_dict() for e in self.errors],
        }

    def to_api_error(self) -> ApiError:
        """Map to the unified VALIDATION_ERROR response body"""
        return ApiError(
            code=ErrorCode.VALIDATION_ERROR,
            message="Validation failed",
            details=[ErrorDetail(field=e.field, message=e.message) for e in self.errors],
        )


def resolve_schema(schema: SchemaRef) -> type[RequestSchema]:
    if isinstance(schema, str):
        return get_schema(schema)
    return schema


def _attribute_names(schema: type[RequestSchema]) -> dict[str, str]:
    """Map both wire (alias) and attribute names to attribute names"""
    names = {}
    for name, info in schema.model_fields.items():
        names[name] = name
        names[info.alias or name] = name
    return names


def _wire_name(schema: type[RequestSchema], field_name: str) -> str:
    return schema.model_fields[field_name].alias or field_name


def _to_field_error(schema: type[RequestSchema], error: Mapping[str, Any]) -> FieldError:
    loc = list(error["loc"])
    message = error["msg"]

    if loc:
        attribute = _attribute_names(schema).get(str(loc[0]))
        if attribute is not None:
            loc[0] = _wire_name(schema, attribute)
            overrides = schema.field_messages.get(attribute, {})
            message = overrides.get(error["type"], message)

    path = ".".join(str(part) for part in loc) or ROOT_FIELD
    return FieldError(field=path, message=message)


@lru_cache(maxsize=None)
def _field_adapter(schema: type[RequestSchema], field_name: str) -> TypeAdapter:
    return TypeAdapter(schema.model_fields[field_name].rebuild_annotation())


class _Unchecked(Exception):
    """A referenced field cannot be validated on its own"""


def _standalone_value(schema: type[RequestSchema], field_name: str, payload: Mapping[str, Any]) -> Any:
    """Validate one field on its own; None if it is absent"""
    wire = _wire_name(schema, field_name)
    if wire in payload:
        raw = payload[wire]
    elif field_name in payload:
        raw = payload[field_name]
    else:
        return None
    try:
        return _field_adapter(schema, field_name).validate_python(raw)
    except PydanticValidationError:
        raise _Unchecked(field_name)


def _cross_field_errors(
    schema: type[RequestSchema],
    payload: Mapping[str, Any],
    value: Optional[RequestSchema],
    failed: set[str],
) -> list[FieldError]:
    """
    Run cross-field rules once the fields they reference are individually valid.

    When the model as a whole failed, the referenced fields are re-validated
    on their own so unrelated failures do not hide these errors. `failed`
    holds attribute names.
    """
    errors: list[FieldError] = []

    for rule in schema.cross_field_rules:
        if any(name in failed for name in rule.fields):
            continue

        if value is not None:
            values = {name: getattr(value, name) for name in rule.fields}
        else:
            try:
                values = {name: _standalone_value(schema, name, payload) for name in rule.fields}
            except _Unchecked:
                continue

        for field_name, message in rule.check(values):
            errors.append(FieldError(field=_wire_name(schema, field_name), message=message))

    return errors


def validate(schema: SchemaRef, payload: Any) -> ValidationResult:
    """
    Validate a request payload against a schema.

    Args:
        schema: Registry name (e.g. "create_event") or RequestSchema subclass
        payload: Decoded request body (field-keyed mapping)

    Returns:
        ValidationResult with the typed, defaulted value or the complete
        list of field errors. Raises only for an unknown schema name.
    """
    schema_cls = resolve_schema(schema)
    name = schema_name(schema_cls)
    started = time.perf_counter()

    if not isinstance(payload, Mapping):
        errors = [FieldError(
            field=ROOT_FIELD,
            message=f"Expected object, received {type(payload).__name__}",
        )]
        return _finish(name, started, ValidationResult(valid=False, errors=errors))

    payload = dict(payload)
    value: Optional[RequestSchema] = None
    errors: list[FieldError] = []
    failed: set[str] = set()

    attributes = _attribute_names(schema_cls)
    try:
        value = schema_cls.model_validate(payload)
    except PydanticValidationError as exc:
        for error in exc.errors(include_url=False):
            errors.append(_to_field_error(schema_cls, error))
            if error["loc"]:
                head = str(error["loc"][0])
                failed.add(attributes.get(head, head))

    errors.extend(_cross_field_errors(schema_cls, payload, value, failed))

    if errors:
        result = ValidationResult(valid=False, errors=errors)
    else:
        result = ValidationResult(valid=True, value=value)
    return _finish(name, started, result)


def _finish(name: str, started: float, result: ValidationResult) -> ValidationResult:
    outcome = "accepted" if result.valid else "rejected"

    if not result.valid:
        logger.debug(
            f"Rejected {name} payload with {len(result.errors)} error(s)",
            extra={"schema": name, "fields": [e.field for e in result.errors]},
        )
        for error in result.errors:
            observability.track_counter(
                "clubshared_field_errors_total",
                "Field errors reported by request validation",
                {"schema": name, "field": error.field},
            )

    observability.track_counter(
        "clubshared_validations_total",
        "Request payloads validated",
        {"schema": name, "outcome": outcome},
    )
    observability.track_histogram(
        "clubshared_validation_seconds",
        "Time spent validating a request payload",
        time.perf_counter() - started,
        {"schema": name},
    )
    return result


def parse(schema: SchemaRef, payload: Any) -> RequestSchema:
    """
    Validate and return the typed value.

    Raises SchemaValidationError with every field error if rejected.
    """
    result = validate(schema, payload)
    if not result.valid:
        raise SchemaValidationError(result.errors, schema=schema_name(resolve_schema(schema)))
    return result.value


def to_payload(value: RequestSchema) -> dict[str, Any]:
    """Serialize a validated value back to its wire representation"""
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)
