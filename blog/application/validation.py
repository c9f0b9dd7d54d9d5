"""Request payload schemas for posts.

Schemas are declarative pydantic models; ``validate_payload`` evaluates one
against raw request data and returns a ValidationResult instead of raising,
so callers decide how a failure is reported.
"""

from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictStr,
    StringConstraints,
    ValidationError,
    field_validator,
)

# Strings are strict: numbers and booleans are not coerced to text
NonEmptyStr = Annotated[StrictStr, StringConstraints(min_length=1)]


class PostPayload(BaseModel):
    """Base for post payload schemas.

    Keys outside the schema (``user``, ``id``...) are dropped, so clients
    can never set server-owned fields.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


class CreatePostPayload(PostPayload):
    """Payload for creating a post; every field is required."""

    title: NonEmptyStr
    body: NonEmptyStr
    tags: list[NonEmptyStr]


class UpdatePostPayload(PostPayload):
    """Payload for patching a post; fields are optional but not nullable."""

    title: Optional[NonEmptyStr] = None
    body: Optional[NonEmptyStr] = None
    tags: Optional[list[NonEmptyStr]] = None

    @field_validator("title", "body", "tags", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Omitting a field leaves it unchanged; sending null is an error."""
        if v is None:
            raise ValueError("must not be null")
        return v


class FieldError(BaseModel):
    """One schema violation."""

    field: str
    message: str
    type: str


class ValidationResult(BaseModel):
    """Outcome of validating a payload.

    ``values`` holds only the fields the client supplied, so it can be used
    directly as a partial update.
    """

    values: dict[str, Any] = {}
    errors: list[FieldError] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_payload(schema: type[PostPayload], payload: Any) -> ValidationResult:
    """Validate raw request data against a payload schema.

    A missing body is treated as an empty object.

    Args:
        schema: Payload schema class
        payload: Decoded JSON body

    Returns:
        ValidationResult with either the supplied values or the field errors
    """
    if payload is None:
        payload = {}

    try:
        model = schema.model_validate(payload)
    except ValidationError as e:
        return ValidationResult(
            errors=[
                FieldError(
                    field=".".join(str(part) for part in error["loc"]),
                    message=error["msg"],
                    type=error["type"],
                )
                for error in e.errors()
            ]
        )

    return ValidationResult(values=model.model_dump(exclude_unset=True))
