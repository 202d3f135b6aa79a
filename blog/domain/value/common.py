"""Base classes for value objects."""

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import ValidationError


class ValueObject(BaseModel):
    """Base class for composite value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


def first_error_message(exc: PydanticValidationError) -> str:
    """Extract the human-readable message of the first failed rule.

    Messages raised as ValueError inside validators come back prefixed
    with "Value error, "; the unprefixed message is kept in the error context.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid value"
    error = errors[0]
    ctx = error.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])
    return error["msg"]


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root)
    - model_dump() automatically returns the primitive value, not a dict
    - Validation runs once, at construction; instances never change

    Use create() rather than the constructor from domain code: it reports
    failures as a domain ValidationError with a single message.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    @classmethod
    def create(cls, value: Any) -> Self:
        """Validate a raw value and wrap it.

        Args:
            value: Raw value

        Returns:
            Value object wrapping the canonical value

        Raises:
            ValidationError: If the value violates any rule
        """
        try:
            return cls(value)
        except PydanticValidationError as e:
            raise ValidationError(first_error_message(e)) from e

    def equals(self, other: "RootValueObject[T]") -> bool:
        """Compare by canonical value."""
        return type(self) is type(other) and self.root == other.root

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
