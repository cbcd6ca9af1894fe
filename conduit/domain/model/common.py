"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict

from conduit.domain.error import EMPTY_MSG, ValidationError


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def blank_fields(**fields: str | None) -> dict[str, list[str]]:
    """Collect an error for every missing or whitespace-only field."""
    return {
        name: [EMPTY_MSG]
        for name, value in fields.items()
        if value is None or not value.strip()
    }


def ensure_not_blank(**fields: str | None) -> None:
    """Reject blank required fields, reporting all of them together.

    Args:
        **fields: Field name to submitted value

    Raises:
        ValidationError: If one or more fields are missing or whitespace only
    """
    errors = blank_fields(**fields)
    if errors:
        raise ValidationError(errors)
