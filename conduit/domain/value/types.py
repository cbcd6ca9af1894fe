"""Domain value objects for Conduit.

Value objects are immutable and defined by their values, not identity.
They encapsulate normalization and validation rules.
"""

import re
from uuid import UUID

from pydantic import field_validator

from conduit.domain.value.common import RootValueObject

SLUG_MAX_LENGTH = 100

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


class TagName(RootValueObject[str]):
    """Tag name for categorizing articles.

    Names are trimmed and lower-cased on construction, so ``" Python "``
    and ``"python"`` are the same tag.
    """

    @field_validator("root")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Trim and lower-case the name, rejecting blanks."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Tag name can't be empty")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for articles.

    Lowercase alphanumeric runs joined by single hyphens, 1-100 characters.
    Examples: 'how-to-train-your-dragon', 'title-should-be-updated'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > SLUG_MAX_LENGTH:
            raise ValueError(f"Slug must be 1-{SLUG_MAX_LENGTH} characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v

    @classmethod
    def from_title(cls, title: str, fallback_id: UUID) -> "Slug":
        """Derive a slug from an article title.

        Lower-cases the title, collapses every run of non-alphanumeric
        characters into one hyphen and truncates to the maximum length.
        A title with no usable characters falls back to
        ``article-<first 8 hex chars of the id>``.

        Args:
            title: Article title
            fallback_id: Identifier used when the title yields nothing

        Returns:
            Normalized slug
        """
        slug = _NON_ALPHANUMERIC.sub("-", title.lower()).strip("-")
        slug = slug[:SLUG_MAX_LENGTH].rstrip("-")
        if not slug:
            slug = f"article-{fallback_id.hex[:8]}"
        return cls(slug)
