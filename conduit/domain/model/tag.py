"""Tag entity for categorizing articles."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are found or created by name and never duplicated.
    """

    id: TagId
    name: TagName  # Unique, trimmed, lowercase
    created_at: datetime = Field(default_factory=datetime.now)
