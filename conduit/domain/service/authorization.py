"""Resource ownership authorization."""

from enum import Enum

import logfire

from conduit.domain.error import NotAuthorizedError
from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment
from conduit.domain.model.user import User

from .base import Service


class Action(str, Enum):
    """Mutations guarded by ownership."""

    UPDATE = "update"
    DELETE = "delete"


class AuthorizationPolicy(Service):
    """Decides whether an authenticated user may mutate a resource.

    Rules:
    - Article update/delete: the article's author only
    - Comment delete: the comment's author only; the article owner gets no override
    """

    def authorize(self, actor: User, resource: Article | Comment, action: Action) -> bool:
        """Check whether the actor may perform the action.

        Args:
            actor: Authenticated user
            resource: Article or comment being mutated
            action: Requested mutation

        Returns:
            True if permitted
        """
        if isinstance(resource, Comment) and action is not Action.DELETE:
            return False
        return resource.author_username == actor.username

    def ensure_authorized(
        self, actor: User, resource: Article | Comment, action: Action
    ) -> None:
        """Require permission for the action.

        Raises:
            NotAuthorizedError: If the actor may not perform the action
        """
        if self.authorize(actor, resource, action):
            return

        resource_name = type(resource).__name__
        resource_id = (
            resource.slug.root if isinstance(resource, Article) else str(resource.id)
        )
        logfire.warn(
            "Authorization denied",
            resource=resource_name,
            resource_id=resource_id,
            action=action.value,
            username=actor.username,
        )
        raise NotAuthorizedError(resource_name, resource_id, actor.username)
