"""Per-request authentication and resource context."""

from dataclasses import dataclass

from conduit.domain.error import NotAuthenticatedError
from conduit.domain.model import Article, Comment, User
from conduit.util.jwt import Claim


@dataclass(frozen=True)
class Anonymous:
    """No credential was presented."""


@dataclass(frozen=True)
class Authenticated:
    """A verified token whose subject exists."""

    user: User
    claim: Claim
    token: str


Identity = Anonymous | Authenticated

ANONYMOUS = Anonymous()


@dataclass
class RequestContext:
    """What the dependency chain has established about one request.

    Identity is resolved first; the article and comment are filled in by
    the resource loaders of routes that take them.
    """

    identity: Identity = ANONYMOUS
    article: Article | None = None
    comment: Comment | None = None

    @property
    def viewer(self) -> User | None:
        """The authenticated user, or None for anonymous requests."""
        if isinstance(self.identity, Authenticated):
            return self.identity.user
        return None

    def require_user(self) -> Authenticated:
        """Return the authenticated identity.

        Raises:
            NotAuthenticatedError: If the request is anonymous
        """
        if not isinstance(self.identity, Authenticated):
            raise NotAuthenticatedError()
        return self.identity
