"""FastAPI dependencies for the authentication and loading pipeline.

Every API request resolves its identity (anonymous or authenticated).
Protected routes then require an authenticated identity, and routes on
``{slug}`` / ``{comment_id}`` load the resource into the request context.
Declare the identity requirement before the loaders so an unauthenticated
request is rejected before anything is looked up.
"""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, Header, Request

from conduit.config import AuthSettings
from conduit.domain.error import NotAuthenticatedError, NotFoundError
from conduit.domain.model import Article, Comment
from conduit.domain.service import ArticleService, CommentService, TokenService, UserService
from conduit.interface.api.context import (
    ANONYMOUS,
    Authenticated,
    RequestContext,
)
from conduit.util.jwt import InvalidTokenError


def _parse_authorization(header: str, scheme: str) -> str:
    """Extract the token from ``<scheme> <token>``.

    Raises:
        NotAuthenticatedError: If the header has another shape
    """
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != scheme.lower():
        raise NotAuthenticatedError(f"Authorization header must be '{scheme} <token>'")
    return parts[1]


@inject
async def resolve_identity(
    request: Request,
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    auth_settings: FromDishka[AuthSettings],
    authorization: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Resolve who is making the request.

    No header means an anonymous request. A header that can't be parsed or
    verified, or a token for a user that no longer exists, is rejected.

    Raises:
        NotAuthenticatedError: If a presented credential is unusable
    """
    context = RequestContext()
    request.state.context = context

    if not authorization or not authorization.strip():
        context.identity = ANONYMOUS
        return context

    token = _parse_authorization(authorization, auth_settings.token_scheme)

    try:
        claim = token_service.verify(token)
    except InvalidTokenError as e:
        raise NotAuthenticatedError(str(e))

    user = await user_service.get_by_username(claim.username)
    if user is None:
        logfire.warn("Token subject no longer exists", username=claim.username)
        raise NotAuthenticatedError("User not found for token")

    context.identity = Authenticated(user=user, claim=claim, token=token)
    return context


async def require_identity(
    context: Annotated[RequestContext, Depends(resolve_identity)],
) -> Authenticated:
    """Gate a route on an authenticated identity.

    Raises:
        NotAuthenticatedError: If the request is anonymous
    """
    return context.require_user()


@inject
async def load_article(
    slug: str,
    context: Annotated[RequestContext, Depends(resolve_identity)],
    article_service: FromDishka[ArticleService],
) -> Article:
    """Load the ``{slug}`` article into the request context.

    Raises:
        NotFoundError: If no article has this slug
    """
    article = await article_service.get_by_slug(slug)
    if article is None:
        raise NotFoundError("Article", slug)
    context.article = article
    return article


@inject
async def load_comment(
    comment_id: str,
    context: Annotated[RequestContext, Depends(resolve_identity)],
    article: Annotated[Article, Depends(load_article)],
    comment_service: FromDishka[CommentService],
) -> Comment:
    """Load the ``{comment_id}`` comment of the loaded article.

    Raises:
        NotFoundError: If the ID is malformed, unknown or on another article
    """
    comment = await comment_service.get_comment(article, comment_id)
    context.comment = comment
    return comment


Context = Annotated[RequestContext, Depends(resolve_identity)]
CurrentUser = Annotated[Authenticated, Depends(require_identity)]
LoadedArticle = Annotated[Article, Depends(load_article)]
LoadedComment = Annotated[Comment, Depends(load_comment)]
