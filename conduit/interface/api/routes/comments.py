"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from conduit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from conduit.application.view import CamelModel
from conduit.interface.api.dependencies import (
    Context,
    CurrentUser,
    LoadedArticle,
    LoadedComment,
)

router = APIRouter(
    prefix="/articles/{slug}/comments", tags=["comments"], route_class=DishkaRoute
)


class NewComment(CamelModel):
    body: str | None = None


class NewCommentBody(CamelModel):
    """API request for creating a comment."""

    comment: NewComment


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    context: Context,
    article: LoadedArticle,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List an article's comments, oldest first."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(article=article, viewer=context.viewer)
    )


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    body: NewCommentBody,
    current: CurrentUser,
    article: LoadedArticle,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on an article.

    Raises:
        ValidationError: If the body is blank
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            author=current.user, article=article, body=body.comment.body
        )
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    context: Context,
    comment: LoadedComment,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get one comment of an article."""
    return await get_comment_use_case.execute(
        GetCommentRequest(comment=comment, viewer=context.viewer)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    current: CurrentUser,
    comment: LoadedComment,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> Response:
    """Delete a comment. Only its author may do this."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(actor=current.user, comment=comment)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
