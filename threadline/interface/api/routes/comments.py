"""Comment thread routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from threadline.application.usecase.comment import (
    CloseThreadRequest,
    CloseThreadUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    HeartCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    OpenThreadRequest,
    OpenThreadUseCase,
    PinCommentUseCase,
    ReactToCommentRequest,
    ReactToCommentUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
    ThreadSnapshot,
)
from threadline.domain.value import Reaction, SortOrder
from threadline.interface.error import unwrap_or_raise

router = APIRouter(prefix="/videos", tags=["comments"], route_class=DishkaRoute)


@router.put("/{video_id}/thread", response_model=ThreadSnapshot)
async def open_thread(
    video_id: str,
    open_thread_use_case: FromDishka[OpenThreadUseCase],
    reload: bool = False,
) -> ThreadSnapshot:
    """Open the comment thread of a video.

    Fetches the video's comments from the comment source the first time,
    then returns the open thread until it is closed or reloaded.

    Args:
        video_id: Video ID
        open_thread_use_case: Open thread use case from DI
        reload: Discard the open thread and fetch again

    Returns:
        Thread snapshot in store order

    Raises:
        HTTPException: 400 if the fetched records are malformed
    """
    result = await open_thread_use_case.execute(
        OpenThreadRequest(video_id=video_id, reload=reload)
    )
    return unwrap_or_raise(result)


@router.delete("/{video_id}/thread", status_code=status.HTTP_204_NO_CONTENT)
async def close_thread(
    video_id: str,
    close_thread_use_case: FromDishka[CloseThreadUseCase],
) -> Response:
    """Close the comment thread of a video and drop its state."""
    result = await close_thread_use_case.execute(CloseThreadRequest(video_id=video_id))
    unwrap_or_raise(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{video_id}/comments", response_model=ThreadSnapshot)
async def get_comments(
    video_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    sort: Optional[SortOrder] = None,
) -> ThreadSnapshot:
    """Get the comments of an open thread.

    Args:
        video_id: Video ID
        get_thread_use_case: Get thread use case from DI
        sort: Root ordering (top, newest or oldest; configured default if omitted)

    Returns:
        Thread snapshot with sorted top-level comments
    """
    result = await get_thread_use_case.execute(
        GetThreadRequest(video_id=video_id, sort=sort)
    )
    return unwrap_or_raise(result)


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment."""

    text: str
    author_id: str = Field(min_length=1)
    author_name: str = Field(min_length=1)
    author_avatar_url: Optional[str] = None
    parent_id: Optional[str] = None  # Parent comment ID for replies


@router.post(
    "/{video_id}/comments",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    video_id: str,
    request: SubmitCommentAPIRequest,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
) -> SubmitCommentResponse:
    """Post a comment on a video or reply to another comment.

    Text is trimmed; blank or over-long text is rejected with 400.

    Raises:
        HTTPException: 404 if the thread or parent doesn't exist, 400 on
            invalid text
    """
    result = await submit_comment_use_case.execute(
        SubmitCommentRequest(
            video_id=video_id,
            text=request.text,
            author_id=request.author_id,
            author_name=request.author_name,
            author_avatar_url=request.author_avatar_url,
            parent_id=request.parent_id,
        )
    )
    return unwrap_or_raise(result)


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    text: str


@router.patch("/{video_id}/comments/{comment_id}", response_model=ThreadSnapshot)
async def edit_comment(
    video_id: str,
    comment_id: str,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
) -> ThreadSnapshot:
    """Replace a comment's text and mark it edited."""
    result = await edit_comment_use_case.execute(
        EditCommentRequest(video_id=video_id, comment_id=comment_id, text=request.text)
    )
    return unwrap_or_raise(result)


@router.delete(
    "/{video_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    video_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment together with all of its replies.

    Returns:
        Number of removed comments and the new snapshot
    """
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(video_id=video_id, comment_id=comment_id)
    )
    return unwrap_or_raise(result)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a comment."""

    reaction: Reaction


@router.post(
    "/{video_id}/comments/{comment_id}/reactions", response_model=ThreadSnapshot
)
async def react_to_comment(
    video_id: str,
    comment_id: str,
    request: ReactAPIRequest,
    react_to_comment_use_case: FromDishka[ReactToCommentUseCase],
) -> ThreadSnapshot:
    """Toggle the current user's like or dislike on a comment."""
    result = await react_to_comment_use_case.execute(
        ReactToCommentRequest(
            video_id=video_id, comment_id=comment_id, reaction=request.reaction
        )
    )
    return unwrap_or_raise(result)


@router.post(
    "/{video_id}/comments/{comment_id}/pin", response_model=ModerateCommentResponse
)
async def pin_comment(
    video_id: str,
    comment_id: str,
    pin_comment_use_case: FromDishka[PinCommentUseCase],
) -> ModerateCommentResponse:
    """Pin or unpin a top-level comment (replies are rejected with 400)."""
    result = await pin_comment_use_case.execute(
        ModerateCommentRequest(video_id=video_id, comment_id=comment_id)
    )
    return unwrap_or_raise(result)


@router.post(
    "/{video_id}/comments/{comment_id}/heart", response_model=ModerateCommentResponse
)
async def heart_comment(
    video_id: str,
    comment_id: str,
    heart_comment_use_case: FromDishka[HeartCommentUseCase],
) -> ModerateCommentResponse:
    """Toggle the creator heart on a comment."""
    result = await heart_comment_use_case.execute(
        ModerateCommentRequest(video_id=video_id, comment_id=comment_id)
    )
    return unwrap_or_raise(result)
