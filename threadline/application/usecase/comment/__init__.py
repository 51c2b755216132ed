"""Comment use cases."""

from .close_thread import CloseThreadRequest, CloseThreadUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .edit_comment import EditCommentRequest, EditCommentUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase
from .moderate_comment import (
    HeartCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    PinCommentUseCase,
)
from .open_thread import OpenThreadRequest, OpenThreadUseCase
from .react_to_comment import ReactToCommentRequest, ReactToCommentUseCase
from .snapshot import ThreadSnapshot
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

__all__ = [
    "CloseThreadRequest",
    "CloseThreadUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "HeartCommentUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "OpenThreadRequest",
    "OpenThreadUseCase",
    "PinCommentUseCase",
    "ReactToCommentRequest",
    "ReactToCommentUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
    "ThreadSnapshot",
]
