"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, Form, UploadFile, status

from huddle.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    RemoveAttachmentRequest,
    RemoveAttachmentResponse,
    RemoveAttachmentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from huddle.config import StorageSettings
from huddle.domain.error import ValidationError
from huddle.domain.service import JWTService
from huddle.domain.value import UploadedFile

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


async def _read_uploads(
    files: list[UploadFile] | None, max_file_size: int
) -> list[UploadedFile]:
    """Read multipart files into memory.

    Never reads more than ``max_file_size + 1`` bytes of a file, so an
    oversized upload is rejected without being buffered whole.

    Raises:
        ValidationError: If a file exceeds ``max_file_size``
    """
    uploads = []
    for file in files or []:
        # UploadFile.size can be None; the bounded read covers that case
        if file.size is not None and file.size > max_file_size:
            raise _file_too_large(file, max_file_size)
        data = await file.read(max_file_size + 1)
        if len(data) > max_file_size:
            raise _file_too_large(file, max_file_size)
        uploads.append(
            UploadedFile(
                filename=file.filename or "upload",
                mimetype=file.content_type or "application/octet-stream",
                data=data,
            )
        )
    return uploads


def _file_too_large(file: UploadFile, max_file_size: int) -> ValidationError:
    logfire.warn(
        "Upload rejected before reading",
        filename=file.filename,
        size=file.size,
        max_file_size=max_file_size,
    )
    return ValidationError(
        f"File {file.filename} exceeds the maximum size of {max_file_size} bytes"
    )


def _user_id(jwt_service: JWTService, auth_token: str | None) -> str | None:
    user_id = jwt_service.authenticate(auth_token)
    return str(user_id) if user_id else None


@router.get("/events/{event_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    event_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List every discussion thread of an event.

    Deleted comments that still have replies are shown as placeholders.
    """
    return await get_comments_use_case.execute(GetCommentsRequest(event_id=event_id))


@router.post(
    "/events/{event_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    event_id: str,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    storage_settings: FromDishka[StorageSettings],
    text: str | None = Form(default=None),
    parent_id: str | None = Form(default=None),
    files: list[UploadFile] | None = File(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an event, or reply to a comment with ``parent_id``.

    Requires authentication. Accepts multipart form data; a comment needs
    text, at least one file, or both.
    """
    request = CreateCommentRequest(
        event_id=event_id,
        author_id=_user_id(jwt_service, auth_token),
        text=text,
        parent_id=parent_id or None,
        uploads=await _read_uploads(files, storage_settings.max_file_size),
    )
    return await create_comment_use_case.execute(request)


@router.get("/comments/{comment_id}/thread", response_model=GetThreadResponse)
async def get_thread(
    comment_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Fetch the whole thread the comment belongs to, from its root."""
    return await get_thread_use_case.execute(GetThreadRequest(comment_id=comment_id))


@router.put("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    storage_settings: FromDishka[StorageSettings],
    text: str | None = Form(default=None),
    files: list[UploadFile] | None = File(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's text and append attachments.

    Only the author can edit. Omitting ``text`` keeps the current text.
    """
    request = UpdateCommentRequest(
        comment_id=comment_id,
        requester_id=_user_id(jwt_service, auth_token),
        text=text,
        uploads=await _read_uploads(files, storage_settings.max_file_size),
    )
    return await update_comment_use_case.execute(request)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment. Its replies stay in place."""
    request = DeleteCommentRequest(
        comment_id=comment_id,
        requester_id=_user_id(jwt_service, auth_token),
    )
    return await delete_comment_use_case.execute(request)


@router.delete(
    "/comments/{comment_id}/attachments/{attachment_id}",
    response_model=RemoveAttachmentResponse,
)
async def remove_attachment(
    comment_id: str,
    attachment_id: str,
    remove_attachment_use_case: FromDishka[RemoveAttachmentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveAttachmentResponse:
    """Remove one attachment from a comment."""
    request = RemoveAttachmentRequest(
        comment_id=comment_id,
        attachment_id=attachment_id,
        requester_id=_user_id(jwt_service, auth_token),
    )
    return await remove_attachment_use_case.execute(request)
