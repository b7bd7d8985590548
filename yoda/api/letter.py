# yoda/api/letter.py

from typing import List

from fastapi import APIRouter, Depends

from yoda.api.deps import get_container, get_current_identity
from yoda.errors import InternalError, YodaError
from yoda.models import Letter
from yoda.schemas import MarkReadResponse, MessageResponse
from yoda.services.auth_service import AuthenticatedIdentity
from yoda.services.container import ServiceContainer
from yoda.utils.logger import logger

router = APIRouter(
    prefix="/letters",
    tags=["letter"],
    responses={
        401: {"model": MessageResponse},
        403: {"model": MessageResponse},
        404: {"model": MessageResponse},
    },
)


@router.get("", response_model=List[Letter])
async def list_letters(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    """Letters delivered to the caller"""
    return container.letters.list_by_owner(identity.user_id)


@router.get("/{letter_id}", response_model=Letter)
async def get_letter(
    letter_id: str,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    return container.letters.get(letter_id, identity.user_id)


@router.patch("/{letter_id}/read", response_model=MarkReadResponse)
async def mark_letter_read(
    letter_id: str,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    """Mark a letter as read; repeated calls keep the first timestamp"""
    try:
        read_at = container.letters.mark_read(letter_id, identity.user_id)
        return MarkReadResponse(success=True, read_at=read_at)
    except YodaError:
        raise
    except Exception as e:
        logger.error(f"Mark as read error: {e}")
        raise InternalError("Server error marking letter as read")
