# yoda/api/schedule.py

from typing import List

from fastapi import APIRouter, Depends, status

from yoda.api.deps import get_container, get_current_identity
from yoda.errors import InternalError
from yoda.models import Schedule
from yoda.schemas import MessageResponse, ScheduleCreateRequest
from yoda.services.auth_service import AuthenticatedIdentity
from yoda.services.container import ServiceContainer
from yoda.utils.logger import logger

router = APIRouter(
    prefix="/schedules",
    tags=["schedule"],
    responses={
        400: {"model": MessageResponse},
        401: {"model": MessageResponse},
        403: {"model": MessageResponse},
    },
)


@router.get("", response_model=List[Schedule])
async def list_schedules(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    """Schedules owned by the caller, oldest first"""
    return container.schedules.list_by_owner(identity.user_id)


@router.post("", response_model=Schedule, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    request: ScheduleCreateRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    try:
        return container.schedules.create(
            user_id=identity.user_id,
            content=request.content,
            date=request.date.isoformat(),
            emotions=request.emotions,
            sender_type=request.sender_type,
            sender_name=request.sender_name,
            detail=request.detail,
        )
    except Exception as e:
        logger.error(f"Schedule creation error: {e}")
        raise InternalError("Server error creating schedule")
