# yoda/api/auth.py

from fastapi import APIRouter, Depends, status

from yoda.api.deps import get_container, get_current_identity
from yoda.errors import InternalError, YodaError
from yoda.models import UserPublic
from yoda.schemas import AuthResponse, LoginRequest, MessageResponse, RegisterRequest
from yoda.services.auth_service import AuthenticatedIdentity
from yoda.services.container import ServiceContainer
from yoda.utils.logger import logger

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={
        400: {"model": MessageResponse},
        401: {"model": MessageResponse},
        403: {"model": MessageResponse},
    },
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, container: ServiceContainer = Depends(get_container)):
    """Create an account and return it with a bearer token"""
    try:
        user, token = await container.auth.register(request.name, request.email, request.password)
        return AuthResponse(user=user, token=token)
    except YodaError:
        raise
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise InternalError("Server error during registration")


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, container: ServiceContainer = Depends(get_container)):
    try:
        user, token = await container.auth.authenticate(request.email, request.password)
        return AuthResponse(user=user, token=token)
    except YodaError:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise InternalError("Server error during login")


@router.get("/me", response_model=UserPublic)
async def me(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    return container.auth.current_user(identity)
