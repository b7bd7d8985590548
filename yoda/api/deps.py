# yoda/api/deps.py
"""
API dependencies: service container and the authenticated identity
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from yoda.errors import MissingCredentialError
from yoda.services.auth_service import AuthenticatedIdentity
from yoda.services.container import ServiceContainer

# auto_error=False so a missing header maps to our 401 instead of FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    container: ServiceContainer = Depends(get_container),
) -> AuthenticatedIdentity:
    """Missing token -> 401, invalid or expired token -> 403."""
    if credentials is None or not credentials.credentials:
        raise MissingCredentialError()
    return container.auth.verify(credentials.credentials)
