# yoda/schemas/__init__.py
"""
Request/response schemas for the API layer
"""

from .commons_schemas import MessageResponse, HealthResponse
from .auth_schemas import RegisterRequest, LoginRequest, AuthResponse
from .schedule_schemas import ScheduleCreateRequest
from .letter_schemas import MarkReadResponse
