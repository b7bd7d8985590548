# yoda/schemas/commons_schemas.py
"""
Shared schemas
"""

from pydantic import BaseModel
from typing import Dict


# Error body for every non-2xx response
class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    letter_job_running: bool
    counts: Dict[str, int]
