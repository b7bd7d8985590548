# yoda/schemas/letter_schemas.py

from datetime import datetime

from yoda.models import Base


# Response to PATCH /letters/{id}/read
class MarkReadResponse(Base):
    success: bool = True
    read_at: datetime
