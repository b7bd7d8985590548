# yoda/models/base.py
"""
Base model for in-memory records.

Fields are snake_case in Python and camelCase on the wire
(``user_id`` <-> ``userId``).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
