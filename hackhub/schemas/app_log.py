"""
Pydantic schema for persisted application log entries.
"""

import json
from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from hackhub.schemas.common import CamelModel


class AppLogResponse(CamelModel):
    id: str
    timestamp: datetime
    level: str
    message: str
    correlation_id: Optional[str] = None
    context: Optional[str] = None
    meta: Optional[Any] = None
    user_id: Optional[str] = None

    @field_validator("meta", mode="before")
    @classmethod
    def decode_meta(cls, v):
        # Stored as JSON text; entries that are not valid JSON come back raw
        if isinstance(v, str):
            try:
                return json.loads(v)
            except ValueError:
                return v
        return v
