"""
Audit trail Pydantic schemas.
"""

from pydantic import BaseModel
from datetime import datetime
from typing import Any, Dict, List, Optional


class AuditEntryResponse(BaseModel):
    action: str
    entity_id: str
    timestamp: datetime
    correlation_id: Optional[str]
    metadata: Dict[str, Any]

    class Config:
        from_attributes = True


class AuditTrailResponse(BaseModel):
    entries: List[AuditEntryResponse]
    total: int
