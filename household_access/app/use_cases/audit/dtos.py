from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class AuditEventInfo(BaseModel):
    """Single audit event in response"""

    action: str
    user_id: Optional[str] = None
    timestamp: datetime
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    events: List[AuditEventInfo]
    next_cursor: Optional[str] = None
