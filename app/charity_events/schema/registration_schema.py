from pydantic import BaseModel, ConfigDict
from typing import Optional

class RegistrationPayload(BaseModel):
    event_id: Optional[int] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    ticket_count: Optional[int] = None

    model_config = ConfigDict(extra="ignore")
