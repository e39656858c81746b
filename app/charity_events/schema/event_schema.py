from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date, time

class EventPayload(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    full_description: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[time] = None
    location: Optional[str] = None
    venue_details: Optional[str] = None
    category_id: Optional[int] = None
    organization_id: Optional[int] = None
    ticket_price: Optional[float] = None
    fundraising_goal: Optional[float] = None
    current_progress: Optional[float] = None
    is_active: Optional[bool] = None
    image_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    model_config = ConfigDict(extra="ignore")
