from sqlalchemy import Column, Integer, String, Float, Text, Date, Time, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from charity_events.database import Base
from charity_events.models.category_model import Category
from charity_events.models.organization_model import Organization
from charity_events.models.registration_model import Registration

class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    full_description = Column(Text, nullable=True)
    event_date = Column(Date, nullable=False, index=True)
    event_time = Column(Time, nullable=True)
    location = Column(String(255), nullable=False)
    venue_details = Column(Text, nullable=True)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    organization_id = Column(Integer, ForeignKey("organizations.id"), nullable=False)

    ticket_price = Column(Float, nullable=True)
    fundraising_goal = Column(Float, nullable=True)
    current_progress = Column(Float, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    image_url = Column(String(500), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    # Relationships
    category = relationship(Category, back_populates="events")
    organization = relationship(Organization, back_populates="events")
    registrations = relationship(Registration, back_populates="event")


# Columns an admin create/update writes; everything except the surrogate key
EVENT_FIELDS = [column.name for column in Event.__table__.columns if column.name != "id"]
