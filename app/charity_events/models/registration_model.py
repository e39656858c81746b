from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from charity_events.database import Base

class Registration(Base):
    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    ticket_count = Column(Integer, nullable=False, default=1)

    # Assigned by the store on insert
    registration_date = Column(DateTime, nullable=False, server_default=func.now())

    event = relationship("Event", back_populates="registrations")
