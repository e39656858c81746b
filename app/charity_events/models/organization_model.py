from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from charity_events.database import Base

class Organization(Base):
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    events = relationship("Event", back_populates="organization")
