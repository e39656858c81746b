from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from charity_events.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)

    events = relationship("Event", back_populates="category")
