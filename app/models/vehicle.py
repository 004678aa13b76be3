"""
Vehicle model for database.
"""
from sqlalchemy import Column, Integer, Numeric, String, DateTime, Uuid, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Vehicle(Base):
    """Vehicle database model."""

    __tablename__ = "vehicles"

    id = Column(Uuid, primary_key=True)
    model_id = Column(Uuid, ForeignKey("models.id"), nullable=False, index=True)
    plate = Column(String(7), unique=True, nullable=False, index=True)
    color = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    owner_email = Column(String(255), nullable=False)
    owner_phone = Column(String(30), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    model = relationship("Model", back_populates="vehicles")
