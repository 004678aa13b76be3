"""
Brand model for database.
"""
from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship
from app.database import Base


class Brand(Base):
    """Brand database model."""

    __tablename__ = "brands"

    id = Column(Uuid, primary_key=True)
    name = Column(String(100), nullable=False, index=True)

    # Relationships
    models = relationship("Model", back_populates="brand")
