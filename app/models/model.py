"""
Model (vehicle line of a brand) for database.
"""
from sqlalchemy import Column, String, Uuid, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Model(Base):
    """Vehicle model database model."""

    __tablename__ = "models"

    id = Column(Uuid, primary_key=True)
    brand_id = Column(Uuid, ForeignKey("brands.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)

    # Relationships
    brand = relationship("Brand", back_populates="models")
    vehicles = relationship("Vehicle", back_populates="model")
