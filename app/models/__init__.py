"""
SQLAlchemy database models.
"""
from app.models.brand import Brand
from app.models.model import Model
from app.models.vehicle import Vehicle

__all__ = ["Brand", "Model", "Vehicle"]
