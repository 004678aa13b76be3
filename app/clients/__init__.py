"""
HTTP clients for the external validator services.
"""
from app.clients.inspection import InspectionClient
from app.clients.registration import RegistrationClient

__all__ = ["InspectionClient", "RegistrationClient"]
