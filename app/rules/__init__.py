"""
Validation rules used to enrich vehicle details.
"""
from app.rules.inspection import InspectionRule
from app.rules.registration import RegistrationRule

__all__ = ["InspectionRule", "RegistrationRule"]
