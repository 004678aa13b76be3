"""
Inspection rule.
"""
from app.clients.inspection import InspectionClient
from app.schemas.validation import ValidatorResult


class InspectionRule:
    """Is the vehicle's inspection current?"""

    def __init__(self, client: InspectionClient):
        self._client = client

    def is_valid(self, plate: str) -> ValidatorResult:
        return self._client.check(plate)
