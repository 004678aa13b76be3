"""
Client for the vehicle inspection service.
"""
from app.clients.base import ValidatorClient, read_flag
from app.schemas.validation import ValidatorResult


class InspectionClient(ValidatorClient):
    """Asks whether the inspection for a plate is current."""

    name = "inspection"

    def check(self, plate: str) -> ValidatorResult:
        return self._check(plate)

    def _interpret(self, payload: dict, **context) -> bool:
        return read_flag(payload)
