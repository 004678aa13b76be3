"""
Client for the vehicle registration service.
"""
from app.clients.base import ValidatorClient, read_flag
from app.schemas.validation import ValidatorResult


class RegistrationClient(ValidatorClient):
    """Asks whether a plate is registered to the given owner email."""

    name = "registration"

    def check(self, plate: str, owner_email: str) -> ValidatorResult:
        return self._check(plate, params={"email": owner_email}, owner_email=owner_email)

    def _interpret(self, payload: dict, owner_email: str = "", **context) -> bool:
        if "valid" in payload:
            return read_flag(payload)
        # Owner record instead of a verdict: compare emails
        registered_email = payload.get("email")
        if not isinstance(registered_email, str):
            raise ValueError("payload has neither 'valid' nor 'email'")
        return registered_email.strip().lower() == owner_email.strip().lower()
