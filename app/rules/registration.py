"""
Registration rule.
"""
from app.clients.registration import RegistrationClient
from app.schemas.validation import ValidatorResult


class RegistrationRule:
    """Is the vehicle registered to its recorded owner?"""

    def __init__(self, client: RegistrationClient):
        self._client = client

    def is_valid(self, plate: str, owner_email: str) -> ValidatorResult:
        return self._client.check(plate, owner_email)
