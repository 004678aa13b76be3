"""
Outcome of a single external validator call.
"""
from pydantic import BaseModel
from typing import Optional
import enum


class CheckStatus(str, enum.Enum):
    """Whether the validator produced an answer."""
    OK = "ok"
    FAILED = "failed"


class ValidatorResult(BaseModel):
    """
    Tagged result: ``ok(valid)`` when the validator answered, ``failed(reason)``
    when it could not be reached or its answer could not be read.
    """
    status: CheckStatus
    valid: bool = False
    reason: Optional[str] = None

    @classmethod
    def ok(cls, valid: bool) -> "ValidatorResult":
        return cls(status=CheckStatus.OK, valid=valid)

    @classmethod
    def failed(cls, reason: str) -> "ValidatorResult":
        return cls(status=CheckStatus.FAILED, valid=False, reason=reason)

    @property
    def succeeded(self) -> bool:
        return self.status is CheckStatus.OK

    @property
    def is_valid(self) -> bool:
        """Collapsed boolean: a failed check counts as not valid."""
        return self.succeeded and self.valid
