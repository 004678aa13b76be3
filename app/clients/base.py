"""
Shared plumbing for the external validator HTTP clients.
"""
import logging
from typing import Any, Optional

import requests

from app.schemas.validation import ValidatorResult

logger = logging.getLogger(__name__)


class ValidatorClient:
    """
    Issues one GET per call against a configured URL template and turns any
    fault into ``ValidatorResult.failed``. Subclasses read the payload.
    """

    name = "validator"

    def __init__(
        self,
        url_template: str,
        timeout: float,
        session: Optional[requests.Session] = None,
    ):
        self.url_template = url_template
        self.timeout = timeout
        self.session = session or requests.Session()

    def _fetch(self, plate: str, params: Optional[dict] = None) -> Any:
        url = self.url_template.format(plate=plate)
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        payload = response.json()
        # Services may answer with a list of records; the first one counts
        if isinstance(payload, list):
            if not payload:
                raise ValueError("empty response")
            payload = payload[0]
        if not isinstance(payload, dict):
            raise ValueError(f"unexpected payload type {type(payload).__name__}")
        return payload

    def _check(self, plate: str, params: Optional[dict] = None, **context) -> ValidatorResult:
        try:
            payload = self._fetch(plate, params)
            return ValidatorResult.ok(self._interpret(payload, **context))
        except requests.Timeout:
            logger.warning("%s service timed out for plate %s", self.name, plate)
            return ValidatorResult.failed("timeout")
        except requests.RequestException as exc:
            logger.warning("%s service request failed for plate %s: %s", self.name, plate, exc)
            return ValidatorResult.failed(f"request error: {exc}")
        except ValueError as exc:
            logger.warning("%s service returned an unreadable payload for plate %s: %s", self.name, plate, exc)
            return ValidatorResult.failed(f"bad payload: {exc}")
        except Exception as exc:
            logger.exception("%s service check crashed for plate %s", self.name, plate)
            return ValidatorResult.failed(f"unexpected error: {exc}")

    def _interpret(self, payload: dict, **context) -> bool:
        raise NotImplementedError


def read_flag(payload: dict, key: str = "valid") -> bool:
    value = payload.get(key)
    if not isinstance(value, bool):
        raise ValueError(f"field '{key}' missing or not a boolean")
    return value
