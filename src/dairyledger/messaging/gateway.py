"""Outbound SMS gateways."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from dairyledger.domain.entities import SendResult
from dairyledger.domain.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SMS_URL = "https://app.smslocal.in/api/v2/sms"
DEFAULT_TIMEOUT = 10.0
COUNTRY_CODE = "91"


def normalize_phone(phone: str) -> str:
    """Normalize a phone number for the gateway.

    Spaces and dashes are removed, a leading "+" is dropped, and bare
    10-digit numbers get the Indian country code.

    Raises:
        ValidationError: If the number is blank
    """
    if not phone or not phone.strip():
        raise ValidationError("Phone number is required")
    number = re.sub(r"[\s-]+", "", phone)
    if number.startswith("+"):
        number = number[1:]
    if len(number) == 10 and not number.startswith(COUNTRY_CODE):
        number = COUNTRY_CODE + number
    return number


class SmsGateway(ABC):
    """Contract for anything that can deliver a text message to a phone."""

    @abstractmethod
    def send(self, phone: str, message: str) -> SendResult:
        """Send ``message`` to ``phone``; delivery failures are returned, not raised."""
        pass

    def close(self) -> None:
        """Release any held resources."""
        pass


class HttpSmsGateway(SmsGateway):
    """SMS gateway reached with a single HTTP GET per message."""

    def __init__(
        self,
        api_key: Optional[str],
        url: str = DEFAULT_SMS_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the gateway.

        Args:
            api_key: Gateway API key; sends fail with a clear error when unset
            url: Gateway endpoint
            timeout: Request timeout in seconds
            client: Optional pre-configured httpx client (used by tests)
        """
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def send(self, phone: str, message: str) -> SendResult:
        if not message or not message.strip():
            raise ValidationError("Message text is required")
        number = normalize_phone(phone)

        if not self.api_key:
            logger.error("SMS API key is not configured")
            return SendResult(success=False, error="SMS service not configured")

        logger.info("Sending SMS to %s", number)
        try:
            response = self._get_client().get(
                self.url,
                params={"apikey": self.api_key, "message": message, "numbers": number},
            )
        except httpx.RequestError as e:
            logger.warning("SMS request to %s failed: %s", number, e)
            return SendResult(success=False, error=f"SMS request failed: {e}")

        if response.is_error:
            logger.warning("SMS gateway returned %s: %s", response.status_code, response.text)
            return SendResult(
                success=False,
                error=f"Failed to send SMS ({response.status_code}): {response.text}",
            )

        try:
            payload = response.json()
        except ValueError:
            payload = {"raw": response.text}

        logger.debug("SMS gateway response: %s", payload)
        return SendResult(success=True, response=payload)

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
