"""Factory functions for creating SMS gateways from the environment."""

import os
from typing import Optional

from dairyledger.messaging.gateway import DEFAULT_SMS_URL, DEFAULT_TIMEOUT, HttpSmsGateway


def create_sms_gateway(
    api_key: Optional[str] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> HttpSmsGateway:
    """Create the HTTP SMS gateway.

    Args:
        api_key: API key. If None, uses DAIRYLEDGER_SMS_API_KEY
        url: Endpoint. If None, uses DAIRYLEDGER_SMS_URL, then the default
        timeout: Seconds. If None, uses DAIRYLEDGER_SMS_TIMEOUT, then 10

    Returns:
        HttpSmsGateway instance
    """
    if api_key is None:
        api_key = os.environ.get("DAIRYLEDGER_SMS_API_KEY")

    if url is None:
        url = os.environ.get("DAIRYLEDGER_SMS_URL", DEFAULT_SMS_URL)

    if timeout is None:
        raw_timeout = os.environ.get("DAIRYLEDGER_SMS_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"DAIRYLEDGER_SMS_TIMEOUT must be a number, got '{raw_timeout}'") from None

    return HttpSmsGateway(api_key=api_key, url=url, timeout=timeout)
