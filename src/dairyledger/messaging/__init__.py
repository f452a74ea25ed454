"""Outbound messaging for dairyledger application."""

from dairyledger.messaging.gateway import SmsGateway, HttpSmsGateway, normalize_phone
from dairyledger.messaging.factories import create_sms_gateway

__all__ = ["SmsGateway", "HttpSmsGateway", "normalize_phone", "create_sms_gateway"]
