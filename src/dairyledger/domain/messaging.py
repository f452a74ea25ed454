"""Messaging domain service: templates and bulk SMS to accounts."""

import logging
from typing import Iterable, Optional

from dairyledger.database.base import Database
from dairyledger.domain.entities import (
    Account,
    AccountKind,
    BulkSendReport,
    SmsTemplate,
    TemplateType,
)
from dairyledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    template_not_found,
)
from dairyledger.messaging.gateway import SmsGateway
from dairyledger.utils.currency import format_inr

logger = logging.getLogger(__name__)


def render_message(template: str, account: Account) -> str:
    """Fill the {name} and {balance} placeholders for one account.

    The balance is shown as an unsigned rupee amount.
    """
    return template.replace("{name}", account.name).replace(
        "{balance}", format_inr(account.balance)
    )


class MessagingService:
    """Service for SMS templates and notifying accounts."""

    def __init__(self, db: Database, gateway: Optional[SmsGateway] = None):
        """Initialize messaging service.

        Args:
            db: Database instance
            gateway: SMS gateway; required only for sending
        """
        self.db = db
        self.gateway = gateway

    def send_to_accounts(self, account_ids: Iterable[int], message: str) -> BulkSendReport:
        """Render and send a message to each account.

        Accounts without a phone number are skipped. A failure for one
        account does not stop the others.

        Raises:
            ValidationError: If the message is blank or no gateway is set
            NotFoundError: If an account does not exist
        """
        if not message or not message.strip():
            raise ValidationError("Message text is required")
        if self.gateway is None:
            raise ValidationError("No SMS gateway configured")

        accounts = []
        for account_id in account_ids:
            account = self.db.get_account(account_id)
            if account is None:
                raise NotFoundError(account_not_found(account_id))
            accounts.append(account)

        sent: list[Account] = []
        failed: list[tuple[Account, str]] = []
        skipped: list[Account] = []

        for account in accounts:
            if not account.phone:
                skipped.append(account)
                continue
            result = self.gateway.send(account.phone, render_message(message, account))
            if result.success:
                sent.append(account)
            else:
                failed.append((account, result.error or "Unknown error"))

        logger.info(
            "SMS batch finished: %d sent, %d failed, %d skipped",
            len(sent),
            len(failed),
            len(skipped),
        )
        return BulkSendReport(sent=tuple(sent), failed=tuple(failed), skipped=tuple(skipped))

    def send_to_all(self, kind: AccountKind | str, message: str) -> BulkSendReport:
        """Send a message to every customer or every supplier."""
        accounts = self.db.list_accounts(kind=AccountKind.parse(kind))
        return self.send_to_accounts([account.id for account in accounts], message)

    # Templates
    def create_template(
        self,
        name: str,
        message: str,
        template_type: TemplateType | str = TemplateType.GENERAL,
        created_by: Optional[str] = None,
    ) -> int:
        """Save a reusable message.

        Raises:
            ValidationError: If name, message or type is invalid
            ConflictError: If a template with the same name exists
        """
        if not name or not name.strip():
            raise ValidationError("Please enter a template name")
        if not message or not message.strip():
            raise ValidationError("Please enter a message first")
        try:
            template_type = TemplateType(template_type)
        except ValueError:
            raise ValidationError(
                f"Invalid template type '{template_type}': expected customer, supplier or general"
            ) from None
        if any(t.name.lower() == name.strip().lower() for t in self.db.list_sms_templates()):
            raise ConflictError(f"Template '{name.strip()}' already exists")
        return self.db.create_sms_template(
            name=name.strip(),
            message=message.strip(),
            template_type=template_type,
            created_by=created_by,
        )

    def get_template(self, template_id: int) -> SmsTemplate:
        template = self.db.get_sms_template(template_id)
        if template is None:
            raise NotFoundError(template_not_found(template_id))
        return template

    def list_templates(self, audience: Optional[AccountKind | str] = None) -> list[SmsTemplate]:
        """List templates, optionally those usable for customers or suppliers.

        General templates are usable for either audience.
        """
        templates = self.db.list_sms_templates()
        if audience is None:
            return templates
        wanted = TemplateType(AccountKind.parse(audience).value)
        return [t for t in templates if t.template_type in (wanted, TemplateType.GENERAL)]

    def delete_template(self, template_id: int) -> None:
        self.db.delete_sms_template(template_id)
