"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so loosely typed rows become
strictly typed domain entities before they reach any service.
"""

from dairyledger.domain import entities as domain
from dairyledger.domain.balance import as_decimal
from dairyledger.database.models import (
    Account as ORMAccount,
    Entry as ORMEntry,
    DeletedRecord as ORMDeletedRecord,
    Setting as ORMSetting,
    SmsTemplate as ORMSmsTemplate,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        code=orm_account.code,
        kind=domain.AccountKind.parse(orm_account.kind),
        name=orm_account.name,
        milk_rate=as_decimal(orm_account.milk_rate),
        balance=as_decimal(orm_account.balance),
        created_at=orm_account.created_at,
        phone=orm_account.phone,
        address=orm_account.address,
        created_by=orm_account.created_by,
    )


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=orm_entry.id,
        account_id=orm_entry.account_id,
        kind=domain.EntryKind.parse(orm_entry.kind),
        quantity=as_decimal(orm_entry.quantity),
        rate=as_decimal(orm_entry.rate),
        amount=as_decimal(orm_entry.amount),
        created_at=orm_entry.created_at,
        note=orm_entry.note,
        created_by=orm_entry.created_by,
    )


def deleted_record_to_domain(orm_record: ORMDeletedRecord) -> domain.DeletedRecord:
    """Convert SQLAlchemy DeletedRecord model to domain DeletedRecord entity."""
    return domain.DeletedRecord(
        id=orm_record.id,
        table_name=orm_record.table_name,
        record_id=orm_record.record_id,
        record_data=dict(orm_record.record_data or {}),
        deletion_reason=orm_record.deletion_reason,
        deleted_at=orm_record.deleted_at,
        deleted_by=orm_record.deleted_by,
    )


def setting_to_domain(orm_setting: ORMSetting) -> domain.Setting:
    """Convert SQLAlchemy Setting model to domain Setting entity."""
    return domain.Setting(
        key=orm_setting.key,
        value=orm_setting.value,
        updated_at=orm_setting.updated_at,
        description=orm_setting.description,
        updated_by=orm_setting.updated_by,
    )


def sms_template_to_domain(orm_template: ORMSmsTemplate) -> domain.SmsTemplate:
    """Convert SQLAlchemy SmsTemplate model to domain SmsTemplate entity."""
    return domain.SmsTemplate(
        id=orm_template.id,
        name=orm_template.name,
        message=orm_template.message,
        template_type=domain.TemplateType(orm_template.template_type),
        created_at=orm_template.created_at,
        created_by=orm_template.created_by,
    )


def account_snapshot(orm_account: ORMAccount) -> dict:
    """JSON-safe copy of an account row for the deleted-records log."""
    return {
        "id": orm_account.id,
        "code": orm_account.code,
        "kind": orm_account.kind,
        "name": orm_account.name,
        "phone": orm_account.phone,
        "address": orm_account.address,
        "milk_rate": str(as_decimal(orm_account.milk_rate)),
        "balance": str(as_decimal(orm_account.balance)),
        "created_by": orm_account.created_by,
        "created_at": orm_account.created_at.isoformat() if orm_account.created_at else None,
    }


def entry_snapshot(orm_entry: ORMEntry) -> dict:
    """JSON-safe copy of an entry row for the deleted-records log."""
    return {
        "id": orm_entry.id,
        "account_id": orm_entry.account_id,
        "kind": orm_entry.kind,
        "quantity": str(as_decimal(orm_entry.quantity)),
        "rate": str(as_decimal(orm_entry.rate)),
        "amount": str(as_decimal(orm_entry.amount)),
        "note": orm_entry.note,
        "created_by": orm_entry.created_by,
        "created_at": orm_entry.created_at.isoformat() if orm_entry.created_at else None,
    }
