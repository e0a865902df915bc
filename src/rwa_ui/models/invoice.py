"""
Invoice and invoice batch models.

The hierarchy mirrors the backend DTOs:

    InvoiceBatch (creditor, debtor, accepted currency, status)
    └── Invoice[] (number, amount, due date, on-chain hashes, status)

Enterprises create invoices, verify them, then issue a selection of
verified invoices into a batch. A batch is later tokenized (see
``models.token``).
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Sequence

from rwa_ui.errors import ValidationError
from rwa_ui.models.common import parse_enum, payload
from rwa_ui.utils import parse_date, to_decimal, to_timestamp


class InvoiceStatus(str, Enum):
    PENDING = "Pending"
    VERIFIED = "Verified"
    PACKAGED = "Packaged"
    REPAID = "Repaid"
    OVERDUE = "Overdue"
    DEFAULTED = "Defaulted"
    ON_SALE = "OnSale"
    SOLD_OUT = "SoldOut"


class InvoiceBatchStatus(str, Enum):
    PACKAGING = "Packaging"
    ISSUED = "Issued"
    TRADING = "Trading"
    REPAYING = "Repaying"
    SETTLED = "Settled"
    DEFAULTED = "Defaulted"


@dataclass(slots=True)
class Invoice:
    """An invoice as returned by the ``/invoice`` endpoints."""

    id: str
    invoice_number: str
    creditor_id: str
    debtor_id: str
    amount: Decimal
    currency: str
    due_date: datetime | None
    status: InvoiceStatus = InvoiceStatus.PENDING
    ipfs_hash: str | None = None
    batch_id: str | None = None
    payee: str | None = None
    payer: str | None = None
    contract_hash: str | None = None
    blockchain_timestamp: str | None = None
    token_batch: str | None = None
    is_cleared: bool = False
    is_valid: bool = False
    annual_interest_rate: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def can_verify(self) -> bool:
        return self.status is InvoiceStatus.PENDING

    @property
    def can_issue(self) -> bool:
        """Only verified invoices that are not yet in a batch can be issued."""
        return self.status is InvoiceStatus.VERIFIED and not self.batch_id

    @classmethod
    def from_dict(cls, data: Any) -> "Invoice":
        b = payload(data)
        return cls(
            id=str(b.get("id") or ""),
            invoice_number=b.get("invoice_number", ""),
            creditor_id=b.get("creditor_id", ""),
            debtor_id=b.get("debtor_id", ""),
            amount=to_decimal(b.get("amount")),
            currency=b.get("currency", ""),
            due_date=parse_date(b.get("due_date")),
            status=parse_enum(InvoiceStatus, b.get("status"), InvoiceStatus.PENDING),
            ipfs_hash=b.get("ipfs_hash"),
            batch_id=b.get("batch_id"),
            payee=b.get("payee"),
            payer=b.get("payer"),
            contract_hash=b.get("contract_hash"),
            blockchain_timestamp=b.get("blockchain_timestamp"),
            token_batch=b.get("token_batch"),
            is_cleared=bool(b.get("is_cleared") or False),
            is_valid=bool(b.get("is_valid") or False),
            annual_interest_rate=float(b.get("annual_interest_rate") or 0.0),
            created_at=parse_date(b.get("created_at")),
            updated_at=parse_date(b.get("updated_at")),
        )


@dataclass(slots=True)
class CreateInvoiceParams:
    """Form data for ``POST /invoice/create``."""

    payee: str
    payer: str
    amount: Decimal
    currency: str
    due_date: date | datetime | None
    invoice_ipfs_hash: str
    contract_ipfs_hash: str

    def validate(self) -> None:
        """
        Check the form before submitting.

        Raises:
            ValidationError: If a required field is missing or the amount is not positive.
        """
        missing = [
            name
            for name, value in (
                ("payer", self.payer),
                ("currency", self.currency),
                ("due_date", self.due_date),
                ("invoice_ipfs_hash", self.invoice_ipfs_hash),
                ("contract_ipfs_hash", self.contract_ipfs_hash),
            )
            if not value
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        if self.amount <= 0:
            raise ValidationError("Amount must be greater than 0")

    def to_payload(self) -> dict:
        """Return the request body; the due date is sent as unix seconds."""
        return {
            "payee": self.payee,
            "payer": self.payer,
            "amount": str(self.amount),
            "currency": self.currency,
            "due_date": to_timestamp(self.due_date),
            "invoice_ipfs_hash": self.invoice_ipfs_hash,
            "contract_ipfs_hash": self.contract_ipfs_hash,
        }


@dataclass(slots=True)
class InvoiceBatch:
    """An invoice batch as returned by ``/invoice/batches`` and ``/invoice/batch/{id}``."""

    id: str
    creditor_name: str
    debtor_name: str
    accepted_currency: str
    status: InvoiceBatchStatus
    created_at: datetime | None = None
    invoice_count: int = 0
    total_amount: Decimal = Decimal(0)
    token_batch_id: str | None = None

    @property
    def can_tokenize(self) -> bool:
        """A batch can be tokenized once issued and only once."""
        return self.status is InvoiceBatchStatus.ISSUED and not self.token_batch_id

    def default_reference(self) -> str:
        return f"BATCH-{self.id[:6] or 'NEW'}"

    @classmethod
    def from_dict(cls, data: Any) -> "InvoiceBatch":
        b = payload(data)
        return cls(
            id=str(b.get("id") or ""),
            creditor_name=b.get("creditor_name", ""),
            debtor_name=b.get("debtor_name", ""),
            accepted_currency=b.get("accepted_currency", ""),
            status=parse_enum(
                InvoiceBatchStatus, b.get("status"), InvoiceBatchStatus.PACKAGING
            ),
            created_at=parse_date(b.get("created_at")),
            invoice_count=int(b.get("invoice_count") or 0),
            total_amount=to_decimal(b.get("total_amount")),
            token_batch_id=b.get("token_batch_id") or None,
        )


@dataclass(slots=True)
class BatchSummary:
    """Figures shown above a batch's invoice list."""

    invoice_count: int = 0
    total_amount: Decimal = Decimal(0)
    earliest_due_date: datetime | None = None
    latest_due_date: datetime | None = None
    currencies: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, invoices: Sequence[Invoice]) -> "BatchSummary":
        due_dates = [inv.due_date for inv in invoices if inv.due_date]
        currencies: list[str] = []
        for inv in invoices:
            if inv.currency and inv.currency not in currencies:
                currencies.append(inv.currency)
        return cls(
            invoice_count=len(invoices),
            total_amount=sum((inv.amount for inv in invoices), Decimal(0)),
            earliest_due_date=min(due_dates) if due_dates else None,
            latest_due_date=max(due_dates) if due_dates else None,
            currencies=currencies,
        )


@dataclass(slots=True)
class InterestDetail:
    """One day of accrued interest on a holding."""

    accrual_date: datetime | None
    daily_interest_amount: Decimal
    invoice_title: str
    invoice_number: str

    @classmethod
    def from_dict(cls, data: Any) -> "InterestDetail":
        b = payload(data)
        return cls(
            accrual_date=parse_date(b.get("accrual_date")),
            daily_interest_amount=to_decimal(b.get("daily_interest_amount")),
            invoice_title=b.get("invoice_title", ""),
            invoice_number=b.get("invoice_number", ""),
        )
