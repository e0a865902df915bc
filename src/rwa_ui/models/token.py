"""
Token batch, market and holding models.

An issued invoice batch is tokenized into a TokenBatch: a fixed supply of
fungible shares priced in a stablecoin and earning a fixed APY until
maturity. The TokenMarket view of a batch is what investors browse; a
purchase turns into a TokenHolding. Transactions and daily interest
accruals record what happened to holdings afterwards.

Amounts arrive from the backend as decimal strings and are kept as Decimal.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from rwa_ui.errors import ValidationError
from rwa_ui.models.common import parse_enum, payload
from rwa_ui.utils import parse_date, to_decimal


class TokenBatchStatus(str, Enum):
    PENDING = "Pending"
    AVAILABLE = "Available"
    FUNDING = "Funding"
    FUNDED = "Funded"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"
    EXPIRED = "Expired"


class TokenHoldingStatus(str, Enum):
    ACTIVE = "Active"
    REDEEMED = "Redeemed"
    TRANSFERRED = "Transferred"
    DEFAULTED = "Defaulted"


@dataclass(slots=True)
class TokenBatch:
    """A token batch as returned by ``/token/batches``."""

    id: str
    batch_reference: str
    creditor_name: str
    debtor_name: str
    stablecoin_symbol: str
    total_token_supply: Decimal
    token_value: Decimal
    total_value: Decimal
    sold_token_amount: Decimal
    available_token_amount: Decimal
    status: TokenBatchStatus
    interest_rate_apy: Decimal
    maturity_date: datetime | None

    @property
    def sold_ratio(self) -> float:
        """Fraction of the supply already sold, between 0 and 1."""
        if self.total_token_supply <= 0:
            return 0.0
        return float(self.sold_token_amount / self.total_token_supply)

    @classmethod
    def from_dict(cls, data: Any) -> "TokenBatch":
        b = payload(data)
        return cls(
            id=str(b.get("id") or ""),
            batch_reference=b.get("batch_reference", ""),
            creditor_name=b.get("creditor_name", ""),
            debtor_name=b.get("debtor_name", ""),
            stablecoin_symbol=b.get("stablecoin_symbol", ""),
            total_token_supply=to_decimal(b.get("total_token_supply")),
            token_value=to_decimal(b.get("token_value")),
            total_value=to_decimal(b.get("total_value")),
            sold_token_amount=to_decimal(b.get("sold_token_amount")),
            available_token_amount=to_decimal(b.get("available_token_amount")),
            status=parse_enum(
                TokenBatchStatus, b.get("status"), TokenBatchStatus.PENDING
            ),
            interest_rate_apy=to_decimal(b.get("interest_rate_apy")),
            maturity_date=parse_date(b.get("maturity_date")),
        )


@dataclass(slots=True)
class TokenMarket:
    """A token batch listed for sale, as returned by ``/token/markets``."""

    id: str
    batch_id: str
    batch_reference: str
    creditor_address: str
    debtor_address: str
    stablecoin_symbol: str
    total_token_amount: Decimal
    sold_token_amount: Decimal
    available_token_amount: Decimal
    token_value_per_unit: Decimal
    remaining_transaction_amount: Decimal

    @property
    def sold_out(self) -> bool:
        return self.available_token_amount <= 0

    def clamp_purchase(self, shares: int) -> int:
        """Limit a requested share count to between 1 and the shares available."""
        available = int(self.available_token_amount)
        if available <= 0:
            return 0
        return min(max(int(shares), 1), available)

    def purchase_cost(self, shares: int) -> Decimal:
        return self.token_value_per_unit * shares

    @classmethod
    def from_dict(cls, data: Any) -> "TokenMarket":
        b = payload(data)
        market_id = str(b.get("id") or "")
        return cls(
            id=market_id,
            batch_id=str(b.get("batch_id") or market_id),
            batch_reference=b.get("batch_reference", ""),
            creditor_address=b.get("creditor_address", ""),
            debtor_address=b.get("debtor_address", ""),
            stablecoin_symbol=b.get("stablecoin_symbol", ""),
            total_token_amount=to_decimal(b.get("total_token_amount")),
            sold_token_amount=to_decimal(b.get("sold_token_amount")),
            available_token_amount=to_decimal(b.get("available_token_amount")),
            token_value_per_unit=to_decimal(b.get("token_value_per_unit")),
            remaining_transaction_amount=to_decimal(
                b.get("remaining_transaction_amount")
            ),
        )


@dataclass(slots=True)
class TokenHolding:
    """An investor's position in one token batch (``/token/holdings``)."""

    id: str
    batch_reference: str
    token_amount: Decimal
    purchase_value: Decimal
    current_value: Decimal
    purchase_date: datetime | None
    status: TokenHoldingStatus

    @property
    def accrued_value(self) -> Decimal:
        return self.current_value - self.purchase_value

    @classmethod
    def from_dict(cls, data: Any) -> "TokenHolding":
        b = payload(data)
        return cls(
            id=str(b.get("id") or ""),
            batch_reference=b.get("batch_reference", ""),
            token_amount=to_decimal(b.get("token_amount")),
            purchase_value=to_decimal(b.get("purchase_value")),
            current_value=to_decimal(b.get("current_value")),
            purchase_date=parse_date(b.get("purchase_date")),
            status=parse_enum(
                TokenHoldingStatus, b.get("status"), TokenHoldingStatus.ACTIVE
            ),
        )


@dataclass(slots=True)
class Transaction:
    """A purchase, interest or redemption record (``/transaction/list``)."""

    id: str
    holding_id: str
    invoice_id: str
    transaction_type: str
    amount: Decimal
    transaction_date: datetime | None
    status: str

    @classmethod
    def from_dict(cls, data: Any) -> "Transaction":
        b = payload(data)
        return cls(
            id=str(b.get("id") or ""),
            holding_id=b.get("holding_id", ""),
            invoice_id=b.get("invoice_id", ""),
            transaction_type=b.get("transaction_type", ""),
            amount=to_decimal(b.get("amount")),
            transaction_date=parse_date(b.get("transaction_date")),
            status=b.get("status", ""),
        )


@dataclass(slots=True)
class InterestAccrual:
    """One day's interest on a holding (``/interest/list``)."""

    id: str
    holding_id: str
    invoice_id: str
    accrual_date: datetime | None
    daily_interest_amount: Decimal

    @classmethod
    def from_dict(cls, data: Any) -> "InterestAccrual":
        b = payload(data)
        return cls(
            id=str(b.get("id") or ""),
            holding_id=b.get("holding_id", ""),
            invoice_id=b.get("invoice_id", ""),
            accrual_date=parse_date(b.get("accrual_date")),
            daily_interest_amount=to_decimal(b.get("daily_interest_amount")),
        )


@dataclass(slots=True)
class CreateTokenBatchParams:
    """Body of ``POST /token/create``; the backend takes every field as a string."""

    batch_reference: str
    invoice_id: str
    creditor_id: str
    debtor_id: str
    stablecoin_symbol: str
    total_token_supply: Decimal
    token_value: Decimal
    interest_rate_apy: Decimal
    maturity_date: date | datetime

    def validate(self) -> None:
        if not self.batch_reference or not self.invoice_id:
            raise ValidationError("Batch reference and invoice are required")
        if not self.stablecoin_symbol:
            raise ValidationError("Stablecoin symbol is required")
        if self.total_token_supply <= 0 or self.token_value <= 0:
            raise ValidationError("Token supply and token value must be greater than 0")
        if self.interest_rate_apy < 0:
            raise ValidationError("Interest rate cannot be negative")

    def to_payload(self) -> dict:
        return {
            "batch_reference": self.batch_reference,
            "invoice_id": self.invoice_id,
            "creditor_id": self.creditor_id,
            "debtor_id": self.debtor_id,
            "stablecoin_symbol": self.stablecoin_symbol,
            "total_token_supply": str(self.total_token_supply),
            "token_value": str(self.token_value),
            "interest_rate_apy": str(self.interest_rate_apy),
            "maturity_date": self.maturity_date.isoformat(),
        }


@dataclass(slots=True)
class TokenizeBatchParams:
    """
    Body of ``POST /token/from_invoice_batch``.

    When no maturity date is given the backend uses the earliest invoice due
    date in the batch.
    """

    batch_reference: str
    stablecoin_symbol: str
    token_value: Decimal
    interest_rate_apy: Decimal
    maturity_date: date | datetime | None = None

    def validate(self) -> None:
        if not self.batch_reference:
            raise ValidationError("Batch reference is required")
        if not self.stablecoin_symbol:
            raise ValidationError("Stablecoin symbol is required")
        if self.token_value <= 0:
            raise ValidationError("Token value must be greater than 0")
        if self.interest_rate_apy < 0:
            raise ValidationError("Interest rate cannot be negative")

    def to_payload(self) -> dict:
        body = {
            "batch_reference": self.batch_reference,
            "stablecoin_symbol": self.stablecoin_symbol,
            "token_value": str(self.token_value),
            "interest_rate_apy": str(self.interest_rate_apy),
        }
        if self.maturity_date:
            body["maturity_date"] = self.maturity_date.isoformat()
        return body


@dataclass(slots=True)
class PurchaseRequest:
    """Body of ``POST /token/purchase``."""

    batch_id: str
    token_amount: int

    def validate(self) -> None:
        if not self.batch_id:
            raise ValidationError("Token batch is required")
        if self.token_amount <= 0:
            raise ValidationError("Purchase amount must be greater than 0")

    def to_payload(self) -> dict:
        return {"batch_id": self.batch_id, "token_amount": str(int(self.token_amount))}
