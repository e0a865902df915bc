"""
Reflex-compatible row models for the RWA Finance UI.

These models extend rx.Base so they can be stored in state and rendered
with rx.foreach. Values are pre-formatted for display; the dataclasses in
``models.invoice`` and ``models.token`` remain the source of truth.
"""

import reflex as rx

from rwa_ui.models.invoice import InterestDetail, Invoice, InvoiceBatch
from rwa_ui.models.token import (
    InterestAccrual,
    TokenHolding,
    TokenMarket,
    Transaction,
)
from rwa_ui.models.user import Enterprise
from rwa_ui.utils import format_amount, format_currency, format_date, format_status


class InvoiceRow(rx.Base):
    """Invoice table row."""

    id: str = ""
    invoice_number: str = ""
    payee: str = ""
    payer: str = ""
    amount: str = ""
    currency: str = ""
    due_date: str = ""
    status: str = ""
    status_label: str = ""
    batch_id: str = ""
    can_verify: bool = False
    can_issue: bool = False


class BatchRow(rx.Base):
    """Invoice batch table row."""

    id: str = ""
    creditor_name: str = ""
    debtor_name: str = ""
    accepted_currency: str = ""
    status: str = ""
    status_label: str = ""
    created_at: str = ""
    invoice_count: int = 0
    total_amount: str = ""
    token_batch_id: str = ""
    can_tokenize: bool = False


class MarketRow(rx.Base):
    """Token market card."""

    id: str = ""
    batch_id: str = ""
    batch_reference: str = ""
    creditor_address: str = ""
    debtor_address: str = ""
    stablecoin_symbol: str = ""
    total_tokens: str = ""
    sold_tokens: str = ""
    available: int = 0
    unit_price: str = ""
    unit_value: str = "0"
    remaining: str = ""
    sold_percent: int = 0


class HoldingRow(rx.Base):
    """Token holding table row."""

    id: str = ""
    batch_reference: str = ""
    token_amount: str = ""
    purchase_value: str = ""
    current_value: str = ""
    accrued: str = ""
    purchase_date: str = ""
    status: str = ""


class TransactionRow(rx.Base):
    id: str = ""
    transaction_type: str = ""
    amount: str = ""
    transaction_date: str = ""
    status: str = ""


class InterestRow(rx.Base):
    id: str = ""
    holding_id: str = ""
    accrual_date: str = ""
    amount: str = ""


class InterestDetailRow(rx.Base):
    accrual_date: str = ""
    amount: str = ""
    invoice_title: str = ""
    invoice_number: str = ""


class EnterpriseOption(rx.Base):
    """Entry in the debtor picker of the create-invoice dialog."""

    id: str = ""
    name: str = ""
    wallet_address: str = ""


def invoice_row(invoice: Invoice) -> InvoiceRow:
    return InvoiceRow(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        payee=invoice.payee or "",
        payer=invoice.payer or "",
        amount=format_amount(invoice.amount),
        currency=invoice.currency,
        due_date=format_date(invoice.due_date),
        status=invoice.status.value,
        status_label=format_status(invoice.status.value),
        batch_id=invoice.batch_id or "",
        can_verify=invoice.can_verify,
        can_issue=invoice.can_issue,
    )


def batch_row(batch: InvoiceBatch) -> BatchRow:
    return BatchRow(
        id=batch.id,
        creditor_name=batch.creditor_name,
        debtor_name=batch.debtor_name,
        accepted_currency=batch.accepted_currency,
        status=batch.status.value,
        status_label=format_status(batch.status.value),
        created_at=format_date(batch.created_at),
        invoice_count=batch.invoice_count,
        total_amount=format_currency(batch.total_amount, batch.accepted_currency),
        token_batch_id=batch.token_batch_id or "",
        can_tokenize=batch.can_tokenize,
    )


def market_row(market: TokenMarket) -> MarketRow:
    sold_percent = 0
    if market.total_token_amount > 0:
        sold_percent = int(market.sold_token_amount * 100 / market.total_token_amount)
    return MarketRow(
        id=market.id,
        batch_id=market.batch_id,
        batch_reference=market.batch_reference,
        creditor_address=market.creditor_address,
        debtor_address=market.debtor_address,
        stablecoin_symbol=market.stablecoin_symbol,
        total_tokens=format_amount(market.total_token_amount, 0),
        sold_tokens=format_amount(market.sold_token_amount, 0),
        available=int(market.available_token_amount),
        unit_price=format_currency(
            market.token_value_per_unit, market.stablecoin_symbol
        ),
        unit_value=str(market.token_value_per_unit),
        remaining=format_currency(
            market.remaining_transaction_amount, market.stablecoin_symbol
        ),
        sold_percent=sold_percent,
    )


def holding_row(holding: TokenHolding) -> HoldingRow:
    return HoldingRow(
        id=holding.id,
        batch_reference=holding.batch_reference,
        token_amount=format_amount(holding.token_amount, 0),
        purchase_value=format_amount(holding.purchase_value),
        current_value=format_amount(holding.current_value),
        accrued=format_amount(holding.accrued_value),
        purchase_date=format_date(holding.purchase_date),
        status=format_status(holding.status.value),
    )


def transaction_row(tx: Transaction) -> TransactionRow:
    return TransactionRow(
        id=tx.id,
        transaction_type=tx.transaction_type,
        amount=format_amount(tx.amount),
        transaction_date=format_date(tx.transaction_date, "%Y-%m-%d %H:%M"),
        status=tx.status,
    )


def interest_row(accrual: InterestAccrual) -> InterestRow:
    return InterestRow(
        id=accrual.id,
        holding_id=accrual.holding_id,
        accrual_date=format_date(accrual.accrual_date),
        amount=format_amount(accrual.daily_interest_amount, 4),
    )


def enterprise_option(enterprise: Enterprise) -> EnterpriseOption:
    return EnterpriseOption(
        id=enterprise.id,
        name=enterprise.name,
        wallet_address=enterprise.wallet_address,
    )


def interest_detail_row(detail: InterestDetail) -> InterestDetailRow:
    return InterestDetailRow(
        accrual_date=format_date(detail.accrual_date),
        amount=format_amount(detail.daily_interest_amount, 4),
        invoice_title=detail.invoice_title,
        invoice_number=detail.invoice_number,
    )
