"""Tests for the conversion of domain models into Reflex row models."""

from decimal import Decimal

from rwa_ui.models import Invoice, InvoiceBatch, TokenHolding, TokenMarket
from rwa_ui.models.reflex_models import batch_row, holding_row, invoice_row, market_row


def test_market_row():
    row = market_row(
        TokenMarket.from_dict(
            {
                "id": "m1",
                "batch_id": "tb1",
                "stablecoin_symbol": "USDT",
                "total_token_amount": "500",
                "sold_token_amount": "120",
                "available_token_amount": "380",
                "token_value_per_unit": "100",
                "remaining_transaction_amount": "38000",
            }
        )
    )
    assert row.batch_id == "tb1"
    assert row.available == 380
    assert row.sold_percent == 24
    assert row.unit_price == "100.00 USDT"
    assert row.unit_value == "100"
    assert row.remaining == "38,000.00 USDT"


def test_market_row_without_supply():
    row = market_row(TokenMarket.from_dict({"id": "m1"}))
    assert row.sold_percent == 0
    assert row.available == 0


def test_invoice_row():
    row = invoice_row(
        Invoice.from_dict(
            {
                "id": "i1",
                "invoice_number": "INV-1",
                "amount": "12500",
                "currency": "USDT",
                "due_date": "2027-01-15T00:00:00Z",
                "status": "OnSale",
            }
        )
    )
    assert row.amount == "12,500.00"
    assert row.due_date == "2027-01-15"
    assert row.status == "OnSale"
    assert row.status_label == "On Sale"
    assert row.batch_id == ""
    assert not row.can_issue


def test_batch_row():
    row = batch_row(
        InvoiceBatch.from_dict(
            {
                "id": "b1",
                "status": "Issued",
                "accepted_currency": "USDC",
                "total_amount": "3100.5",
                "invoice_count": 1,
            }
        )
    )
    assert row.total_amount == "3,100.50 USDC"
    assert row.can_tokenize
    assert row.created_at == "-"


def test_holding_row_accrued():
    holding = TokenHolding.from_dict(
        {"id": "h1", "token_amount": "10", "purchase_value": "1000", "current_value": "1000.5343"}
    )
    assert holding.accrued_value == Decimal("0.5343")
    row = holding_row(holding)
    assert row.accrued == "0.53"
    assert row.status == "Active"
