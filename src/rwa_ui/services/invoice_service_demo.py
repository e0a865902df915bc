"""
Demo implementation of InvoiceService backed by the DemoLedger.

Useful for local development and UI work without a running backend.
"""

from typing import Sequence

from rwa_ui.errors import ValidationError
from rwa_ui.models.invoice import (
    CreateInvoiceParams,
    InterestDetail,
    Invoice,
    InvoiceBatch,
)
from rwa_ui.services.demo_ledger import DemoLedger
from rwa_ui.services.invoice_service import InvoiceService


class DemoInvoiceService(InvoiceService):
    def __init__(self, ledger: DemoLedger, token: str | None) -> None:
        self._ledger = ledger
        self._token = token

    @property
    def _address(self) -> str:
        return self._ledger.address_for(self._token)

    def list_invoices(self) -> list[Invoice]:
        return self._ledger.list_invoices(self._address)

    def get_invoice(self, invoice_number: str) -> Invoice:
        return self._ledger.get_invoice(self._address, invoice_number)

    def create_invoice(self, params: CreateInvoiceParams) -> Invoice:
        params.validate()
        return self._ledger.create_invoice(self._address, params)

    def delete_invoice(self, invoice_id: str) -> None:
        self._ledger.delete_invoice(self._address, invoice_id)

    def verify_invoice(self, invoice_id: str) -> None:
        self._ledger.verify_invoice(self._address, invoice_id)

    def issue_invoices(self, invoice_ids: Sequence[str]) -> None:
        ids = [i for i in invoice_ids if i]
        if not ids:
            raise ValidationError("Select at least one invoice to issue")
        self._ledger.issue_invoices(self._address, ids)

    def list_batches(self) -> list[InvoiceBatch]:
        return self._ledger.list_batches(self._address)

    def get_batch(self, batch_id: str) -> InvoiceBatch:
        self._ledger.address_for(self._token)
        return self._ledger.get_batch(batch_id)

    def get_batch_invoices(self, batch_id: str) -> list[Invoice]:
        self._ledger.address_for(self._token)
        return self._ledger.get_batch_invoices(batch_id)

    def holding_interest_details(self, holding_id: str) -> list[InterestDetail]:
        return self._ledger.holding_interest_details(self._address, holding_id)
