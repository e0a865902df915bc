"""
REST implementation of InvoiceService.

Invoice detail is looked up by invoice number and answers with a list of
matches. Delete sends the database id, under the ``invoice_number`` query
key the backend reads. Verify and issue also use database ids.
"""

from typing import Sequence

from rwa_ui.errors import ApiError, ValidationError
from rwa_ui.lib import logs
from rwa_ui.lib.api import ApiClient
from rwa_ui.models.common import as_list
from rwa_ui.models.invoice import (
    CreateInvoiceParams,
    InterestDetail,
    Invoice,
    InvoiceBatch,
)
from rwa_ui.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)


class InvoiceServiceImpl(InvoiceService):
    """
    Invoice access against the live backend.

    Attributes:
        client: ApiClient carrying the session token.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    def list_invoices(self) -> list[Invoice]:
        invoices = [Invoice.from_dict(i) for i in as_list(self.client.get("/invoice/list"))]
        LOG.info("Loaded %s invoices", len(invoices))
        return invoices

    def get_invoice(self, invoice_number: str) -> Invoice:
        data = self.client.get(
            "/invoice/detail", params={"invoice_number": invoice_number}
        )
        rows = as_list(data)
        if not rows:
            raise ApiError(
                f"Invoice not found: {invoice_number}", code=404, path="/invoice/detail"
            )
        return Invoice.from_dict(rows[0])

    def create_invoice(self, params: CreateInvoiceParams) -> Invoice:
        params.validate()
        data = self.client.post("/invoice/create", params.to_payload())
        invoice = Invoice.from_dict(data)
        LOG.info("Created invoice %s", invoice.invoice_number or "<pending>")
        return invoice

    def delete_invoice(self, invoice_id: str) -> None:
        self.client.delete("/invoice/del", params={"invoice_number": invoice_id})

    def verify_invoice(self, invoice_id: str) -> None:
        self.client.post("/invoice/verify", {"id": invoice_id})

    def issue_invoices(self, invoice_ids: Sequence[str]) -> None:
        ids = [i for i in invoice_ids if i]
        if not ids:
            raise ValidationError("Select at least one invoice to issue")
        LOG.info("Issuing %s invoices", len(ids))
        self.client.post("/invoice/issue", {"invoice_ids": ids})

    def list_batches(self) -> list[InvoiceBatch]:
        return [
            InvoiceBatch.from_dict(b) for b in as_list(self.client.get("/invoice/batches"))
        ]

    def get_batch(self, batch_id: str) -> InvoiceBatch:
        data = self.client.get(f"/invoice/batch/{batch_id}")
        if not data:
            raise ApiError(f"Batch not found: {batch_id}", path="/invoice/batch")
        return InvoiceBatch.from_dict(data)

    def get_batch_invoices(self, batch_id: str) -> list[Invoice]:
        return [
            Invoice.from_dict(i)
            for i in as_list(self.client.get(f"/invoice/batch/{batch_id}/invoices"))
        ]

    def holding_interest_details(self, holding_id: str) -> list[InterestDetail]:
        data = self.client.get(
            "/invoice/holding/interest-details", params={"holding_id": holding_id}
        )
        return [InterestDetail.from_dict(d) for d in as_list(data)]
