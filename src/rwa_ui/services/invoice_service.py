"""
Abstract base class defining the invoice and invoice batch contract.

An enterprise creates invoices, verifies them, then issues a selection of
verified invoices into a batch that can later be tokenized.

Implementations:
- InvoiceServiceImpl: REST calls against the ``/invoice`` endpoints
- DemoInvoiceService: backed by the shared DemoLedger
"""

from abc import ABC, abstractmethod
from typing import Sequence

from rwa_ui.models.invoice import (
    BatchSummary,
    CreateInvoiceParams,
    InterestDetail,
    Invoice,
    InvoiceBatch,
)


class InvoiceService(ABC):
    """
    Abstract base class for invoice data access.

    Every call except ``batch_summary`` goes through the backend (or the
    demo ledger) and requires a session token.
    """

    @abstractmethod
    def list_invoices(self) -> list[Invoice]:
        """Return the invoices of the current user's enterprise."""

    @abstractmethod
    def get_invoice(self, invoice_number: str) -> Invoice:
        pass

    @abstractmethod
    def create_invoice(self, params: CreateInvoiceParams) -> Invoice:
        """
        Create an invoice and return it as stored.

        Args:
            params: Form data; validated before anything is sent.

        Raises:
            ValidationError: If the form is incomplete.
        """

    @abstractmethod
    def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice that is not yet in a batch, by database id."""

    @abstractmethod
    def verify_invoice(self, invoice_id: str) -> None:
        pass

    @abstractmethod
    def issue_invoices(self, invoice_ids: Sequence[str]) -> None:
        """
        Issue verified invoices into a new batch.

        Raises:
            ValidationError: If no invoice is selected.
        """

    @abstractmethod
    def list_batches(self) -> list[InvoiceBatch]:
        pass

    @abstractmethod
    def get_batch(self, batch_id: str) -> InvoiceBatch:
        pass

    @abstractmethod
    def get_batch_invoices(self, batch_id: str) -> list[Invoice]:
        pass

    @abstractmethod
    def holding_interest_details(self, holding_id: str) -> list[InterestDetail]:
        """Return the daily interest accrued on a holding, per underlying invoice."""

    def batch_summary(self, invoices: Sequence[Invoice]) -> BatchSummary:
        """Compute the figures shown above a batch's invoice list."""
        return BatchSummary.of(invoices)
