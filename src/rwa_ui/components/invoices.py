"""
Invoice management components for enterprise admins.

The table lists the enterprise's invoices. Pending invoices can be verified
or deleted. Verified invoices outside a batch can be selected and issued
together into a new batch.
"""

import reflex as rx

from rwa_ui.components.common import (
    connect_prompt,
    empty_state,
    field,
    loader,
    section_header,
    status_badge,
)
from rwa_ui.models.reflex_models import EnterpriseOption, InvoiceRow
from rwa_ui.state import INVOICE_CURRENCIES, InvoiceState


def invoices_page() -> rx.Component:
    return rx.cond(
        InvoiceState.is_enterprise_admin,
        rx.box(
            section_header(
                "My Invoices",
                "Create and verify invoices, then issue them as a batch.",
                rx.button(
                    rx.icon("send", size=16),
                    f"Issue selected ({InvoiceState.selected_count})",
                    on_click=InvoiceState.issue_selected,
                    disabled=InvoiceState.selected_count == 0,
                    loading=InvoiceState.is_saving,
                    variant="soft",
                ),
                rx.button(
                    rx.icon("plus", size=16),
                    "New invoice",
                    on_click=InvoiceState.open_create,
                ),
            ),
            rx.cond(
                InvoiceState.is_loading,
                loader("Loading invoices..."),
                rx.cond(
                    InvoiceState.is_empty,
                    empty_state("file-x", "No invoices yet", "Create your first invoice to get started."),
                    invoice_table(),
                ),
            ),
            create_invoice_dialog(),
        ),
        connect_prompt("Log in with a wallet bound to an enterprise to manage invoices."),
    )


def invoice_table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell(""),
                rx.table.column_header_cell("Number"),
                rx.table.column_header_cell("Payer"),
                rx.table.column_header_cell("Amount"),
                rx.table.column_header_cell("Due"),
                rx.table.column_header_cell("Status"),
                rx.table.column_header_cell("Actions"),
            ),
        ),
        rx.table.body(rx.foreach(InvoiceState.invoices, _invoice_row)),
        variant="surface",
        width="100%",
    )


def _invoice_row(invoice: InvoiceRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            rx.checkbox(
                checked=InvoiceState.selected_ids.contains(invoice.id),
                disabled=~invoice.can_issue,
                on_change=lambda checked: InvoiceState.toggle_selected(invoice.id, checked),
            ),
        ),
        rx.table.cell(invoice.invoice_number, class_name="mono"),
        rx.table.cell(rx.text(invoice.payer, class_name="mono truncate")),
        rx.table.cell(f"{invoice.amount} {invoice.currency}"),
        rx.table.cell(invoice.due_date),
        rx.table.cell(status_badge(invoice.status, invoice.status_label)),
        rx.table.cell(
            rx.hstack(
                rx.cond(
                    invoice.can_verify,
                    rx.button(
                        "Verify",
                        size="1",
                        on_click=InvoiceState.verify_invoice(invoice.id),
                    ),
                ),
                rx.cond(
                    invoice.batch_id == "",
                    rx.button(
                        rx.icon("trash-2", size=14),
                        size="1",
                        variant="ghost",
                        color_scheme="red",
                        on_click=InvoiceState.delete_invoice(
                            invoice.id, invoice.invoice_number
                        ),
                    ),
                    rx.link("Batch", href=f"/batches/{invoice.batch_id}", size="1"),
                ),
                spacing="2",
            ),
        ),
        align="center",
    )


def create_invoice_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("New invoice"),
            rx.form(
                rx.vstack(
                    field(
                        "Payer (debtor enterprise)",
                        rx.select.root(
                            rx.select.trigger(placeholder="Select an enterprise", width="100%"),
                            rx.select.content(rx.foreach(InvoiceState.debtors, _debtor_item)),
                            name="payer",
                        ),
                    ),
                    rx.hstack(
                        field("Amount", rx.input(name="amount", type="number", min=0, step="0.01")),
                        field(
                            "Currency",
                            rx.select(INVOICE_CURRENCIES, name="currency", default_value="USDT"),
                        ),
                        width="100%",
                    ),
                    field("Due date", rx.input(name="due_date", type="date")),
                    field(
                        "Invoice IPFS hash",
                        rx.input(name="invoice_ipfs_hash", placeholder="Qm..."),
                    ),
                    field(
                        "Contract IPFS hash",
                        rx.input(name="contract_ipfs_hash", placeholder="Qm..."),
                    ),
                    rx.hstack(
                        rx.dialog.close(rx.button("Cancel", variant="soft", color_scheme="gray")),
                        rx.button("Create", type="submit", loading=InvoiceState.is_saving),
                        justify="end",
                        width="100%",
                    ),
                    spacing="3",
                ),
                on_submit=InvoiceState.create_invoice,
            ),
        ),
        open=InvoiceState.create_open,
        on_open_change=InvoiceState.set_create_open,
    )


def _debtor_item(debtor: EnterpriseOption) -> rx.Component:
    return rx.select.item(debtor.name, value=debtor.wallet_address)
