"""
Invoice batch components: the batch list, the batch detail page and the
dialog that tokenizes an issued batch onto the market.
"""

import reflex as rx

from rwa_ui.components.common import (
    connect_prompt,
    empty_state,
    field,
    loader,
    section_header,
    stat,
    status_badge,
)
from rwa_ui.models.reflex_models import BatchRow, InvoiceRow
from rwa_ui.state import DEFAULT_APY, DEFAULT_TOKEN_VALUE, STABLECOINS, BatchState


def batches_page() -> rx.Component:
    return rx.cond(
        BatchState.is_enterprise_admin,
        rx.box(
            section_header(
                "Invoice Batches",
                "Issued batches can be tokenized and listed on the market.",
            ),
            rx.cond(
                BatchState.is_loading,
                loader("Loading batches..."),
                rx.cond(
                    BatchState.is_empty,
                    empty_state("layers", "No batches yet", "Issue verified invoices to create a batch."),
                    batch_table(),
                ),
            ),
            tokenize_dialog(),
        ),
        connect_prompt("Log in with a wallet bound to an enterprise to see its batches."),
    )


def batch_table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Batch"),
                rx.table.column_header_cell("Debtor"),
                rx.table.column_header_cell("Invoices"),
                rx.table.column_header_cell("Total"),
                rx.table.column_header_cell("Created"),
                rx.table.column_header_cell("Status"),
                rx.table.column_header_cell(""),
            ),
        ),
        rx.table.body(rx.foreach(BatchState.batches, _batch_row)),
        variant="surface",
        width="100%",
    )


def _batch_row(batch: BatchRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.link(batch.id[:8], href=f"/batches/{batch.id}", class_name="mono")),
        rx.table.cell(batch.debtor_name),
        rx.table.cell(batch.invoice_count),
        rx.table.cell(batch.total_amount),
        rx.table.cell(batch.created_at),
        rx.table.cell(status_badge(batch.status, batch.status_label)),
        rx.table.cell(
            rx.cond(
                batch.can_tokenize,
                rx.button("Tokenize", size="1", on_click=BatchState.open_tokenize(batch.id)),
            ),
        ),
        align="center",
    )


def batch_detail_page() -> rx.Component:
    return rx.cond(
        BatchState.is_authenticated,
        rx.box(
            rx.link(
                rx.hstack(rx.icon("arrow-left", size=14), rx.text("All batches")),
                href="/batches",
                class_name="back-link",
            ),
            section_header(
                f"Batch {BatchState.batch.id}",
                f"{BatchState.batch.creditor_name} to {BatchState.batch.debtor_name}",
                status_badge(BatchState.batch.status, BatchState.batch.status_label),
                rx.cond(
                    BatchState.batch.can_tokenize,
                    rx.button("Tokenize", on_click=BatchState.open_tokenize(BatchState.batch.id)),
                ),
            ),
            rx.grid(
                stat("Invoices", BatchState.summary_count.to_string()),
                stat("Total amount", BatchState.summary_total),
                stat("Earliest due", BatchState.summary_earliest),
                stat("Latest due", BatchState.summary_latest),
                columns=rx.breakpoints(initial="2", md="4"),
                spacing="4",
                class_name="card stats",
            ),
            rx.cond(
                BatchState.batch.token_batch_id != "",
                rx.callout(
                    "This batch has been tokenized and is listed on the market.",
                    icon="info",
                ),
            ),
            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        rx.table.column_header_cell("Number"),
                        rx.table.column_header_cell("Payer"),
                        rx.table.column_header_cell("Amount"),
                        rx.table.column_header_cell("Due"),
                        rx.table.column_header_cell("Status"),
                    ),
                ),
                rx.table.body(rx.foreach(BatchState.batch_invoices, _batch_invoice_row)),
                variant="surface",
                width="100%",
            ),
            tokenize_dialog(),
        ),
        connect_prompt("Log in to view this batch."),
    )


def _batch_invoice_row(invoice: InvoiceRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(invoice.invoice_number, class_name="mono"),
        rx.table.cell(rx.text(invoice.payer, class_name="mono truncate")),
        rx.table.cell(f"{invoice.amount} {invoice.currency}"),
        rx.table.cell(invoice.due_date),
        rx.table.cell(status_badge(invoice.status, invoice.status_label)),
    )


def tokenize_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("Tokenize batch"),
            rx.dialog.description(
                "The token supply is the batch total divided by the token value.",
                class_name="muted",
            ),
            rx.form(
                rx.vstack(
                    field(
                        "Batch reference",
                        rx.input(
                            name="batch_reference",
                            default_value=BatchState.tokenize_reference,
                            key=BatchState.tokenize_batch_id,
                        ),
                    ),
                    rx.hstack(
                        field(
                            "Stablecoin",
                            rx.select(
                                STABLECOINS,
                                name="stablecoin_symbol",
                                default_value=BatchState.tokenize_symbol,
                            ),
                        ),
                        field(
                            "Token value",
                            rx.input(
                                name="token_value",
                                type="number",
                                min=0,
                                default_value=DEFAULT_TOKEN_VALUE,
                            ),
                        ),
                        width="100%",
                    ),
                    rx.hstack(
                        field(
                            "Interest rate (APY %)",
                            rx.input(
                                name="interest_rate_apy",
                                type="number",
                                step="0.01",
                                min=0,
                                default_value=DEFAULT_APY,
                            ),
                        ),
                        field(
                            "Maturity date (optional)",
                            rx.input(name="maturity_date", type="date"),
                        ),
                        width="100%",
                    ),
                    rx.hstack(
                        rx.dialog.close(rx.button("Cancel", variant="soft", color_scheme="gray")),
                        rx.button("Tokenize", type="submit", loading=BatchState.is_tokenizing),
                        justify="end",
                        width="100%",
                    ),
                    spacing="3",
                ),
                on_submit=BatchState.tokenize,
            ),
        ),
        open=BatchState.tokenize_open,
        on_open_change=BatchState.set_tokenize_open,
    )
