"""
Portfolio components: token holdings, transaction history and the daily
interest accruals of the logged-in wallet.
"""

import reflex as rx

from rwa_ui.components.common import (
    connect_prompt,
    empty_state,
    loader,
    section_header,
    stat,
    status_badge,
)
from rwa_ui.models.reflex_models import (
    HoldingRow,
    InterestDetailRow,
    InterestRow,
    TransactionRow,
)
from rwa_ui.state import PortfolioState


def portfolio_page() -> rx.Component:
    return rx.cond(
        PortfolioState.is_authenticated,
        rx.box(
            section_header("My Portfolio", "Holdings, transactions and accrued interest."),
            rx.grid(
                stat("Holdings", PortfolioState.holdings.length().to_string()),
                stat("Invested", PortfolioState.total_invested),
                stat("Current value", PortfolioState.total_value),
                columns=rx.breakpoints(initial="1", sm="3"),
                spacing="4",
                class_name="card stats",
            ),
            rx.cond(
                PortfolioState.is_loading,
                loader("Loading portfolio..."),
                rx.tabs.root(
                    rx.tabs.list(
                        rx.tabs.trigger("Holdings", value="holdings"),
                        rx.tabs.trigger("Transactions", value="transactions"),
                        rx.tabs.trigger("Interest", value="interest"),
                    ),
                    rx.tabs.content(holdings_table(), value="holdings"),
                    rx.tabs.content(transactions_table(), value="transactions"),
                    rx.tabs.content(accruals_table(), value="interest"),
                    default_value="holdings",
                ),
            ),
            interest_details_dialog(),
        ),
        connect_prompt("Connect a wallet to see your holdings."),
    )


def holdings_table() -> rx.Component:
    return rx.cond(
        PortfolioState.holdings.length() > 0,
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Batch"),
                    rx.table.column_header_cell("Tokens"),
                    rx.table.column_header_cell("Purchase value"),
                    rx.table.column_header_cell("Current value"),
                    rx.table.column_header_cell("Accrued"),
                    rx.table.column_header_cell("Purchased"),
                    rx.table.column_header_cell("Status"),
                    rx.table.column_header_cell(""),
                ),
            ),
            rx.table.body(rx.foreach(PortfolioState.holdings, _holding_row)),
            variant="surface",
            width="100%",
        ),
        empty_state("wallet-cards", "No holdings", "Buy tokens on the market to start earning."),
    )


def _holding_row(holding: HoldingRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(holding.batch_reference),
        rx.table.cell(holding.token_amount),
        rx.table.cell(holding.purchase_value),
        rx.table.cell(holding.current_value),
        rx.table.cell(holding.accrued),
        rx.table.cell(holding.purchase_date),
        rx.table.cell(status_badge(holding.status, holding.status)),
        rx.table.cell(
            rx.button(
                "Interest",
                size="1",
                variant="soft",
                on_click=PortfolioState.show_interest_details(
                    holding.id, holding.batch_reference
                ),
            ),
        ),
        align="center",
    )


def transactions_table() -> rx.Component:
    return rx.cond(
        PortfolioState.transactions.length() > 0,
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Date"),
                    rx.table.column_header_cell("Type"),
                    rx.table.column_header_cell("Amount"),
                    rx.table.column_header_cell("Status"),
                ),
            ),
            rx.table.body(rx.foreach(PortfolioState.transactions, _transaction_row)),
            variant="surface",
            width="100%",
        ),
        empty_state("receipt", "No transactions", "Purchases and interest payments appear here."),
    )


def _transaction_row(tx: TransactionRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(tx.transaction_date),
        rx.table.cell(tx.transaction_type),
        rx.table.cell(tx.amount),
        rx.table.cell(tx.status),
    )


def accruals_table() -> rx.Component:
    return rx.cond(
        PortfolioState.accruals.length() > 0,
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Date"),
                    rx.table.column_header_cell("Holding"),
                    rx.table.column_header_cell("Amount"),
                ),
            ),
            rx.table.body(rx.foreach(PortfolioState.accruals, _accrual_row)),
            variant="surface",
            width="100%",
        ),
        empty_state("percent", "No interest yet", "Interest accrues daily on each holding."),
    )


def _accrual_row(accrual: InterestRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(accrual.accrual_date),
        rx.table.cell(rx.text(accrual.holding_id, class_name="mono truncate")),
        rx.table.cell(accrual.amount),
    )


def interest_details_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(f"Interest for {PortfolioState.details_reference}"),
            rx.cond(
                PortfolioState.interest_details.length() > 0,
                rx.table.root(
                    rx.table.header(
                        rx.table.row(
                            rx.table.column_header_cell("Date"),
                            rx.table.column_header_cell("Invoice"),
                            rx.table.column_header_cell("Amount"),
                        ),
                    ),
                    rx.table.body(rx.foreach(PortfolioState.interest_details, _detail_row)),
                    width="100%",
                ),
                rx.text("No interest has accrued on this holding yet.", class_name="muted"),
            ),
            rx.hstack(
                rx.dialog.close(rx.button("Close", variant="soft")),
                justify="end",
                margin_top="1em",
            ),
        ),
        open=PortfolioState.details_open,
        on_open_change=PortfolioState.set_details_open,
    )


def _detail_row(detail: InterestDetailRow) -> rx.Component:
    return rx.table.row(
        rx.table.cell(detail.accrual_date),
        rx.table.cell(f"{detail.invoice_title} ({detail.invoice_number})"),
        rx.table.cell(detail.amount),
    )
