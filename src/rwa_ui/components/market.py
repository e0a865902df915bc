"""
Token market components.

Shows one card per token batch on sale with its sold ratio, and the
purchase dialog that clamps the share count to what is still available.
"""

import reflex as rx

from rwa_ui.components.common import empty_state, field, loader, section_header
from rwa_ui.components.infinite_scroll import infinite_list
from rwa_ui.models.reflex_models import MarketRow
from rwa_ui.state import STABLECOINS, MarketState


def market_page() -> rx.Component:
    return rx.box(
        section_header(
            "Token Market",
            "Buy shares of tokenized invoice batches and earn daily interest.",
            rx.select(
                ["All", *STABLECOINS],
                value=MarketState.symbol_filter,
                on_change=MarketState.set_symbol_filter,
                size="2",
            ),
        ),
        rx.cond(
            MarketState.is_empty,
            empty_state("store", "No tokens on sale", "Check back when new batches are listed."),
            rx.cond(
                MarketState.markets.length() > 0,
                infinite_list(
                    rx.grid(
                        rx.foreach(MarketState.markets, market_card),
                        columns=rx.breakpoints(initial="1", sm="2", lg="3"),
                        spacing="4",
                    ),
                    data_length=MarketState.markets.length(),
                    next=MarketState.load_more,
                    has_more=MarketState.has_more,
                    loading_message="Loading more batches...",
                    end_message="All batches loaded",
                ),
                loader("Loading market..."),
            ),
        ),
        purchase_dialog(),
    )


def market_card(market: MarketRow) -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.icon("coins", class_name="title-icon"),
            rx.heading(market.batch_reference, size="3", as_="h3"),
            rx.spacer(),
            rx.badge(market.stablecoin_symbol, color_scheme="blue"),
            align="center",
        ),
        rx.vstack(
            _row("Price per token", market.unit_price),
            _row("Available", market.available.to_string()),
            _row("Sold", f"{market.sold_tokens} / {market.total_tokens}"),
            _row("Remaining value", market.remaining),
            _row("Creditor", market.creditor_address),
            spacing="1",
            width="100%",
            class_name="card-body",
        ),
        rx.progress(value=market.sold_percent, max=100),
        rx.button(
            rx.cond(market.available > 0, "Buy tokens", "Sold out"),
            on_click=MarketState.open_purchase(market.batch_id),
            disabled=market.available <= 0,
            width="100%",
        ),
        class_name="card market-card",
    )


def _row(label: str, value) -> rx.Component:
    return rx.hstack(
        rx.text(label, class_name="muted", size="2"),
        rx.spacer(),
        rx.text(value, size="2", class_name="mono truncate"),
        width="100%",
    )


def purchase_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(f"Buy {MarketState.purchase_reference}"),
            rx.dialog.description(
                f"{MarketState.purchase_available} tokens available",
                class_name="muted",
            ),
            rx.vstack(
                field(
                    "Number of tokens",
                    rx.input(
                        type="number",
                        min=1,
                        max=MarketState.purchase_available,
                        value=MarketState.purchase_amount.to_string(),
                        on_change=MarketState.set_purchase_amount,
                    ),
                ),
                rx.hstack(
                    rx.text("Total cost", class_name="muted"),
                    rx.spacer(),
                    rx.text(MarketState.purchase_cost, weight="bold"),
                    width="100%",
                ),
                rx.hstack(
                    rx.dialog.close(rx.button("Cancel", variant="soft", color_scheme="gray")),
                    rx.button(
                        "Confirm purchase",
                        on_click=MarketState.purchase,
                        loading=MarketState.is_purchasing,
                        disabled=MarketState.purchase_amount <= 0,
                    ),
                    justify="end",
                    width="100%",
                ),
                spacing="4",
                margin_top="1em",
            ),
        ),
        open=MarketState.purchase_open,
        on_open_change=MarketState.set_purchase_open,
    )
