"""
Reflex application entry point for the RWA Finance UI.

This module initializes the Reflex app and registers one page per area.
Every page restores the wallet session first, then loads its own data.
"""

import reflex as rx

from rwa_ui import settings
from rwa_ui.components import (
    batch_detail_page,
    batches_page,
    enterprise_page,
    invoices_page,
    market_page,
    portfolio_page,
)
from rwa_ui.layout import page_shell
from rwa_ui.lib import logs
from rwa_ui.state import (
    AuthState,
    BatchState,
    InvoiceState,
    MarketState,
    PortfolioState,
)

LOG = logs.logger(__file__)

LOG.info("API base url: %s", settings.API_BASE_URL)
LOG.info("Service kind: %s", settings.SERVICE_KIND)

_FONT_URL = "https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500&family=Source+Sans+3:ital,wght@0,300;0,400;0,500;0,600;0,700;1,400&display=swap"


def index() -> rx.Component:
    return page_shell(market_page())


def invoices() -> rx.Component:
    return page_shell(invoices_page())


def batches() -> rx.Component:
    return page_shell(batches_page())


def batch_detail() -> rx.Component:
    return page_shell(batch_detail_page())


def portfolio() -> rx.Component:
    return page_shell(portfolio_page())


def enterprise() -> rx.Component:
    return page_shell(enterprise_page())


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    index,
    route="/",
    title=settings.APP_TITLE,
    on_load=[AuthState.on_load, MarketState.load_markets],
)
app.add_page(
    invoices,
    route="/invoices",
    title=f"Invoices | {settings.APP_TITLE}",
    on_load=[AuthState.on_load, InvoiceState.load_invoices],
)
app.add_page(
    batches,
    route="/batches",
    title=f"Batches | {settings.APP_TITLE}",
    on_load=[AuthState.on_load, BatchState.load_batches],
)
app.add_page(
    batch_detail,
    route="/batches/[batch_id]",
    title=f"Batch | {settings.APP_TITLE}",
    on_load=[AuthState.on_load, BatchState.load_batch_detail],
)
app.add_page(
    portfolio,
    route="/portfolio",
    title=f"Portfolio | {settings.APP_TITLE}",
    on_load=[AuthState.on_load, PortfolioState.load_portfolio],
)
app.add_page(
    enterprise,
    route="/enterprise",
    title=f"Enterprise | {settings.APP_TITLE}",
    on_load=[AuthState.on_load, AuthState.load_enterprises],
)


def main() -> None:
    """Entrypoint used by `rwa-ui`; production deployments use `reflex run` directly."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--port", str(settings.APP_PORT)]
    )


if __name__ == "__main__":
    main()
