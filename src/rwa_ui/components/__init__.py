"""
Reflex UI components for the RWA Finance application.

This package provides one module per page plus shared pieces:
- common: badges, headers, empty and loading states
- infinite_scroll: react-infinite-scroll-component wrapper
- market: token market cards and the purchase dialog
- invoices: invoice table, creation dialog and batch issuing
- batches: batch list, batch detail and the tokenize dialog
- portfolio: holdings, transactions and interest accruals
- enterprise: enterprise binding and registration
"""

from rwa_ui.components.batches import batch_detail_page, batches_page
from rwa_ui.components.enterprise import enterprise_page
from rwa_ui.components.invoices import invoices_page
from rwa_ui.components.market import market_page
from rwa_ui.components.portfolio import portfolio_page

__all__ = [
    "batch_detail_page",
    "batches_page",
    "enterprise_page",
    "invoices_page",
    "market_page",
    "portfolio_page",
]
