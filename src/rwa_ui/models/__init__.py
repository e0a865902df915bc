"""
Data models for the RWA Finance UI.

This package provides:
- Invoice and invoice batch models (models.invoice)
- Token batch, market, holding and activity models (models.token)
- Wallet, user and enterprise models (models.user)
- The wallet authentication state machine (models.session)
- Paging helpers (models.common)

Reflex row models live in models.reflex_models and are not re-exported here
so that the service layer can be imported without Reflex.
"""

from rwa_ui.models.common import PageResult
from rwa_ui.models.invoice import (
    BatchSummary,
    CreateInvoiceParams,
    InterestDetail,
    Invoice,
    InvoiceBatch,
    InvoiceBatchStatus,
    InvoiceStatus,
)
from rwa_ui.models.session import AuthSession, SessionStatus
from rwa_ui.models.token import (
    CreateTokenBatchParams,
    InterestAccrual,
    PurchaseRequest,
    TokenBatch,
    TokenBatchStatus,
    TokenHolding,
    TokenHoldingStatus,
    TokenizeBatchParams,
    TokenMarket,
    Transaction,
)
from rwa_ui.models.user import (
    Challenge,
    Enterprise,
    EnterpriseInfo,
    LoginResult,
    UserInfo,
    UserRole,
    WalletInfo,
    WalletType,
)

__all__ = [
    "AuthSession",
    "BatchSummary",
    "Challenge",
    "CreateInvoiceParams",
    "CreateTokenBatchParams",
    "Enterprise",
    "EnterpriseInfo",
    "InterestAccrual",
    "InterestDetail",
    "Invoice",
    "InvoiceBatch",
    "InvoiceBatchStatus",
    "InvoiceStatus",
    "LoginResult",
    "PageResult",
    "PurchaseRequest",
    "SessionStatus",
    "TokenBatch",
    "TokenBatchStatus",
    "TokenHolding",
    "TokenHoldingStatus",
    "TokenMarket",
    "TokenizeBatchParams",
    "Transaction",
    "UserInfo",
    "UserRole",
    "WalletInfo",
    "WalletType",
]
