"""
Demo implementation of TokenService backed by the DemoLedger.

The market and token batch listings are public, like their backend
counterparts, and work without a token.
"""

from rwa_ui.lib import logs
from rwa_ui.models.common import PageResult
from rwa_ui.models.token import (
    CreateTokenBatchParams,
    PurchaseRequest,
    TokenBatch,
    TokenBatchStatus,
    TokenHolding,
    TokenizeBatchParams,
    TokenMarket,
)
from rwa_ui.services.demo_ledger import DemoLedger
from rwa_ui.services.token_service import TokenService

LOG = logs.logger(__file__)


class DemoTokenService(TokenService):
    def __init__(self, ledger: DemoLedger, token: str | None) -> None:
        self._ledger = ledger
        self._token = token

    @property
    def _address(self) -> str:
        return self._ledger.address_for(self._token)

    def create_batch(self, params: CreateTokenBatchParams) -> None:
        params.validate()
        self._ledger.create_token_batch(self._address, params)

    def list_batches(
        self,
        status: TokenBatchStatus | None = None,
        creditor_id: str | None = None,
        stablecoin_symbol: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> PageResult[TokenBatch]:
        return self._ledger.list_token_batches(
            status, creditor_id, stablecoin_symbol, page, page_size
        )

    def list_markets(
        self,
        stablecoin_symbol: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> PageResult[TokenMarket]:
        result = self._ledger.list_markets(stablecoin_symbol or None, page, page_size)
        LOG.info(
            "list_markets - symbol:%s page:%s items:%s",
            stablecoin_symbol,
            page,
            len(result.items),
        )
        return result

    def purchase(self, batch_id: str, token_amount: int) -> str:
        request = PurchaseRequest(batch_id=batch_id, token_amount=token_amount)
        request.validate()
        return self._ledger.purchase(self._address, request.batch_id, request.token_amount)

    def holdings(self) -> list[TokenHolding]:
        return self._ledger.holdings_of(self._address)

    def tokenize_invoice_batch(
        self, invoice_batch_id: str, params: TokenizeBatchParams
    ) -> None:
        params.validate()
        self._ledger.tokenize_invoice_batch(self._address, invoice_batch_id, params)
