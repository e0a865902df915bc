"""
Abstract base class defining the token batch, market and holding contract.

Implementations:
- TokenServiceImpl: REST calls against the ``/token`` endpoints, with the
  public market listing cached on disk
- DemoTokenService: backed by the shared DemoLedger
"""

from abc import ABC, abstractmethod

from rwa_ui.models.common import PageResult
from rwa_ui.models.token import (
    CreateTokenBatchParams,
    TokenBatch,
    TokenBatchStatus,
    TokenHolding,
    TokenizeBatchParams,
    TokenMarket,
)


class TokenService(ABC):
    """Abstract base class for token data access."""

    @abstractmethod
    def create_batch(self, params: CreateTokenBatchParams) -> None:
        """Create a token batch directly from a single invoice."""

    @abstractmethod
    def list_batches(
        self,
        status: TokenBatchStatus | None = None,
        creditor_id: str | None = None,
        stablecoin_symbol: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> PageResult[TokenBatch]:
        pass

    @abstractmethod
    def list_markets(
        self,
        stablecoin_symbol: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> PageResult[TokenMarket]:
        """
        Return one page of token batches open for purchase.

        Args:
            stablecoin_symbol: Only list markets priced in this stablecoin.
            page: Page number (1-indexed).
            page_size: Number of items per page.
        """

    @abstractmethod
    def purchase(self, batch_id: str, token_amount: int) -> str:
        """
        Buy ``token_amount`` shares of a token batch.

        Returns:
            The id of the resulting holding.

        Raises:
            ValidationError: If the amount is not positive.
        """

    @abstractmethod
    def holdings(self) -> list[TokenHolding]:
        pass

    @abstractmethod
    def tokenize_invoice_batch(
        self, invoice_batch_id: str, params: TokenizeBatchParams
    ) -> None:
        """
        Turn an issued invoice batch into a token batch listed on the market.

        Raises:
            ValidationError: If the params are invalid.
        """
