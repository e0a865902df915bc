"""
REST implementation of TokenService.

The market listing is public and polled by every open market page, so raw
responses are cached on disk for ``RWA_UI_MARKET_CACHE_TTL`` seconds. The
cache lives in the temp directory and is shared by all Reflex workers.
Purchases and tokenization evict it so the next listing shows the new
figures.
"""

from rwa_ui import settings
from rwa_ui.lib import caches, logs, paths
from rwa_ui.lib.api import ApiClient
from rwa_ui.models.common import PageResult, as_list
from rwa_ui.models.token import (
    CreateTokenBatchParams,
    PurchaseRequest,
    TokenBatch,
    TokenBatchStatus,
    TokenHolding,
    TokenizeBatchParams,
    TokenMarket,
)
from rwa_ui.services.token_service import TokenService

LOG = logs.logger(__file__)

_MARKETS_TAG = "token-markets"


class TokenServiceImpl(TokenService):
    """
    Token access against the live backend.

    Attributes:
        client: ApiClient carrying the session token (optional for markets).
        cache_ttl: Seconds a market listing stays cached; 0 disables caching.
    """

    _DISK_CACHE = caches.DiskCache(paths.cache_dir("rwa_ui_markets"))

    def __init__(self, client: ApiClient, cache_ttl: int | None = None) -> None:
        self.client = client
        self.cache_ttl = settings.MARKET_CACHE_TTL if cache_ttl is None else cache_ttl

    def create_batch(self, params: CreateTokenBatchParams) -> None:
        params.validate()
        self.client.post("/token/create", params.to_payload())
        self._DISK_CACHE.evict(_MARKETS_TAG)

    def list_batches(
        self,
        status: TokenBatchStatus | None = None,
        creditor_id: str | None = None,
        stablecoin_symbol: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> PageResult[TokenBatch]:
        params = {
            "status": status.value if status else None,
            "creditor_id": creditor_id or None,
            "stablecoin_symbol": stablecoin_symbol or None,
            "page": page,
            "page_size": page_size,
        }
        data = self.client.get("/token/batches", params=params)
        items = [TokenBatch.from_dict(b) for b in as_list(data)]
        return PageResult(items=items, page=page, page_size=page_size, total=_total(data))

    def list_markets(
        self,
        stablecoin_symbol: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> PageResult[TokenMarket]:
        params = {
            "stablecoin_symbol": stablecoin_symbol or None,
            "page": page,
            "page_size": page_size,
        }
        entry = self._DISK_CACHE.get_or_load(
            self._DISK_CACHE.key(self.client.base_url, "/token/markets", params),
            lambda: self.client.get("/token/markets", params=params),
            expire=self.cache_ttl,
            tag=_MARKETS_TAG,
        )
        LOG.info(
            "list_markets - symbol:%s page:%s cache_hit:%s",
            stablecoin_symbol,
            page,
            entry.hit,
        )
        items = [TokenMarket.from_dict(m) for m in as_list(entry.value)]
        return PageResult(
            items=items, page=page, page_size=page_size, total=_total(entry.value)
        )

    def purchase(self, batch_id: str, token_amount: int) -> str:
        request = PurchaseRequest(batch_id=batch_id, token_amount=token_amount)
        request.validate()
        LOG.info("Purchasing %s tokens of batch %s", token_amount, batch_id)
        data = self.client.post("/token/purchase", request.to_payload())
        self._DISK_CACHE.evict(_MARKETS_TAG)
        if isinstance(data, dict):
            return str(data.get("holding_id") or "")
        return str(data or "")

    def holdings(self) -> list[TokenHolding]:
        return [TokenHolding.from_dict(h) for h in as_list(self.client.get("/token/holdings"))]

    def tokenize_invoice_batch(
        self, invoice_batch_id: str, params: TokenizeBatchParams
    ) -> None:
        params.validate()
        LOG.info(
            "Tokenizing invoice batch %s as %s", invoice_batch_id, params.batch_reference
        )
        self.client.post(
            "/token/from_invoice_batch",
            params.to_payload(),
            params={"invoice_batch_id": invoice_batch_id},
        )
        self._DISK_CACHE.evict(_MARKETS_TAG)


def _total(data) -> int | None:
    """Return the total count of a paged response, if the backend sent one."""
    if isinstance(data, dict) and data.get("total") is not None:
        return int(data["total"])
    return None
