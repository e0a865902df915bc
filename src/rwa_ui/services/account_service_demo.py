"""Demo implementation of AccountService backed by the DemoLedger."""

from rwa_ui.errors import ValidationError
from rwa_ui.models.token import InterestAccrual, Transaction
from rwa_ui.models.user import Enterprise, EnterpriseInfo
from rwa_ui.services.account_service import AccountService
from rwa_ui.services.demo_ledger import DemoLedger


class DemoAccountService(AccountService):
    """
    Account operations for the wallet the token was issued to.

    Every call resolves the token first, so an unknown token raises
    UnauthorizedError just as the backend's auth middleware would.
    """

    def __init__(self, ledger: DemoLedger, token: str | None) -> None:
        self._ledger = ledger
        self._token = token

    @property
    def _address(self) -> str:
        return self._ledger.address_for(self._token)

    def enterprise_info(self) -> EnterpriseInfo:
        return self._ledger.enterprise_info(self._address)

    def bind_enterprise(self, enterprise_address: str) -> None:
        enterprise_address = (enterprise_address or "").strip()
        if not enterprise_address:
            raise ValidationError("Enterprise address is required")
        self._ledger.bind_enterprise(self._address, enterprise_address)

    def register_enterprise(
        self, name: str, wallet_address: str, kyc_hash: str | None = None
    ) -> Enterprise:
        name, wallet_address = (name or "").strip(), (wallet_address or "").strip()
        if not name or not wallet_address:
            raise ValidationError("Enterprise name and wallet address are required")
        return self._ledger.register_enterprise(name, wallet_address, kyc_hash or None)

    def list_enterprises(self) -> list[Enterprise]:
        return self._ledger.list_enterprises()

    def list_transactions(self) -> list[Transaction]:
        return self._ledger.transactions_of(self._address)

    def list_interest_accruals(self) -> list[InterestAccrual]:
        return self._ledger.accruals_of(self._address)
