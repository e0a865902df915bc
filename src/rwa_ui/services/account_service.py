"""
Abstract base class for the logged-in account: enterprise binding and activity.

Implementations:
- AccountServiceImpl: REST calls against the ``/user``, ``/enterprise``,
  ``/transaction`` and ``/interest`` endpoints
- DemoAccountService: backed by the shared DemoLedger
"""

from abc import ABC, abstractmethod

from rwa_ui.models.token import InterestAccrual, Transaction
from rwa_ui.models.user import Enterprise, EnterpriseInfo


class AccountService(ABC):
    """Contract for account-level operations. All calls require a token."""

    @abstractmethod
    def enterprise_info(self) -> EnterpriseInfo:
        """Return the enterprise bound to the current wallet, if any."""

    @abstractmethod
    def bind_enterprise(self, enterprise_address: str) -> None:
        """Bind the current wallet to the enterprise registered at ``enterprise_address``."""

    @abstractmethod
    def register_enterprise(
        self, name: str, wallet_address: str, kyc_hash: str | None = None
    ) -> Enterprise:
        """Register a new enterprise."""

    @abstractmethod
    def list_enterprises(self) -> list[Enterprise]:
        pass

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        pass

    @abstractmethod
    def list_interest_accruals(self) -> list[InterestAccrual]:
        pass
