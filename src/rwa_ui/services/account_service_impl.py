"""REST implementation of AccountService."""

from rwa_ui.errors import ValidationError
from rwa_ui.lib import logs
from rwa_ui.lib.api import ApiClient
from rwa_ui.models.common import as_list
from rwa_ui.models.token import InterestAccrual, Transaction
from rwa_ui.models.user import Enterprise, EnterpriseInfo
from rwa_ui.services.account_service import AccountService

LOG = logs.logger(__file__)


class AccountServiceImpl(AccountService):
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    def enterprise_info(self) -> EnterpriseInfo:
        info = EnterpriseInfo.from_dict(self.client.get("/user/enterprise-info"))
        LOG.info(
            "Enterprise info - bound:%s id:%s",
            info.is_enterprise_bound,
            info.enterprise_id or None,
        )
        return info

    def bind_enterprise(self, enterprise_address: str) -> None:
        enterprise_address = (enterprise_address or "").strip()
        if not enterprise_address:
            raise ValidationError("Enterprise address is required")
        self.client.post(
            "/user/bind-enterprise", {"enterpriseAddress": enterprise_address}
        )

    def register_enterprise(
        self, name: str, wallet_address: str, kyc_hash: str | None = None
    ) -> Enterprise:
        name, wallet_address = (name or "").strip(), (wallet_address or "").strip()
        if not name or not wallet_address:
            raise ValidationError("Enterprise name and wallet address are required")
        body = {"name": name, "wallet_address": wallet_address}
        if kyc_hash:
            body["kyc_details_ipfs_hash"] = kyc_hash
        data = self.client.post("/enterprise/create", body)
        if isinstance(data, dict):
            return Enterprise.from_dict(data)
        # The create endpoint answers with the new id only
        return Enterprise(
            id=str(data or ""),
            name=name,
            wallet_address=wallet_address,
            kyc_details_ipfs_hash=kyc_hash,
        )

    def list_enterprises(self) -> list[Enterprise]:
        return [Enterprise.from_dict(e) for e in as_list(self.client.get("/enterprise/list"))]

    def list_transactions(self) -> list[Transaction]:
        return [
            Transaction.from_dict(t) for t in as_list(self.client.get("/transaction/list"))
        ]

    def list_interest_accruals(self) -> list[InterestAccrual]:
        return [
            InterestAccrual.from_dict(a)
            for a in as_list(self.client.get("/interest/list"))
        ]
