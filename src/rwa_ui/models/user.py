"""
Wallet, user and enterprise models.

The authentication endpoints and the enterprise-info endpoint speak
camelCase; the enterprise CRUD endpoints speak snake_case. The ``from_dict``
helpers accept whichever the backend sends.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rwa_ui.errors import WalletError
from rwa_ui.models.common import parse_enum, payload


class WalletType(str, Enum):
    """Wallets the UI can connect to."""

    METAMASK = "metamask"
    OKX = "okx"
    BITGET = "bitget"
    WALLETCONNECT = "walletconnect"
    DEMO = "demo"

    @classmethod
    def parse(cls, value: "WalletType | str") -> "WalletType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise WalletError(f"Unsupported wallet type: {value}") from exc


class UserRole(str, Enum):
    INVESTOR = "Investor"
    ENTERPRISE_ADMIN = "EnterpriseAdmin"
    PLATFORM_ADMIN = "PlatformAdmin"


class EnterpriseStatus(str, Enum):
    PENDING = "Pending"
    VERIFIED = "Verified"
    REJECTED = "Rejected"
    SUSPENDED = "Suspended"


@dataclass(slots=True)
class WalletInfo:
    """A connected wallet account."""

    address: str
    wallet_type: WalletType

    def to_dict(self) -> dict:
        return {"address": self.address, "type": self.wallet_type.value}

    @classmethod
    def from_dict(cls, data: dict | None) -> "WalletInfo | None":
        if not data or not data.get("address"):
            return None
        return cls(
            address=data["address"],
            wallet_type=WalletType.parse(data.get("type", WalletType.METAMASK)),
        )


@dataclass(slots=True)
class Challenge:
    """Nonce issued by ``/user/challenge`` that the wallet must sign."""

    nonce: str
    request_id: str

    @classmethod
    def from_dict(cls, data: Any) -> "Challenge":
        b = payload(data)
        return cls(
            nonce=str(b.get("nonce", "")),
            request_id=str(b.get("requestId", b.get("request_id", ""))),
        )


@dataclass(slots=True)
class LoginResult:
    """Session token returned by ``/user/login``."""

    token: str
    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "LoginResult":
        b = payload(data)
        return cls(token=str(b.get("token") or ""), message=str(b.get("message") or ""))


@dataclass(slots=True)
class EnterpriseInfo:
    """The enterprise bound to the logged-in wallet, if any."""

    is_enterprise_bound: bool = False
    enterprise_id: str = ""
    enterprise_name: str = ""
    enterprise_address: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "EnterpriseInfo":
        b = payload(data)
        return cls(
            is_enterprise_bound=bool(
                b.get("isEnterpriseBound", b.get("is_enterprise_bound", False))
            ),
            enterprise_id=b.get("enterpriseId") or b.get("enterprise_id") or "",
            enterprise_name=b.get("enterpriseName") or b.get("enterprise_name") or "",
            enterprise_address=(
                b.get("enterpriseAddress") or b.get("enterprise_address") or ""
            ),
        )

    def to_dict(self) -> dict:
        return {
            "isEnterpriseBound": self.is_enterprise_bound,
            "enterpriseId": self.enterprise_id,
            "enterpriseName": self.enterprise_name,
            "enterpriseAddress": self.enterprise_address,
        }


@dataclass(slots=True)
class UserInfo:
    """The logged-in user as the UI sees it."""

    wallet_address: str
    enterprise: EnterpriseInfo

    @property
    def role(self) -> UserRole:
        """Enterprise admins are wallets bound to an enterprise; everyone else invests."""
        if self.enterprise.is_enterprise_bound:
            return UserRole.ENTERPRISE_ADMIN
        return UserRole.INVESTOR


@dataclass(slots=True)
class Enterprise:
    """A registered enterprise (creditor or debtor)."""

    id: str
    name: str
    wallet_address: str
    status: EnterpriseStatus = EnterpriseStatus.PENDING
    kyc_details_ipfs_hash: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Enterprise":
        b = payload(data)
        return cls(
            id=str(b.get("id") or b.get("_id.$oid") or ""),
            name=b.get("name", ""),
            wallet_address=b.get("wallet_address", b.get("walletAddress", "")),
            status=parse_enum(
                EnterpriseStatus, b.get("status"), EnterpriseStatus.PENDING
            ),
            kyc_details_ipfs_hash=b.get("kyc_details_ipfs_hash"),
        )
