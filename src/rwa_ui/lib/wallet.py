"""
Bridge to the browser's injected wallet provider.

The wallet lives in the browser (MetaMask injects ``window.ethereum``, OKX
injects ``window.okxwallet`` and Bitget injects ``window.bitkeep``). Reflex
event handlers run on the server, so they reach the wallet by sending a
JavaScript snippet through ``rx.call_script`` and receiving the result in a
callback event.

Every snippet is an async IIFE that resolves to a plain object::

    {"ok": true, "result": ...}      # provider call succeeded
    {"ok": false, "error": "..."}    # provider missing or request rejected

so that a rejected signature still reaches the callback instead of dying as
an unhandled promise rejection in the browser.
"""

import json
from typing import Any

from rwa_ui.errors import WalletError
from rwa_ui.lib import objects
from rwa_ui.models.user import WalletType

_PROVIDERS: dict[WalletType, tuple[str, str]] = {
    WalletType.METAMASK: ("window.ethereum", "MetaMask"),
    WalletType.OKX: ("window.okxwallet", "OKX Wallet"),
    WalletType.BITGET: ("window.bitkeep", "Bitget Wallet"),
}


def provider_expression(wallet_type: WalletType | str) -> str:
    """
    Return the JavaScript expression naming the injected provider.

    Raises:
        WalletError: For wallet types without an injected provider.
    """
    wallet_type = WalletType.parse(wallet_type)
    if wallet_type is WalletType.WALLETCONNECT:
        raise WalletError("WalletConnect not implemented yet")
    try:
        return _PROVIDERS[wallet_type][0]
    except KeyError as exc:
        raise WalletError(f"Unsupported wallet type: {wallet_type.value}") from exc


def request_accounts_script(wallet_type: WalletType | str) -> str:
    """Build the snippet that asks the wallet for its accounts (``eth_requestAccounts``)."""
    return _provider_call(wallet_type, "eth_requestAccounts", None)


def personal_sign_script(
    wallet_type: WalletType | str, message: str, address: str
) -> str:
    """Build the snippet that signs ``message`` with ``address`` via ``personal_sign``."""
    return _provider_call(wallet_type, "personal_sign", [message, address])


def parse_script_result(result: Any) -> Any:
    """
    Unwrap the payload delivered to a call_script callback.

    Returns:
        The provider's result value.

    Raises:
        WalletError: If the provider was missing or refused the request.
    """
    if not isinstance(result, dict):
        raise WalletError(f"Unexpected wallet response: {result!r}")
    if not result.get("ok"):
        raise WalletError(str(result.get("error") or "Wallet request failed"))
    return result.get("result")


def first_account(result: Any) -> str:
    """Return the first address from an ``eth_requestAccounts`` callback payload."""
    accounts = parse_script_result(result)
    if not accounts or not isinstance(accounts, list) or not accounts[0]:
        raise WalletError("Wallet returned no accounts")
    return str(accounts[0])


def _provider_call(wallet_type: WalletType | str, method: str, params: Any) -> str:
    provider = provider_expression(wallet_type)
    label = _PROVIDERS[WalletType.parse(wallet_type)][1]
    request = {"method": method}
    if params is not None:
        request["params"] = params
    return (
        "(async () => {"
        f"const provider = {provider};"
        f"if (!provider) {{ return {{ok: false, error: {json.dumps(label + ' is not installed')}}}; }}"
        "try {"
        f"const result = await provider.request({json.dumps(request)});"
        "return {ok: true, result: result};"
        "} catch (e) {"
        "return {ok: false, error: (e && e.message) ? e.message : String(e)};"
        "}"
        "})()"
    )


class DemoWallet:
    """
    Server-side stand-in for a browser wallet, used in demo mode.

    Signatures are a SHA-256 over the lowercase address and the message,
    which the demo auth service checks. They are not secp256k1 signatures.
    """

    ADDRESS = "0xDe30dE30De30dE30De30dE30De30dE30De30dE30"

    def __init__(self, address: str = ADDRESS) -> None:
        self.address = address

    def sign(self, message: str) -> str:
        return demo_signature(self.address, message)


def demo_signature(address: str, message: str) -> str:
    """Return the signature DemoWallet produces for ``message``."""
    return "0x" + objects.digest(address.lower(), message)
