"""Tests for the browser wallet bridge scripts and the demo wallet."""

import pytest

from rwa_ui.errors import WalletError
from rwa_ui.lib import wallet
from rwa_ui.models.user import WalletType


class TestScripts:
    @pytest.mark.parametrize(
        "wallet_type,provider",
        [
            (WalletType.METAMASK, "window.ethereum"),
            ("okx", "window.okxwallet"),
            ("Bitget", "window.bitkeep"),
        ],
    )
    def test_provider_expression(self, wallet_type, provider):
        assert wallet.provider_expression(wallet_type) == provider

    def test_walletconnect_not_implemented(self):
        with pytest.raises(WalletError, match="not implemented"):
            wallet.request_accounts_script(WalletType.WALLETCONNECT)

    def test_unknown_wallet(self):
        with pytest.raises(WalletError):
            wallet.provider_expression("phantom")

    def test_request_accounts_script(self):
        script = wallet.request_accounts_script("metamask")
        assert script.startswith("(async () => {")
        assert "window.ethereum" in script
        assert '"eth_requestAccounts"' in script
        assert "MetaMask is not installed" in script

    def test_personal_sign_escapes_message(self):
        message = 'Sign "this"\nNonce: 42'
        script = wallet.personal_sign_script("okx", message, "0xabc")
        assert "window.okxwallet" in script
        assert '"personal_sign"' in script
        assert '"Sign \\"this\\"\\nNonce: 42"' in script
        assert '"0xabc"' in script


class TestCallbackPayloads:
    def test_first_account(self):
        assert wallet.first_account({"ok": True, "result": ["0xA", "0xB"]}) == "0xA"

    def test_no_accounts(self):
        with pytest.raises(WalletError, match="no accounts"):
            wallet.first_account({"ok": True, "result": []})

    def test_rejected_request(self):
        with pytest.raises(WalletError, match="User rejected"):
            wallet.parse_script_result({"ok": False, "error": "User rejected the request."})

    def test_unexpected_payload(self):
        with pytest.raises(WalletError):
            wallet.parse_script_result("0xsig")


class TestDemoWallet:
    def test_signature_is_deterministic(self):
        demo = wallet.DemoWallet()
        assert demo.sign("hello") == demo.sign("hello")
        assert demo.sign("hello") != demo.sign("bye")
        assert demo.sign("hello").startswith("0x")

    def test_signature_ignores_address_case(self):
        address = wallet.DemoWallet.ADDRESS
        assert wallet.demo_signature(address, "m") == wallet.demo_signature(
            address.lower(), "m"
        )
