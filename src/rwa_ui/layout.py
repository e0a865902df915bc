"""
Layout helpers shared by every page of the RWA Finance UI.

Each page is wrapped in the same shell:
- A header with the app title, the navigation links and the wallet menu
- The page body inside the centered app container

The wallet menu offers the injected wallets (and the demo wallet when the
demo services are active) while disconnected, and the account actions once
a wallet is logged in.
"""

import reflex as rx

from rwa_ui import settings
from rwa_ui.models.user import WalletType
from rwa_ui.state import AuthState

_WALLETS = [
    (WalletType.METAMASK, "MetaMask"),
    (WalletType.OKX, "OKX Wallet"),
    (WalletType.BITGET, "Bitget Wallet"),
    (WalletType.WALLETCONNECT, "WalletConnect"),
]


def page_shell(*children: rx.Component) -> rx.Component:
    """Wrap a page body in the shared header and container."""
    return rx.box(
        header(),
        rx.box(*children, class_name="app-container"),
        class_name="app-shell",
    )


def header() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.link(
                rx.hstack(
                    rx.icon("landmark", size=22),
                    rx.heading(settings.APP_TITLE, size="4", as_="h1"),
                    align="center",
                ),
                href="/",
                underline="none",
                class_name="brand",
            ),
            _nav(),
            rx.spacer(),
            wallet_menu(),
            align="center",
            class_name="app-header-inner",
        ),
        class_name="app-header",
    )


def _nav() -> rx.Component:
    return rx.hstack(
        _nav_link("Market", "/"),
        rx.cond(
            AuthState.is_enterprise_admin,
            rx.fragment(
                _nav_link("Invoices", "/invoices"),
                _nav_link("Batches", "/batches"),
            ),
        ),
        rx.cond(AuthState.is_authenticated, _nav_link("Portfolio", "/portfolio")),
        rx.cond(AuthState.is_authenticated, _nav_link("Enterprise", "/enterprise")),
        spacing="4",
        class_name="nav",
    )


def _nav_link(label: str, href: str) -> rx.Component:
    return rx.link(label, href=href, underline="none", class_name="nav-link")


def wallet_menu() -> rx.Component:
    """Connect menu while logged out; account menu once logged in."""
    return rx.cond(
        AuthState.is_authenticated,
        _account_menu(),
        _connect_menu(),
    )


def _connect_menu() -> rx.Component:
    return rx.menu.root(
        rx.menu.trigger(
            rx.button(
                rx.icon("wallet", size=16),
                rx.cond(
                    AuthState.is_connecting,
                    "Connecting...",
                    rx.cond(AuthState.is_connected, "Sign In", "Connect Wallet"),
                ),
                loading=AuthState.is_connecting,
            ),
        ),
        rx.menu.content(
            rx.cond(
                AuthState.error != "",
                rx.fragment(
                    rx.menu.item(
                        rx.text(AuthState.error, color="red", size="1"), disabled=True
                    ),
                    rx.menu.separator(),
                ),
            ),
            *[
                rx.menu.item(label, on_click=AuthState.connect(wallet_type.value))
                for wallet_type, label in _WALLETS
            ],
            rx.cond(
                AuthState.demo_mode,
                rx.fragment(
                    rx.menu.separator(),
                    rx.menu.item(
                        "Demo Wallet", on_click=AuthState.connect(WalletType.DEMO.value)
                    ),
                ),
            ),
        ),
    )


def _account_menu() -> rx.Component:
    return rx.menu.root(
        rx.menu.trigger(
            rx.button(
                rx.icon("circle-user", size=16),
                AuthState.short_address,
                variant="soft",
            ),
        ),
        rx.menu.content(
            rx.menu.item(
                rx.hstack(
                    rx.text(AuthState.user_role, size="2"),
                    rx.cond(
                        AuthState.enterprise_bound,
                        rx.badge(AuthState.enterprise_name, color_scheme="green"),
                    ),
                ),
                disabled=True,
            ),
            rx.menu.separator(),
            rx.menu.item("Portfolio", on_click=rx.redirect("/portfolio")),
            rx.menu.item("Enterprise", on_click=rx.redirect("/enterprise")),
            rx.menu.separator(),
            rx.menu.item("Log out", on_click=AuthState.logout),
            rx.menu.item("Disconnect", color="red", on_click=AuthState.disconnect),
        ),
    )
