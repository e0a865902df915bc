"""Enterprise binding and registration forms."""

import reflex as rx

from rwa_ui.components.common import connect_prompt, field, section_header, stat
from rwa_ui.models.reflex_models import EnterpriseOption
from rwa_ui.state import AuthState


def enterprise_page() -> rx.Component:
    return rx.cond(
        AuthState.is_authenticated,
        rx.box(
            section_header(
                "Enterprise",
                "Bind your wallet to an enterprise to manage its invoices.",
            ),
            rx.cond(AuthState.enterprise_bound, _bound_card(), _bind_card()),
            _register_card(),
            _enterprise_list(),
        ),
        connect_prompt("Connect a wallet to manage its enterprise."),
    )


def _bound_card() -> rx.Component:
    return rx.grid(
        stat("Enterprise", AuthState.enterprise_name),
        stat("Enterprise address", AuthState.enterprise_address),
        stat("Role", AuthState.user_role),
        columns=rx.breakpoints(initial="1", md="3"),
        spacing="4",
        class_name="card stats",
    )


def _bind_card() -> rx.Component:
    return rx.box(
        rx.heading("Bind enterprise", size="3", as_="h3"),
        rx.form(
            rx.hstack(
                rx.select.root(
                    rx.select.trigger(placeholder="Select an enterprise", width="100%"),
                    rx.select.content(rx.foreach(AuthState.enterprises, _enterprise_item)),
                    name="enterprise_address",
                ),
                rx.button("Bind", type="submit"),
                width="100%",
            ),
            on_submit=AuthState.bind_enterprise,
        ),
        class_name="card",
    )


def _enterprise_item(enterprise: EnterpriseOption) -> rx.Component:
    return rx.select.item(enterprise.name, value=enterprise.wallet_address)


def _register_card() -> rx.Component:
    return rx.box(
        rx.heading("Register enterprise", size="3", as_="h3"),
        rx.form(
            rx.vstack(
                field("Name", rx.input(name="name", placeholder="Acme Trading Ltd.")),
                field(
                    "Wallet address",
                    rx.input(
                        name="wallet_address",
                        placeholder="0x...",
                        default_value=AuthState.wallet_address,
                    ),
                ),
                field("KYC IPFS hash (optional)", rx.input(name="kyc_hash")),
                rx.button("Register", type="submit"),
                spacing="3",
            ),
            on_submit=AuthState.register_enterprise,
            reset_on_submit=True,
        ),
        class_name="card",
    )


def _enterprise_list() -> rx.Component:
    return rx.box(
        rx.heading("Registered enterprises", size="3", as_="h3"),
        rx.cond(
            AuthState.enterprises.length() > 0,
            rx.vstack(
                rx.foreach(
                    AuthState.enterprises,
                    lambda e: rx.hstack(
                        rx.text(e.name, weight="medium"),
                        rx.spacer(),
                        rx.text(e.wallet_address, class_name="mono muted truncate"),
                        width="100%",
                    ),
                ),
                width="100%",
            ),
            rx.text("No enterprises registered.", class_name="muted"),
        ),
        class_name="card",
    )
