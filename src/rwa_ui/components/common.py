"""Small building blocks shared by the page components."""

import reflex as rx

_STATUS_COLORS = {
    "Pending": "amber",
    "Verified": "blue",
    "Packaged": "violet",
    "Issued": "blue",
    "OnSale": "green",
    "Trading": "green",
    "Available": "green",
    "SoldOut": "gray",
    "Funded": "gray",
    "Repaid": "teal",
    "Settled": "teal",
    "Overdue": "red",
    "Defaulted": "red",
}


def status_badge(status: rx.Var, label: rx.Var) -> rx.Component:
    """Badge colored by the raw backend status, showing its display label."""
    return rx.match(
        status,
        *[(value, rx.badge(label, color_scheme=color)) for value, color in _STATUS_COLORS.items()],
        rx.badge(label, color_scheme="gray"),
    )


def section_header(title: str, subtitle: str, *actions: rx.Component) -> rx.Component:
    return rx.hstack(
        rx.box(
            rx.heading(title, size="5", as_="h2"),
            rx.text(subtitle, class_name="muted"),
        ),
        rx.spacer(),
        *actions,
        align="center",
        class_name="section-header",
    )


def empty_state(icon: str, title: str, message: str) -> rx.Component:
    return rx.box(
        rx.icon(icon, class_name="empty-icon", size=48),
        rx.heading(title, size="3", as_="h3"),
        rx.text(message, class_name="muted"),
        class_name="card empty-state",
    )


def loader(message: str) -> rx.Component:
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text(message, class_name="muted"),
        class_name="card loading-state",
    )


def connect_prompt(message: str) -> rx.Component:
    """Shown in place of a page body when no wallet is logged in."""
    return empty_state("wallet", "Wallet not connected", message)


def stat(label: str, value: rx.Var | str) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="stat-label"),
        rx.text(value, class_name="stat-value"),
        class_name="stat",
    )


def field(label: str, control: rx.Component) -> rx.Component:
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        control,
        spacing="1",
        width="100%",
    )
