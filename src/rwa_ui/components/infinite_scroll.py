"""
Infinite scroll component wrapper for react-infinite-scroll-component.

Used by the token market to fetch the next page when the user scrolls to
the bottom of the listing.
"""

import reflex as rx


class InfiniteScroll(rx.NoSSRComponent):
    """Window-scrolling infinite list; ``next`` fires when the end is near."""

    library = "react-infinite-scroll-component@6.1.0"
    tag = "InfiniteScroll"
    is_default = True

    data_length: int
    next: rx.EventHandler
    has_more: bool

    loader: rx.Component | None = None
    end_message: rx.Component | None = None
    scroll_threshold: str | None = None


def infinite_list(
    items: rx.Component,
    data_length: rx.Var,
    next: rx.EventHandler,
    has_more: rx.Var,
    loading_message: str,
    end_message: str,
) -> rx.Component:
    """Wrap ``items`` so ``next`` fires shortly before the user reaches the end."""
    return InfiniteScroll.create(
        items,
        data_length=data_length,
        next=next,
        has_more=has_more,
        scroll_threshold="200px",
        loader=rx.box(
            rx.box(class_name="spinner"),
            rx.text(loading_message, class_name="muted"),
            class_name="load-more-container",
        ),
        end_message=rx.box(
            rx.text(end_message, class_name="load-more-hint end"),
            class_name="load-more-container",
        ),
    )
