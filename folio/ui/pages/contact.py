"""Contact page (placeholder until the contact form ships)."""

import reflex as rx

from folio.ui.components.layout import page_layout
from folio.ui.state.i18n_state import I18nState

_t = I18nState.translations


def not_ready(title: rx.Var[str]) -> rx.Component:
    return page_layout(
        rx.callout(_t["pages.notReady"], icon="construction", width="100%"),
        rx.link(
            rx.button(rx.icon("arrow-left", size=16), _t["pages.backHome"], variant="soft"),
            href=I18nState.nav_hrefs["/"],
        ),
        title=title,
    )


def contact_page() -> rx.Component:
    return not_ready(_t["pages.contact.title"])
