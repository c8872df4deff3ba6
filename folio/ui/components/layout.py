"""Site header, footer and page wrapper layout."""

import reflex as rx

from folio.ui.components.language_switcher import language_switcher
from folio.ui.components.nav_links import NAV_LINKS, NavLink
from folio.ui.state.i18n_state import I18nState

_t = I18nState.translations


def nav_link(link: NavLink) -> rx.Component:
    return rx.link(
        rx.text(_t[link.label_key], size="3"),
        href=I18nState.nav_hrefs[link.path],
        underline="none",
        weight=rx.cond(I18nState.current_base_path == link.path, "bold", "regular"),
        color_scheme=rx.cond(I18nState.current_base_path == link.path, "indigo", "gray"),
        padding_x="8px",
        padding_y="4px",
    )


def mobile_menu() -> rx.Component:
    return rx.box(
        rx.menu.root(
            rx.menu.trigger(
                rx.icon_button(
                    rx.icon("menu", size=18),
                    variant="ghost",
                    aria_label=_t["nav.openMenu"],
                ),
            ),
            rx.menu.content(
                *[
                    rx.menu.item(
                        rx.link(_t[link.label_key], href=I18nState.nav_hrefs[link.path]),
                    )
                    for link in NAV_LINKS
                ],
            ),
        ),
        display=["block", "block", "none"],
    )


def header() -> rx.Component:
    return rx.hstack(
        rx.link(
            rx.heading(_t["footer.name"], size="5"),
            href=I18nState.nav_hrefs["/"],
            underline="none",
        ),
        rx.spacer(),
        rx.hstack(
            *[nav_link(link) for link in NAV_LINKS],
            spacing="2",
            display=["none", "none", "flex"],
        ),
        language_switcher(),
        mobile_menu(),
        width="100%",
        align="center",
        padding_x="24px",
        padding_y="16px",
        border_bottom="1px solid var(--gray-a5)",
        position="sticky",
        top="0",
        bg="var(--color-background)",
        z_index="10",
    )


_FOOTER_KEYS = {
    "/": "footer.home",
    "/about": "footer.about",
    "/projects": "footer.projects",
    "/contact": "footer.contact",
}


def footer() -> rx.Component:
    return rx.vstack(
        rx.separator(),
        rx.hstack(
            *[
                rx.link(
                    _t[_FOOTER_KEYS[link.path]],
                    href=I18nState.nav_hrefs[link.path],
                    size="2",
                    color_scheme="gray",
                )
                for link in NAV_LINKS
            ],
            spacing="4",
            wrap="wrap",
            justify="center",
        ),
        rx.text(
            "© ",
            I18nState.copyright_year,
            " ",
            _t["footer.name"],
            ". ",
            _t["footer.rights"],
            size="1",
            color="gray",
        ),
        spacing="3",
        align="center",
        width="100%",
        padding="24px",
    )


def page_layout(*children, title: rx.Var[str] | str = "") -> rx.Component:
    return rx.vstack(
        header(),
        rx.container(
            rx.vstack(
                rx.cond(title != "", rx.heading(title, size="7"), rx.fragment()),
                *children,
                spacing="6",
                width="100%",
            ),
            size="3",
            padding_y="32px",
            flex="1",
        ),
        footer(),
        spacing="0",
        min_height="100vh",
        width="100%",
    )
