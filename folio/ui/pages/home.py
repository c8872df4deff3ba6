"""Home page — hero, about and projects sections."""

import reflex as rx

from folio.ui.components.layout import page_layout
from folio.ui.components.sections import about_section, hero, projects_section


def home_page() -> rx.Component:
    return page_layout(
        hero(),
        rx.separator(),
        about_section(),
        rx.separator(),
        projects_section(),
    )
