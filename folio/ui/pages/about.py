"""About page."""

import reflex as rx

from folio.ui.components.layout import page_layout
from folio.ui.components.sections import about_section


def about_page() -> rx.Component:
    return page_layout(about_section())
