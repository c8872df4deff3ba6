"""Projects page."""

import reflex as rx

from folio.ui.components.layout import page_layout
from folio.ui.components.sections import projects_section
from folio.ui.state.i18n_state import I18nState

_t = I18nState.translations


def projects_page() -> rx.Component:
    return page_layout(
        projects_section(show_heading=False),
        title=_t["pages.projects.title"],
    )
