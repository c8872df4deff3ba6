"""Content state — locale-resolved about and project content."""

import reflex as rx

from folio.content.about import AboutSection, get_about
from folio.content.composer import ComposedItem
from folio.content.projects import get_projects
from folio.ui.state.i18n_state import I18nState


class ContentState(I18nState):
    @rx.var
    def about(self) -> AboutSection:
        return get_about(self.locale)

    @rx.var
    def projects(self) -> list[ComposedItem]:
        return get_projects(self.locale)
