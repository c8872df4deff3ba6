"""Home page sections: hero, about and projects."""

import reflex as rx

from folio.content.composer import ComposedItem
from folio.ui.state.content_state import ContentState
from folio.ui.state.i18n_state import I18nState

_t = I18nState.translations


def hero() -> rx.Component:
    return rx.vstack(
        rx.badge(_t["hero.badge"], variant="soft", size="2"),
        rx.heading(
            _t["hero.titleHi"],
            " ",
            rx.text.span(_t["hero.name"], color="var(--accent-11)"),
            size="9",
        ),
        rx.heading(_t["hero.role"], size="6", color="gray", weight="regular"),
        rx.text(_t["hero.tagline"], size="4", font_style="italic", max_width="640px"),
        rx.hstack(
            rx.link(
                rx.button(_t["hero.ctaProjects"], size="3"),
                href=I18nState.nav_hrefs["/projects"],
            ),
            rx.link(
                rx.button(_t["hero.ctaContact"], size="3", variant="outline"),
                href=I18nState.nav_hrefs["/contact"],
            ),
            spacing="3",
        ),
        spacing="4",
        padding_y="48px",
        width="100%",
    )


def about_section() -> rx.Component:
    return rx.vstack(
        rx.heading(ContentState.about.title, size="7"),
        rx.text(ContentState.about.highlight, size="5", weight="medium", color="var(--accent-11)"),
        rx.foreach(
            ContentState.about.paragraphs,
            lambda p: rx.text(p, size="3", line_height="1.7"),
        ),
        spacing="4",
        width="100%",
        id="about",
    )


def _project_links(project: rx.Var[ComposedItem]) -> rx.Component:
    return rx.hstack(
        rx.cond(
            project.demo_url,
            rx.link(
                rx.button(rx.icon("external-link", size=14), _t["projects.demo"], size="2"),
                href=project.demo_url.to(str),
                is_external=True,
            ),
        ),
        rx.cond(
            project.repo_url,
            rx.link(
                rx.button(
                    rx.icon("github", size=14), _t["projects.repo"], size="2", variant="outline"
                ),
                href=project.repo_url.to(str),
                is_external=True,
            ),
        ),
        spacing="2",
    )


def project_card(project: rx.Var[ComposedItem]) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.cond(
                    project.icon,
                    rx.image(
                        src=project.icon.to(str), width="40px", height="40px", alt=project.title
                    ),
                ),
                rx.heading(project.title, size="4"),
                spacing="3",
                align="center",
            ),
            rx.text(project.summary, size="2", color="gray"),
            rx.hstack(
                rx.foreach(project.tags, lambda tag: rx.badge(tag, variant="surface")),
                spacing="1",
                wrap="wrap",
            ),
            rx.dialog.root(
                rx.dialog.trigger(
                    rx.button(_t["projects.details"], variant="ghost", size="2"),
                ),
                rx.dialog.content(
                    rx.dialog.title(project.title),
                    rx.dialog.description(project.details),
                    rx.hstack(
                        _project_links(project),
                        rx.spacer(),
                        rx.dialog.close(
                            rx.button(_t["projects.close"], variant="soft", color_scheme="gray"),
                        ),
                        width="100%",
                        margin_top="16px",
                    ),
                ),
            ),
            spacing="3",
            align="start",
            height="100%",
        ),
        width="100%",
    )


def projects_section(show_heading: bool = True) -> rx.Component:
    return rx.vstack(
        rx.heading(_t["projects.heading"], size="7") if show_heading else rx.fragment(),
        rx.grid(
            rx.foreach(ContentState.projects, project_card),
            columns=rx.breakpoints(initial="1", sm="2", lg="3"),
            spacing="4",
            width="100%",
        ),
        spacing="4",
        width="100%",
        id="projects",
    )
