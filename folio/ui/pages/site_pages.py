"""Site page table shared by app registration and navigation."""

from collections.abc import Callable
from typing import NamedTuple

import reflex as rx

from folio.ui.pages.about import about_page
from folio.ui.pages.contact import contact_page
from folio.ui.pages.home import home_page
from folio.ui.pages.projects import projects_page


class SitePage(NamedTuple):
    # Base (unlocalized) route
    path: str
    component: Callable[[], rx.Component]
    # Prefix of the "<key>Title" / "<key>Description" SEO entries
    seo_key: str


SITE_PAGES: list[SitePage] = [
    SitePage("/", home_page, "home"),
    SitePage("/about", about_page, "about"),
    SitePage("/projects", projects_page, "projects"),
    SitePage("/contact", contact_page, "contact"),
]
