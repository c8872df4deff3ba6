"""Header and footer navigation entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NavLink:
    # Base (unlocalized) route, e.g. "/about"
    path: str
    label_key: str


NAV_LINKS: list[NavLink] = [
    NavLink("/", "nav.home"),
    NavLink("/about", "nav.about"),
    NavLink("/projects", "nav.projects"),
    NavLink("/contact", "nav.contact"),
]
