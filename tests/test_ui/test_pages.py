"""Tests that every site page builds into a component tree."""

import pytest
import reflex as rx

from folio.ui.components.layout import footer, header
from folio.ui.components.sections import about_section, hero, projects_section
from folio.ui.pages.site_pages import SITE_PAGES


class TestSitePages:
    def test_base_routes(self):
        assert [page.path for page in SITE_PAGES] == ["/", "/about", "/projects", "/contact"]

    @pytest.mark.parametrize("page", SITE_PAGES, ids=lambda p: p.seo_key)
    def test_page_builds(self, page):
        assert isinstance(page.component(), rx.Component)


class TestSections:
    def test_projects_section_builds(self):
        """Project cards render optional demo/repo links and icons."""
        assert isinstance(projects_section(), rx.Component)
        assert isinstance(projects_section(show_heading=False), rx.Component)

    def test_other_sections_build(self):
        for build in (hero, about_section, header, footer):
            assert isinstance(build(), rx.Component)
