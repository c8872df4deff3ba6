import logging

import reflex as rx

from folio.config import settings
from folio.i18n import SUPPORTED_LOCALES, get_seo_text
from folio.i18n.routing import to_localized_path
from folio.ui.pages.site_pages import SITE_PAGES
from folio.ui.state.i18n_state import I18nState

logging.getLogger("folio").setLevel(settings.log_level.upper())

app = rx.App(
    head_components=[
        rx.el.link(rel="icon", href="/favicon.ico", type="image/x-icon"),
    ],
)

# Every page is served at its base route and under each locale prefix
for _locale in SUPPORTED_LOCALES:
    _seo = get_seo_text(_locale)
    for _page in SITE_PAGES:
        app.add_page(
            _page.component,
            route=to_localized_path(_page.path, _locale),
            title=_seo[f"{_page.seo_key}Title"],
            description=_seo[f"{_page.seo_key}Description"],
            on_load=I18nState.initialize,
        )

# Mount the JSON API on the Starlette backend
from folio.services.api_routes import api_routes  # noqa: E402

for _route in api_routes:
    app._api.routes.append(_route)
