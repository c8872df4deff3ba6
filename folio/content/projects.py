"""Project showcase content.

Shared fields live in ``BASE_PROJECTS``; translatable text lives in
``LOCALIZED_TEXT`` keyed by locale and project id. To add a project, give it
a lowercase hyphenated id in ``BASE_PROJECTS`` and add its text under every
locale that translates it. Missing Greek text falls back to English.
"""

from folio.content.composer import ComposedItem, ContentItem, LocalizedText, compose_by_locale
from folio.i18n import DEFAULT_LOCALE, Locale, coerce_locale

BASE_PROJECTS: list[ContentItem] = [
    ContentItem(
        id="portfolio",
        tags=["Reflex", "Python", "Radix UI"],
        icon="/assets/projects/portfolio.svg",
        repo_url="https://github.com/vmanX8/Portfolio-Astro-Svelte-Tailwind",
    ),
    ContentItem(
        id="snakes-ladders",
        tags=["React", "TypeScript"],
        icon="/assets/projects/snakes-ladders.svg",
        demo_url="https://snakes-n-ladders-rose.vercel.app/",
        repo_url="https://github.com/vmanX8/snakesNladders",
    ),
    ContentItem(
        id="weather-app",
        tags=["React", "TypeScript", "OpenWeather API"],
        icon="/assets/projects/weather-app.svg",
        demo_url="https://weather-app-six-nu-73.vercel.app/",
        repo_url="https://github.com/vmanX8/weather-app",
    ),
]

LOCALIZED_TEXT: dict[str, dict[str, LocalizedText]] = {
    "en": {
        "portfolio": LocalizedText(
            title="Portfolio Website",
            summary="My personal portfolio, a bilingual site with localized routing.",
            details=(
                "This project focuses on clean structure and responsive UI. Pages are "
                "components, content is plain data, and the language switcher keeps "
                "every route available in English and Greek."
            ),
        ),
        "snakes-ladders": LocalizedText(
            title="Snakes & Ladders Game",
            summary="Classic board game rebuilt in React with a playful modern UI.",
            details=(
                "A modern take on the classic Snakes & Ladders game, built with React and "
                "TypeScript. Focused on clean component structure, smooth interactions, "
                "and a fun UI."
            ),
        ),
        "weather-app": LocalizedText(
            title="Weather App",
            summary="Live weather dashboard built with React and the OpenWeather API.",
            details=(
                "A responsive weather dashboard built with React and TypeScript, using the "
                "OpenWeather API to fetch live conditions. Includes search, basic error "
                "handling, and a clean data-driven UI."
            ),
        ),
    },
    "gr": {
        "portfolio": LocalizedText(
            title="Portfolio Website",
            summary="Το προσωπικό μου portfolio, δίγλωσσο site με τοπικοποιημένα URLs.",
            details=(
                "Το project δίνει έμφαση στη σωστή δομή και στο responsive UI. Οι σελίδες "
                "είναι components, το περιεχόμενο απλά δεδομένα, και κάθε σελίδα υπάρχει "
                "στα Αγγλικά και στα Ελληνικά."
            ),
        ),
        "snakes-ladders": LocalizedText(
            title="Snakes & Ladders Game",
            summary="Το κλασικό επιτραπέζιο παιχνίδι σε React εφαρμογή με μοντέρνο και playful UI.",
            details=(
                "Μια σύγχρονη εκδοχή του Snakes & Ladders, φτιαγμένη με React και "
                "TypeScript. Έμφαση σε καθαρή δομή components, ομαλές αλληλεπιδράσεις "
                "και ευχάριστο UI."
            ),
        ),
        "weather-app": LocalizedText(
            title="Weather App",
            summary="Live weather dashboard σε React με το OpenWeather API.",
            details=(
                "Responsive weather dashboard με React και TypeScript που χρησιμοποιεί το "
                "OpenWeather API για live δεδομένα. Περιλαμβάνει αναζήτηση, βασικό χειρισμό "
                "σφαλμάτων και καθαρό data-driven UI."
            ),
        ),
    },
}

PROJECTS_BY_LOCALE: dict[Locale, list[ComposedItem]] = compose_by_locale(
    BASE_PROJECTS, LOCALIZED_TEXT
)


def get_projects(locale: str) -> list[ComposedItem]:
    return PROJECTS_BY_LOCALE.get(coerce_locale(locale), PROJECTS_BY_LOCALE[DEFAULT_LOCALE])
