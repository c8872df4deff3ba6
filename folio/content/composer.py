"""Compose locale-invariant content records with per-locale text."""

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict

from folio.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale


class DuplicateContentIdError(ValueError):
    pass


class ContentItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    tags: list[str] = []
    icon: str | None = None
    demo_url: str | None = None
    repo_url: str | None = None


class LocalizedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    summary: str = ""
    details: str = ""


class ComposedItem(ContentItem):
    title: str
    summary: str = ""
    details: str = ""


LocalizedTable = Mapping[str, Mapping[str, LocalizedText]]


def resolve_text(item_id: str, locale: str, localized: LocalizedTable) -> LocalizedText:
    """Text for one item: locale entry, then default-locale entry, then a placeholder."""
    text = localized.get(locale, {}).get(item_id)
    if text is None:
        text = localized.get(DEFAULT_LOCALE, {}).get(item_id)
    if text is None:
        text = LocalizedText(title=item_id)
    return text


def compose(item: ContentItem, text: LocalizedText) -> ComposedItem:
    return ComposedItem(**item.model_dump(), **text.model_dump())


def compose_by_locale(
    base_items: Sequence[ContentItem],
    localized: LocalizedTable,
) -> dict[Locale, list[ComposedItem]]:
    """One composed item per base item per supported locale, in input order."""
    seen: set[str] = set()
    for item in base_items:
        if item.id in seen:
            raise DuplicateContentIdError(f"Duplicate content id {item.id!r}")
        seen.add(item.id)

    return {
        locale: [compose(item, resolve_text(item.id, locale, localized)) for item in base_items]
        for locale in SUPPORTED_LOCALES
    }
