# services/taxonomia/models.py
"""
Registros imutáveis de categoria e artigo.

São o snapshot lido da fonte de conteúdo (banco ou API). Aceitam tanto o
JSON da API (camelCase: slugEn, parentId...) quanto dicionários snake_case.
Ids são opacos e normalizados para str na entrada.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from utils.timezone import parse_iso, to_utc

from .locales import ArticleVisibility, Locale, localized_slug


def _pick(data: Mapping[str, Any], *keys, default=None):
    """Primeiro valor não-None entre as chaves (camelCase ou snake_case)."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _opt_id(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _as_datetime(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, str):
        return parse_iso(value)
    return None


@dataclass(frozen=True)
class CategoryRecord:
    """Nó da taxonomia (ex: "Seguros" -> "Seguro para Motoristas")."""

    id: str
    slug: str
    slug_en: Optional[str] = None
    slug_pt: Optional[str] = None
    parent_id: Optional[str] = None
    level: int = 0
    order: Optional[int] = None
    name: str = ""
    name_en: Optional[str] = None
    name_pt: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    description_pt: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    icon: Optional[str] = None
    show_in_navbar: bool = False
    show_in_footer: bool = False

    def localized_slug(self, locale: Locale) -> str:
        return localized_slug(self.slug, self.slug_en, self.slug_pt, locale)

    def localized_name(self, locale: Locale) -> str:
        if locale is Locale.PT_BR and self.name_pt:
            return self.name_pt
        if locale is Locale.EN_US and self.name_en:
            return self.name_en
        return self.name or self.slug

    def localized_description(self, locale: Locale) -> Optional[str]:
        if locale is Locale.PT_BR and self.description_pt:
            return self.description_pt
        if locale is Locale.EN_US and self.description_en:
            return self.description_en
        return self.description

    @property
    def sort_order(self) -> int:
        return self.order if self.order is not None else 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CategoryRecord":
        return cls(
            id=str(data["id"]),
            slug=_pick(data, "slug", default=""),
            slug_en=_pick(data, "slugEn", "slug_en"),
            slug_pt=_pick(data, "slugPt", "slug_pt"),
            parent_id=_opt_id(_pick(data, "parentId", "parent_id")),
            level=int(_pick(data, "level", default=0)),
            order=_pick(data, "order"),
            name=_pick(data, "name", default=""),
            name_en=_pick(data, "nameEn", "name_en"),
            name_pt=_pick(data, "namePt", "name_pt"),
            description=_pick(data, "description"),
            description_en=_pick(data, "descriptionEn", "description_en"),
            description_pt=_pick(data, "descriptionPt", "description_pt"),
            meta_title=_pick(data, "metaTitle", "meta_title"),
            meta_description=_pick(data, "metaDescription", "meta_description"),
            icon=_pick(data, "icon"),
            show_in_navbar=bool(_pick(data, "showInNavbar", "show_in_navbar", default=False)),
            show_in_footer=bool(_pick(data, "showInFooter", "show_in_footer", default=False)),
        )


@dataclass(frozen=True)
class ArticleRecord:
    """Artigo publicado, opcionalmente ligado a uma categoria."""

    id: str
    slug: str
    slug_en: Optional[str] = None
    slug_pt: Optional[str] = None
    category_id: Optional[str] = None
    visibility: ArticleVisibility = ArticleVisibility.BOTH
    title: str = ""
    title_menu: Optional[str] = None
    excerpt: str = ""
    content: str = ""
    image_url: Optional[str] = None
    date: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    robots_index: bool = True
    show_in_menu: bool = False
    sitemap_priority: Optional[float] = None
    sitemap_changefreq: Optional[str] = None
    reading_time: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None

    def localized_slug(self, locale: Locale) -> str:
        return localized_slug(self.slug, self.slug_en, self.slug_pt, locale)

    def matches_slug(self, slug: str) -> bool:
        return slug in (self.slug, self.slug_en, self.slug_pt)

    @property
    def lastmod(self) -> Optional[datetime]:
        return self.last_modified or self.updated_at or self.date

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ArticleRecord":
        priority = _pick(data, "sitemapPriority", "sitemap_priority")
        reading_time = _pick(data, "readingTime", "reading_time")
        return cls(
            id=str(data["id"]),
            slug=_pick(data, "slug", default=""),
            slug_en=_pick(data, "slugEn", "slug_en"),
            slug_pt=_pick(data, "slugPt", "slug_pt"),
            category_id=_opt_id(_pick(data, "categoryId", "category_id")),
            visibility=ArticleVisibility.parse(_pick(data, "locale", "visibility")),
            title=_pick(data, "title", default=""),
            title_menu=_pick(data, "titleMenu", "title_menu"),
            excerpt=_pick(data, "excerpt", default=""),
            content=_pick(data, "content", default=""),
            image_url=_pick(data, "imageUrl", "image_url"),
            date=_as_datetime(_pick(data, "date")),
            updated_at=_as_datetime(_pick(data, "updatedAt", "updated_at")),
            last_modified=_as_datetime(_pick(data, "lastModified", "last_modified")),
            robots_index=bool(_pick(data, "robotsIndex", "robots_index", default=True)),
            show_in_menu=bool(_pick(data, "showInMenu", "show_in_menu", default=False)),
            sitemap_priority=float(priority) if priority is not None else None,
            sitemap_changefreq=_pick(data, "sitemapChangefreq", "sitemap_changefreq"),
            reading_time=int(reading_time) if reading_time is not None else None,
            meta_title=_pick(data, "metaTitle", "meta_title"),
            meta_description=_pick(data, "metaDescription", "meta_description"),
        )
