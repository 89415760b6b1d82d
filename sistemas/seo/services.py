# sistemas/seo/services.py
"""
Serviços de SEO.

- gerar_sitemap: XML com páginas estáticas, categorias e artigos indexáveis
- gerar_robots: robots.txt com o link do sitemap
- meta_artigo / meta_categoria: meta tags + JSON-LD (schema.org)
"""

from typing import Any, Dict, List, Optional

from config import BASE_URL, SITEMAP_STATIC_PAGES, SUPPORTED_LOCALES
from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import (
    ArticleRecord,
    CategoryIndex,
    CategoryRecord,
    Locale,
    article_url,
    build_sitemap_entries,
    render_sitemap_xml,
)
from utils.timezone import to_iso

SITE_NAME = "GigSafeHub"
DEFAULT_KEYWORDS = "gig economy, freelancer, insurance, financial advice"
DESCRIPTION_LIMIT = 160
OG_DESCRIPTION_LIMIT = 200

ROBOTS_DISALLOW = ("/admin", "/api/", "/docs")


def gerar_sitemap(snapshots: TaxonomySnapshotService, base_url: str = BASE_URL) -> str:
    """Sitemap completo a partir do snapshot (todos os artigos, filtrados por visibilidade)."""
    entries = build_sitemap_entries(
        snapshots.categories(),
        snapshots.articles(),
        base_url,
        locales=[Locale.parse(value) for value in SUPPORTED_LOCALES],
        static_paths=SITEMAP_STATIC_PAGES,
    )
    return render_sitemap_xml(entries)


def gerar_robots(base_url: str = BASE_URL) -> str:
    lines = ["User-agent: *", "Allow: /"]
    lines += [f"Disallow: {path}" for path in ROBOTS_DISALLOW]
    lines.append(f"Sitemap: {base_url}/sitemap.xml")
    return "\n".join(lines)


# ==========================================
# Dados estruturados (schema.org)
# ==========================================

def _organization(base_url: str, with_logo: bool = False) -> Dict[str, Any]:
    data = {"@type": "Organization", "name": SITE_NAME}
    if with_logo:
        data["logo"] = {"@type": "ImageObject", "url": f"{base_url}/logo.png"}
    return data


def breadcrumb_list(chain: List[CategoryRecord], index: CategoryIndex, locale: Locale, base_url: str) -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": category.localized_name(locale),
                "item": f"{base_url}{index.build_url(category, locale)}",
            }
            for position, category in enumerate(chain, start=1)
        ],
    }


def article_structured_data(article: ArticleRecord, base_url: str) -> Dict[str, Any]:
    data = {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": article.title,
        "description": article.excerpt,
        "image": article.image_url,
        "datePublished": to_iso(article.date),
        "dateModified": to_iso(article.lastmod),
        "author": _organization(base_url),
        "publisher": _organization(base_url, with_logo=True),
    }
    if article.reading_time:
        data["timeRequired"] = f"PT{article.reading_time}M"
    return data


# ==========================================
# Meta tags
# ==========================================

def meta_artigo(
    article: ArticleRecord,
    index: CategoryIndex,
    locale: Locale,
    base_url: str = BASE_URL
) -> Dict[str, Any]:
    excerpt = article.excerpt or ""
    chain = index.ancestors(article.category_id) if article.category_id else []

    structured = [article_structured_data(article, base_url)]
    if chain:
        structured.append(breadcrumb_list(chain, index, locale, base_url))

    return {
        "title": article.meta_title or f"{article.title} - {SITE_NAME}",
        "description": article.meta_description or excerpt[:DESCRIPTION_LIMIT],
        "keywords": DEFAULT_KEYWORDS,
        "og_title": article.meta_title or article.title,
        "og_description": article.meta_description or excerpt[:OG_DESCRIPTION_LIMIT],
        "og_image": article.image_url,
        "og_type": "article",
        "robots": "index, follow" if article.robots_index else "noindex, nofollow",
        "canonical_url": f"{base_url}{article_url(article, index, locale)}",
        "alternates": {
            alt.value: f"{base_url}{article_url(article, index, alt)}"
            for alt in article.visibility.locales()
        },
        "published_time": to_iso(article.date),
        "reading_time": article.reading_time,
        "structured_data": structured,
    }


def meta_categoria(
    category: CategoryRecord,
    index: CategoryIndex,
    locale: Locale,
    base_url: str = BASE_URL
) -> Dict[str, Any]:
    name = category.localized_name(locale)
    description = category.localized_description(locale) or ""

    return {
        "title": category.meta_title or f"{name} | {SITE_NAME}",
        "description": category.meta_description or description[:DESCRIPTION_LIMIT],
        "keywords": DEFAULT_KEYWORDS,
        "og_title": category.meta_title or name,
        "og_description": category.meta_description or description[:OG_DESCRIPTION_LIMIT],
        "og_image": None,
        "og_type": "website",
        "robots": "index, follow",
        "canonical_url": f"{base_url}{index.build_url(category, locale)}",
        "alternates": {
            alt.value: f"{base_url}{index.build_url(category, alt)}"
            for alt in Locale
        },
        "published_time": None,
        "reading_time": None,
        "structured_data": [breadcrumb_list(index.ancestors(category), index, locale, base_url)],
    }


def buscar_meta(
    snapshots: TaxonomySnapshotService,
    tipo: str,
    slug: str,
    locale: Locale,
    base_url: str = BASE_URL
) -> Optional[Dict[str, Any]]:
    """
    Meta tags por tipo ("article" ou "category") e slug.

    Para categorias, o slug pode ser o caminho completo ("seguros/seguro-para-uber").
    Não encontrado -> None.
    """
    index = snapshots.categories(locale)

    if tipo == "article":
        article = snapshots.articles(locale).find_by_slug(slug, locale)
        return meta_artigo(article, index, locale, base_url) if article else None

    segments = [s for s in slug.split("/") if s]
    category = index.resolve_by_slug_path(segments, locale)
    if category is None and len(segments) == 1:
        category = index.find_by_slug(segments[0], locale)
    return meta_categoria(category, index, locale, base_url) if category else None
