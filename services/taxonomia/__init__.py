# services/taxonomia/__init__.py
"""
Taxonomia de conteúdo do portal: categorias hierárquicas bilíngues,
caminhos localizados, resolução de rotas, troca de idioma, menu e sitemap.
"""

from .assembler import (
    MenuNode,
    SitemapEntry,
    build_menu,
    build_menu_sections,
    build_sitemap_entries,
    render_sitemap_xml,
)
from .catalog import ArticleCatalog
from .exceptions import (
    ContentSourceError,
    CyclicCategoryGraph,
    LocaleInvalidoError,
    TaxonomiaError,
)
from .index import CategoryIndex
from .locales import (
    DEFAULT_LOCALE,
    ArticleVisibility,
    Locale,
    join_path,
    localized_slug,
    split_locale_prefix,
    split_path,
)
from .models import ArticleRecord, CategoryRecord
from .routing import RouteKind, RouteMatch, article_path_segments, article_url, resolve_route
from .translator import translate_path

__all__ = [
    # Modelos e índices
    "CategoryRecord",
    "ArticleRecord",
    "CategoryIndex",
    "ArticleCatalog",

    # Locales
    "Locale",
    "ArticleVisibility",
    "DEFAULT_LOCALE",
    "localized_slug",
    "split_path",
    "split_locale_prefix",
    "join_path",

    # Rotas
    "RouteKind",
    "RouteMatch",
    "resolve_route",
    "article_path_segments",
    "article_url",
    "translate_path",

    # Menu e sitemap
    "MenuNode",
    "SitemapEntry",
    "build_menu",
    "build_menu_sections",
    "build_sitemap_entries",
    "render_sitemap_xml",

    # Exceções
    "TaxonomiaError",
    "CyclicCategoryGraph",
    "LocaleInvalidoError",
    "ContentSourceError",
]
