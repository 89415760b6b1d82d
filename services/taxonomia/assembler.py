# services/taxonomia/assembler.py
"""
Montagem de menus e do sitemap a partir do snapshot.

- build_menu_sections: árvore aninhada {name, path, children} a partir de uma raiz
- build_menu: estrutura completa do menu (navbar, artigos de menu, rodapé)
- build_sitemap_entries / render_sitemap_xml: lista plana de URLs e o XML

Tudo roda em uma passada sobre o snapshot inteiro em memória; os volumes
são de centenas de registros, sem paginação.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from utils.timezone import UTC, to_iso

from .catalog import ArticleCatalog
from .exceptions import CyclicCategoryGraph
from .index import CategoryIndex
from .locales import Locale
from .models import ArticleRecord, CategoryRecord
from .routing import article_url

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
MENU_ARTICLES_LIMIT = 50

CATEGORY_CHANGEFREQ = "weekly"
CATEGORY_PRIORITY = 0.7
ARTICLE_CHANGEFREQ = "monthly"
ARTICLE_PRIORITY = 0.9

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

CategoryPredicate = Callable[[CategoryRecord], bool]


# ============================================
# MENU
# ============================================

@dataclass
class MenuNode:
    """Item de menu com caminho navegável já localizado."""

    id: str
    name: str
    slug: str
    path: str
    order: int = 0
    children: List["MenuNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "path": self.path,
            "order": self.order,
            "children": [child.to_dict() for child in self.children],
        }


def sort_siblings(categories: Iterable[CategoryRecord]) -> List[CategoryRecord]:
    """Ordena irmãos por `order` (ausente = 0), preservando a ordem armazenada nos empates."""
    return sorted(categories, key=lambda c: c.sort_order)


def _menu_node(category: CategoryRecord, index: CategoryIndex, locale: Locale) -> MenuNode:
    return MenuNode(
        id=category.id,
        name=category.localized_name(locale),
        slug=category.localized_slug(locale),
        path=index.build_url(category, locale),
        order=category.sort_order,
    )


def build_menu_sections(
    root_category_id,
    index: CategoryIndex,
    locale: Locale,
    predicate: Optional[CategoryPredicate] = None
) -> List[MenuNode]:
    """
    Árvore de menu dos descendentes de uma raiz.

    Raiz desconhecida -> []. O predicado (ex: show_in_navbar) filtra nós;
    um nó filtrado esconde também a sua subárvore.
    """
    root = index.get(root_category_id)
    if root is None:
        return []

    visited = {root.id}

    def _build(parent_id: str) -> List[MenuNode]:
        nodes = []
        for child in sort_siblings(index.children_of(parent_id)):
            if predicate is not None and not predicate(child):
                continue
            if child.id in visited:
                raise CyclicCategoryGraph([parent_id, child.id])
            visited.add(child.id)
            node = _menu_node(child, index, locale)
            node.children = _build(child.id)
            nodes.append(node)
        return nodes

    return _build(root.id)


def _recent_menu_articles(articles: ArticleCatalog, locale: Locale) -> List[ArticleRecord]:
    """Artigos marcados para o menu no locale, mais recentes primeiro."""
    eligible = [
        a for a in articles.for_locale(locale)
        if a.show_in_menu and a.robots_index
    ]
    eligible.sort(key=lambda a: a.date or _EPOCH, reverse=True)
    return eligible[:MENU_ARTICLES_LIMIT]


def _menu_article(article: ArticleRecord, index: CategoryIndex, locale: Locale) -> Dict[str, Any]:
    return {
        "id": article.id,
        "title": article.title,
        "title_menu": article.title_menu or article.title,
        "slug": article.localized_slug(locale),
        "full_path": article_url(article, index, locale),
        "category_id": article.category_id,
    }


def build_menu(
    index: CategoryIndex,
    locale: Locale,
    articles: ArticleCatalog
) -> Dict[str, Any]:
    """
    Estrutura completa do menu do site.

    Uma seção por raiz marcada para a navbar (ordenadas por `order`), com os
    itens da navbar e os artigos de menu que pertencem à subárvore da raiz.
    O rodapé usa as raízes e itens marcados com show_in_footer.
    """
    menu_articles = _recent_menu_articles(articles, locale)

    sections = []
    for root in sort_siblings(r for r in index.roots() if r.show_in_navbar):
        subtree = set(index.descendant_ids(root.id))
        root_node = _menu_node(root, index, locale)
        sections.append({
            "root": root_node.to_dict(),
            "items": [
                node.to_dict()
                for node in build_menu_sections(root.id, index, locale, lambda c: c.show_in_navbar)
            ],
            "menu_articles": [
                _menu_article(a, index, locale)
                for a in menu_articles
                if a.category_id in subtree
            ],
        })

    footer = []
    for root in sort_siblings(r for r in index.roots() if r.show_in_footer):
        root_node = _menu_node(root, index, locale)
        root_node.children = build_menu_sections(root.id, index, locale, lambda c: c.show_in_footer)
        footer.append(root_node.to_dict())

    return {
        "locale": locale.value,
        "items": sections,
        "footer": footer,
    }


# ============================================
# SITEMAP
# ============================================

@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    lastmod: Optional[datetime] = None
    changefreq: str = "weekly"
    priority: float = 0.5


def build_sitemap_entries(
    index: CategoryIndex,
    articles: ArticleCatalog,
    base_url: str,
    locales: Sequence[Locale] = (Locale.EN_US, Locale.PT_BR),
    static_paths: Sequence[Tuple[str, str, float]] = ()
) -> List[SitemapEntry]:
    """
    Lista plana de URLs do sitemap.

    Ordem: páginas estáticas, categorias (todas, inclusive as fora do menu)
    e artigos indexáveis, cada um em todos os locales em que é visível.

    Uma categoria com ciclo no parent_id fica de fora (o erro é logado);
    o resto do sitemap continua sendo gerado.
    """
    base_url = base_url.rstrip("/")
    entries: List[SitemapEntry] = []

    for path, changefreq, priority in static_paths:
        for locale in locales:
            entries.append(SitemapEntry(
                loc=f"{base_url}/{locale.value}{path}",
                changefreq=changefreq,
                priority=priority,
            ))

    for category in index:
        try:
            urls = [index.build_url(category, locale) for locale in locales]
        except CyclicCategoryGraph as e:
            logger.error(f"[Sitemap] Categoria {category.id} ignorada: {e.message}")
            continue
        for url in urls:
            entries.append(SitemapEntry(
                loc=f"{base_url}{url}",
                changefreq=CATEGORY_CHANGEFREQ,
                priority=CATEGORY_PRIORITY,
            ))

    for article in articles:
        if not article.robots_index:
            continue
        for locale in article.visibility.locales():
            if locale not in locales:
                continue
            try:
                url = article_url(article, index, locale)
            except CyclicCategoryGraph as e:
                logger.error(f"[Sitemap] Artigo {article.id} ignorado: {e.message}")
                break
            entries.append(SitemapEntry(
                loc=f"{base_url}{url}",
                lastmod=article.lastmod,
                changefreq=article.sitemap_changefreq or ARTICLE_CHANGEFREQ,
                priority=article.sitemap_priority if article.sitemap_priority is not None else ARTICLE_PRIORITY,
            ))

    logger.debug(f"[Sitemap] {len(entries)} URLs geradas")
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    """Serializa as entradas no formato sitemaps.org (urlset)."""
    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)

    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.loc
        if entry.lastmod is not None:
            ET.SubElement(url, "lastmod").text = to_iso(entry.lastmod)
        ET.SubElement(url, "changefreq").text = entry.changefreq
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"

    body = ET.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
