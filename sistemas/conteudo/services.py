# sistemas/conteudo/services.py
"""
Serviços do sistema de Conteúdo: conversão dos registros do snapshot
nas respostas da API, sempre com slugs e caminhos do locale pedido.
"""

import logging
from typing import List, Optional

from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import (
    ArticleCatalog,
    ArticleRecord,
    CategoryIndex,
    CategoryRecord,
    CyclicCategoryGraph,
    Locale,
    RouteMatch,
    article_url,
)
from services.taxonomia.assembler import sort_siblings
from services.taxonomia.routing import ArticleLookup
from sistemas.conteudo.schemas import (
    ArticleDetailResponse,
    ArticleSummary,
    BreadcrumbItem,
    CategoryDetailResponse,
    CategoryResponse,
    RouteResolveResponse,
)


logger = logging.getLogger(__name__)


def category_response(category: CategoryRecord, index: CategoryIndex, locale: Locale) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        parent_id=category.parent_id,
        slug=category.localized_slug(locale),
        slug_en=category.localized_slug(Locale.EN_US),
        slug_pt=category.localized_slug(Locale.PT_BR),
        name=category.localized_name(locale),
        description=category.localized_description(locale),
        level=category.level,
        order=category.sort_order,
        icon=category.icon,
        meta_title=category.meta_title,
        meta_description=category.meta_description,
        show_in_navbar=category.show_in_navbar,
        show_in_footer=category.show_in_footer,
        full_path=index.build_url(category, locale),
    )


def list_categories(index: CategoryIndex, locale: Locale) -> List[CategoryResponse]:
    """
    Lista plana de categorias.

    Categoria com ciclo no parent_id fica de fora (erro logado); o resto
    da lista continua sendo servido.
    """
    items = []
    for category in index:
        try:
            items.append(category_response(category, index, locale))
        except CyclicCategoryGraph as e:
            logger.error(f"[Conteudo] Categoria {category.id} ignorada: {e.message}")
    return items


def breadcrumbs(chain: List[CategoryRecord], index: CategoryIndex, locale: Locale) -> List[BreadcrumbItem]:
    """Trilha a partir da cadeia raiz -> categoria."""
    items = []
    for category in chain:
        items.append(BreadcrumbItem(
            id=category.id,
            name=category.localized_name(locale),
            slug=category.localized_slug(locale),
            path=index.build_url(category, locale),
        ))
    return items


def article_summary(article: ArticleRecord, index: CategoryIndex, locale: Locale) -> ArticleSummary:
    return ArticleSummary(
        id=article.id,
        slug=article.localized_slug(locale),
        title=article.title,
        excerpt=article.excerpt,
        image_url=article.image_url,
        category_id=article.category_id,
        visibility=article.visibility.value,
        date=article.date,
        reading_time=article.reading_time,
        full_path=article_url(article, index, locale),
    )


def article_detail(article: ArticleRecord, index: CategoryIndex, locale: Locale) -> ArticleDetailResponse:
    summary = article_summary(article, index, locale)
    chain = index.ancestors(article.category_id) if article.category_id else []
    return ArticleDetailResponse(
        **summary.model_dump(),
        slug_en=article.localized_slug(Locale.EN_US),
        slug_pt=article.localized_slug(Locale.PT_BR),
        title_menu=article.title_menu,
        content=article.content,
        meta_title=article.meta_title,
        meta_description=article.meta_description,
        robots_index=article.robots_index,
        updated_at=article.updated_at,
        breadcrumbs=breadcrumbs(chain, index, locale),
        alternates={
            alt.value: article_url(article, index, alt)
            for alt in article.visibility.locales()
        },
    )


def category_detail(
    category: CategoryRecord,
    index: CategoryIndex,
    articles: ArticleCatalog,
    locale: Locale
) -> CategoryDetailResponse:
    """Categoria com trilha, filhos ordenados e artigos da própria categoria."""
    base = category_response(category, index, locale)
    return CategoryDetailResponse(
        **base.model_dump(),
        breadcrumbs=breadcrumbs(index.ancestors(category), index, locale),
        children=[
            category_response(child, index, locale)
            for child in sort_siblings(index.children_of(category.id))
        ],
        articles=[
            article_summary(article, index, locale)
            for article in articles.in_categories([category.id])
        ],
    )


def route_response(match: RouteMatch, index: CategoryIndex) -> RouteResolveResponse:
    locale = match.locale
    return RouteResolveResponse(
        kind=match.kind.value,
        locale=locale.value,
        canonical_path=match.canonical_path,
        redirect=match.redirect,
        category=category_response(match.category, index, locale) if match.category else None,
        article=article_summary(match.article, index, locale) if match.article else None,
        breadcrumbs=breadcrumbs(list(match.breadcrumbs), index, locale),
    )


def article_lookup_for(snapshots: TaxonomySnapshotService) -> ArticleLookup:
    """Busca de artigo por slug restrita aos artigos visíveis no locale."""
    def _lookup(slug: str, locale: Locale) -> Optional[ArticleRecord]:
        return snapshots.articles(locale).find_by_slug(slug, locale)
    return _lookup


SORT_KEYS = {
    "date": lambda a: a.date.timestamp() if a.date else 0,
    "title": lambda a: (a.title or "").casefold(),
}


def list_articles(
    catalog: ArticleCatalog,
    index: CategoryIndex,
    locale: Locale,
    category_slug: Optional[str] = None,
    limit: int = 20,
    sort_by: str = "date",
    sort_order: str = "desc"
) -> Optional[List[ArticleSummary]]:
    """
    Artigos do locale, por padrão os mais recentes primeiro.

    category_slug filtra pela categoria e todas as suas descendentes.
    sort_by: "date" ou "title" (sem diferenciar maiúsculas); sort_order: "asc" ou "desc".
    Categoria inexistente -> None (o router responde 404).
    """
    articles = list(catalog)
    if category_slug:
        category = index.find_by_slug(category_slug, locale)
        if category is None:
            return None
        articles = catalog.in_categories(index.descendant_ids(category.id))

    articles.sort(key=SORT_KEYS[sort_by], reverse=sort_order == "desc")
    summaries = []
    for article in articles:
        if len(summaries) >= limit:
            break
        try:
            summaries.append(article_summary(article, index, locale))
        except CyclicCategoryGraph as e:
            logger.error(f"[Conteudo] Artigo {article.id} ignorado: {e.message}")
    return summaries
