# sistemas/conteudo/router.py
"""
Router do sistema de Conteúdo.

Endpoints para:
- Categorias (lista plana e resolução hierárquica por caminho de slugs)
- Artigos (listagem e detalhe)
- Menu do site
- Resolução de rotas e troca de idioma (usados pelo roteador de páginas)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import (
    Locale,
    build_menu,
    resolve_route,
    split_locale_prefix,
    split_path,
    translate_path,
)
from sistemas.conteudo.dependencies import get_locale, get_snapshot_service
from sistemas.conteudo.schemas import (
    ArticleDetailResponse,
    ArticleSummary,
    CategoryDetailResponse,
    CategoryResponse,
    MenuResponse,
    RouteResolveResponse,
    RouteTranslateResponse,
)
from sistemas.conteudo.services import (
    article_detail,
    article_lookup_for,
    category_detail,
    list_articles,
    list_categories,
    route_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Conteúdo"])

CONTENT_CACHE_CONTROL = "public, max-age=3600"


# ==========================================
# Categorias
# ==========================================

@router.get("/categories", response_model=List[CategoryResponse])
def listar_categorias(
    response: Response,
    locale: Locale = Depends(get_locale),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """Lista plana de categorias com slugs e caminhos localizados"""
    index = snapshots.categories(locale)
    response.headers["Cache-Control"] = CONTENT_CACHE_CONTROL
    return list_categories(index, locale)


@router.get("/categories/{slug_path:path}", response_model=CategoryDetailResponse)
def obter_categoria(
    slug_path: str,
    response: Response,
    locale: Locale = Depends(get_locale),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """
    Resolve uma categoria pelo caminho de slugs ("seguros/seguros-para-motoristas").

    Um único segmento que não casa com uma raiz ainda é procurado em
    qualquer nível (links antigos por slug).
    """
    index = snapshots.categories(locale)
    segments = split_path(slug_path)

    category = index.resolve_by_slug_path(segments, locale)
    if category is None and len(segments) == 1:
        category = index.find_by_slug(segments[0], locale)
    if category is None:
        raise HTTPException(status_code=404, detail="Categoria não encontrada")

    response.headers["Cache-Control"] = CONTENT_CACHE_CONTROL
    return category_detail(category, index, snapshots.articles(locale), locale)


# ==========================================
# Artigos
# ==========================================

@router.get("/articles", response_model=List[ArticleSummary])
def listar_artigos(
    response: Response,
    locale: Locale = Depends(get_locale),
    category: Optional[str] = Query(None, description="Slug da categoria (inclui subcategorias)"),
    limit: int = Query(20, ge=1, le=100),
    sort_by: str = Query("date", alias="sortBy", pattern="^(date|title)$"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """Artigos visíveis no locale (padrão: mais recentes primeiro)"""
    index = snapshots.categories(locale)
    articles = list_articles(
        snapshots.articles(locale), index, locale, category, limit,
        sort_by=sort_by, sort_order=sort_order,
    )
    if articles is None:
        raise HTTPException(status_code=404, detail="Categoria não encontrada")

    response.headers["Cache-Control"] = CONTENT_CACHE_CONTROL
    return articles


@router.get("/articles/{slug}", response_model=ArticleDetailResponse)
def obter_artigo(
    slug: str,
    response: Response,
    locale: Locale = Depends(get_locale),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """Detalhe do artigo pelo slug localizado (aceita o slug do outro idioma)"""
    article = snapshots.articles(locale).find_by_slug(slug, locale)
    if article is None:
        raise HTTPException(status_code=404, detail="Artigo não encontrado")

    response.headers["Cache-Control"] = CONTENT_CACHE_CONTROL
    return article_detail(article, snapshots.categories(locale), locale)


# ==========================================
# Menu
# ==========================================

@router.get("/menu", response_model=MenuResponse)
def obter_menu(
    response: Response,
    locale: Locale = Depends(get_locale),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """Estrutura do menu (navbar, artigos de menu e rodapé)"""
    menu = build_menu(snapshots.categories(locale), locale, snapshots.articles(locale))
    response.headers["Cache-Control"] = CONTENT_CACHE_CONTROL
    return menu


# ==========================================
# Rotas
# ==========================================

@router.get("/routes/resolve", response_model=RouteResolveResponse)
def resolver_rota(
    path: str = Query(..., description="Caminho do site, ex: /pt-BR/seguros/seguro-para-uber"),
    locale: Optional[str] = Query(None, description="Usado quando o caminho não tem prefixo de locale"),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """
    Resolve um caminho para categoria ou artigo.

    404 quando nada casa; redirect=True quando o caminho pedido não é o canônico.
    """
    prefix_locale, segments = split_locale_prefix(path)
    resolved_locale = prefix_locale or (Locale.parse(locale) if locale else Locale.PT_BR)

    index = snapshots.categories(resolved_locale)
    match = resolve_route(segments, resolved_locale, index, article_lookup_for(snapshots))
    if not match.found:
        raise HTTPException(status_code=404, detail="Rota não encontrada")

    return route_response(match, index)


@router.get("/routes/translate", response_model=RouteTranslateResponse)
def traduzir_rota(
    path: str = Query(..., description="Caminho atual"),
    target: str = Query(..., description="Locale de destino"),
    source: Optional[str] = Query(None, description="Locale atual (senão vem do prefixo do caminho)"),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
):
    """Caminho equivalente no outro idioma (troca de idioma no site)"""
    target_locale = Locale.parse(target)
    source_locale = Locale.parse(source) if source else None

    translated = translate_path(
        path,
        source_locale,
        target_locale,
        snapshots.categories(target_locale),
        article_lookup_for(snapshots),
    )

    return RouteTranslateResponse(
        path=translated,
        source_locale=(source_locale or split_locale_prefix(path)[0] or target_locale).value,
        target_locale=target_locale.value,
    )
