# services/taxonomia/routing.py
"""
Resolução de rotas do site: segmentos de URL -> categoria ou artigo.

Ordem de tentativa (mesma do roteador de páginas):
1. Caminho completo contra a árvore de categorias
2. Último segmento como slug de artigo
3. Não encontrado (o roteador responde 404)

Para artigos, o caminho canônico é a cadeia de categorias no locale
seguida do slug localizado; sem categoria, fica em /articles/<slug>.
Quando o caminho pedido difere do canônico, redirect=True.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from .index import CategoryIndex
from .locales import Locale, join_path
from .models import ArticleRecord, CategoryRecord

logger = logging.getLogger(__name__)

ARTICLES_SEGMENT = "articles"

ArticleLookup = Callable[[str, Locale], Optional[ArticleRecord]]


class RouteKind(str, Enum):
    CATEGORY = "category"
    ARTICLE = "article"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RouteMatch:
    """Resultado da resolução de uma rota."""

    kind: RouteKind
    locale: Locale
    category: Optional[CategoryRecord] = None
    article: Optional[ArticleRecord] = None
    breadcrumbs: tuple = ()
    canonical_path: Optional[str] = None
    redirect: bool = False

    @property
    def found(self) -> bool:
        return self.kind is not RouteKind.NOT_FOUND


def article_path_segments(
    article: ArticleRecord,
    index: CategoryIndex,
    locale: Locale
) -> List[str]:
    """
    Segmentos do caminho de um artigo no locale (sem o prefixo de locale).

    Categoria ausente ou fora do snapshot -> ["articles", <slug>].
    """
    category_path = index.build_path(article.category_id, locale) if article.category_id else []
    if not category_path:
        category_path = [ARTICLES_SEGMENT]
    return category_path + [article.localized_slug(locale)]


def article_url(article: ArticleRecord, index: CategoryIndex, locale: Locale) -> str:
    return join_path(locale, article_path_segments(article, index, locale))


def resolve_route(
    segments: Sequence[str],
    locale: Locale,
    index: CategoryIndex,
    article_lookup: ArticleLookup
) -> RouteMatch:
    """
    Resolve os segmentos (após o prefixo de locale) para categoria ou artigo.

    Nunca lança para "não encontrado": devolve RouteKind.NOT_FOUND.
    """
    segments = [s for s in segments if s]
    if not segments:
        return RouteMatch(kind=RouteKind.NOT_FOUND, locale=locale)

    category = index.resolve_by_slug_path(segments, locale)
    if category is not None:
        return RouteMatch(
            kind=RouteKind.CATEGORY,
            locale=locale,
            category=category,
            breadcrumbs=tuple(index.ancestors(category)),
            canonical_path=join_path(locale, segments),
        )

    try:
        article = article_lookup(segments[-1], locale)
    except Exception as e:
        logger.warning(f"[Taxonomia] Falha ao buscar artigo '{segments[-1]}': {e}")
        article = None

    if article is None:
        return RouteMatch(kind=RouteKind.NOT_FOUND, locale=locale)

    canonical = article_path_segments(article, index, locale)
    category = index.get(article.category_id) if article.category_id else None

    return RouteMatch(
        kind=RouteKind.ARTICLE,
        locale=locale,
        category=category,
        article=article,
        breadcrumbs=tuple(index.ancestors(category)) if category else (),
        canonical_path=join_path(locale, canonical),
        redirect=list(segments) != canonical,
    )
