# services/snapshot_service.py
"""
Snapshots de categorias e artigos com cache por locale.

Leitura com cache (read-through) sobre uma ContentSource:
- categories(locale) -> CategoryIndex   (TTL padrão 5 min)
- articles(locale)   -> ArticleCatalog  (TTL padrão 1 h)

Se a fonte falhar, o último snapshot válido daquela chave é devolvido;
sem nenhum snapshot anterior, devolve vazio. A falha é logada e nunca
propagada: o site mostra menos conteúdo, mas não cai.
"""

import logging
from typing import Any, Callable, Dict, Hashable, Optional

from sqlalchemy.exc import SQLAlchemyError

from services.content_source import ContentSource
from services.taxonomia import ArticleCatalog, CategoryIndex, Locale, TaxonomiaError
from utils.cache import TTLCache

logger = logging.getLogger(__name__)

ALL_LOCALES_KEY = "all"

# Erros tratados como falha da fonte (registros malformados incluídos)
SOURCE_ERRORS = (TaxonomiaError, SQLAlchemyError, KeyError, TypeError, ValueError)


class TaxonomySnapshotService:
    """Dono do cache de snapshots; uma instância por aplicação."""

    def __init__(
        self,
        source: ContentSource,
        cache_ttl: float = 300,
        article_ttl: float = 3600,
        max_size: int = 32,
        clock: Optional[Callable[[], float]] = None
    ):
        self.source = source
        self.cache_ttl = cache_ttl
        self.article_ttl = article_ttl
        cache_kwargs = {"default_ttl": cache_ttl, "max_size": max_size}
        if clock is not None:
            cache_kwargs["clock"] = clock
        self._cache = TTLCache(**cache_kwargs)
        self._last_good: Dict[Hashable, Any] = {}

    @staticmethod
    def _locale_key(locale: Optional[Locale]) -> str:
        return locale.value if locale is not None else ALL_LOCALES_KEY

    def _load(self, key: Hashable, ttl: float, loader: Callable[[], Any], empty: Callable[[], Any]) -> Any:
        found, value = self._cache.get(key)
        if found:
            return value

        try:
            value = loader()
        except SOURCE_ERRORS as e:
            stale = self._last_good.get(key)
            if stale is not None:
                logger.warning(f"[Snapshot] Falha ao carregar {key}, usando snapshot anterior: {e}")
                return stale
            logger.error(f"[Snapshot] Falha ao carregar {key} sem snapshot anterior: {e}")
            return empty()

        self._cache.put(key, value, ttl=ttl)
        self._last_good[key] = value
        logger.debug(f"[Snapshot] {key} carregado ({len(value)} registros)")
        return value

    def categories(self, locale: Optional[Locale] = None) -> CategoryIndex:
        """Índice de categorias (o mesmo conteúdo serve a qualquer locale)."""
        key = ("categories", self._locale_key(locale))
        return self._load(
            key,
            self.cache_ttl,
            lambda: CategoryIndex(self.source.load_categories()),
            CategoryIndex,
        )

    def articles(self, locale: Optional[Locale] = None) -> ArticleCatalog:
        """
        Artigos visíveis no locale; locale None -> todos (sitemap).
        """
        key = ("articles", self._locale_key(locale))

        def _loader() -> ArticleCatalog:
            catalog = ArticleCatalog(self.source.load_articles())
            if locale is None:
                return catalog
            return ArticleCatalog(catalog.for_locale(locale))

        return self._load(key, self.article_ttl, _loader, ArticleCatalog)

    def invalidate(self) -> int:
        """Descarta os snapshots em cache (o último válido continua como reserva)."""
        removed = self._cache.invalidate_all()
        logger.info(f"[Snapshot] Cache invalidado ({removed} entradas)")
        return removed

    def get_stats(self) -> Dict[str, Any]:
        return self._cache.get_stats()
