# sistemas/conteudo/dependencies.py
"""
Dependencies do sistema de Conteúdo.

- get_snapshot_service: instância única do TaxonomySnapshotService
  (API de conteúdo se CONTENT_API_URL estiver definida, senão o banco local)
- get_locale: normaliza o parâmetro ?locale= (inválido -> 400)
"""

import logging
import threading
from typing import Optional

from fastapi import Query

from config import (
    ARTICLES_CACHE_TTL,
    CATEGORIES_CACHE_TTL,
    CONTENT_API_TIMEOUT,
    CONTENT_API_URL,
    SNAPSHOT_CACHE_MAX_SIZE,
)
from database.connection import SessionLocal
from services.content_source import DatabaseContentSource, HttpContentSource
from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import DEFAULT_LOCALE, Locale

logger = logging.getLogger(__name__)

_snapshot_service: Optional[TaxonomySnapshotService] = None
_snapshot_lock = threading.Lock()


def build_snapshot_service() -> TaxonomySnapshotService:
    if CONTENT_API_URL:
        logger.info(f"[Conteudo] Snapshot lido da API de conteúdo: {CONTENT_API_URL}")
        source = HttpContentSource(CONTENT_API_URL, timeout=CONTENT_API_TIMEOUT)
    else:
        logger.info("[Conteudo] Snapshot lido do banco local")
        source = DatabaseContentSource(SessionLocal)

    return TaxonomySnapshotService(
        source,
        cache_ttl=CATEGORIES_CACHE_TTL,
        article_ttl=ARTICLES_CACHE_TTL,
        max_size=SNAPSHOT_CACHE_MAX_SIZE,
    )


def get_snapshot_service() -> TaxonomySnapshotService:
    """
    Dependency que fornece o serviço de snapshots.
    Uso: snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
    """
    global _snapshot_service
    if _snapshot_service is None:
        with _snapshot_lock:
            if _snapshot_service is None:
                _snapshot_service = build_snapshot_service()
    return _snapshot_service


def get_locale(
    locale: str = Query(DEFAULT_LOCALE.value, description="pt-BR ou en-US")
) -> Locale:
    """Raises LocaleInvalidoError (tratado em main.py como 400)."""
    return Locale.parse(locale)
