# utils/cache.py
# -*- coding: utf-8 -*-
"""
Cache em memória com TTL para o Portal GigSafeHub

Usado pelo serviço de snapshots da taxonomia para guardar, por locale,
o índice de categorias e o catálogo de artigos carregados da fonte de
conteúdo. Não há instâncias globais: cada serviço cria e possui o seu cache.

Uso:
    from utils.cache import TTLCache

    cache = TTLCache(default_ttl=300, max_size=32)
    cache.put("categorias:pt-BR", indice)

    found, indice = cache.get("categorias:pt-BR")
    if not found:
        ...
"""

import time
import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)


class TTLCache:
    """
    Cache em memória com TTL (Time-To-Live) e tamanho máximo.

    Thread-safe. Quando cheio, remove primeiro as entradas expiradas e,
    se ainda necessário, a entrada inserida há mais tempo (ordem de inserção).

    Attributes:
        default_ttl: Tempo de vida padrão dos itens em segundos
        max_size: Número máximo de itens no cache
    """

    def __init__(
        self,
        default_ttl: float = 300,
        max_size: int = 100,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Inicializa o cache.

        Args:
            default_ttl: TTL padrão em segundos (default: 5 minutos)
            max_size: Tamanho máximo do cache
            clock: Relógio monotônico (injetável nos testes)
        """
        if max_size < 1:
            raise ValueError("max_size deve ser >= 1")

        self._cache: Dict[Hashable, Dict[str, Any]] = {}
        self._lock = threading.RLock()
        self._clock = clock
        self.default_ttl = default_ttl
        self.max_size = max_size
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable) -> Tuple[bool, Any]:
        """
        Busca valor no cache.

        Returns:
            Tuple[found: bool, value: Any]
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return False, None

            if entry["expires"] <= self._clock():
                del self._cache[key]
                self._misses += 1
                return False, None

            self._hits += 1
            return True, entry["value"]

    def put(self, key: Hashable, value: Any, ttl: Optional[float] = None) -> None:
        """
        Armazena valor no cache.

        Args:
            key: Chave do cache
            value: Valor a armazenar
            ttl: TTL em segundos (usa default se não especificado)
        """
        now = self._clock()
        expires = now + (self.default_ttl if ttl is None else ttl)

        with self._lock:
            # Reinserção vai para o fim da ordem de inserção
            self._cache.pop(key, None)

            if len(self._cache) >= self.max_size:
                self._cleanup_expired()

            while len(self._cache) >= self.max_size:
                oldest_key = next(iter(self._cache))
                del self._cache[oldest_key]
                self._evictions += 1
                logger.debug(f"[TTLCache] Evicção por tamanho: {oldest_key}")

            self._cache[key] = {
                "value": value,
                "expires": expires,
                "created": now
            }

    def invalidate(self, key: Hashable) -> bool:
        """
        Remove uma entrada específica do cache.

        Returns:
            True se a chave existia e foi removida
        """
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                logger.debug(f"[TTLCache] Cache invalidado: {key}")
                return True
            return False

    def invalidate_all(self) -> int:
        """
        Limpa todo o cache.

        Returns:
            Número de entradas removidas
        """
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            logger.info(f"[TTLCache] Cache completamente invalidado: {count} itens")
            return count

    def _cleanup_expired(self) -> int:
        """Remove entradas expiradas. Deve ser chamado com lock."""
        now = self._clock()
        expired_keys = [k for k, v in self._cache.items() if v["expires"] <= now]
        for key in expired_keys:
            del self._cache[key]
        return len(expired_keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> Dict[str, Any]:
        """Retorna estatísticas do cache."""
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": f"{hit_rate:.1f}%",
                "default_ttl": self.default_ttl,
            }
