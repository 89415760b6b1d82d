# utils/rate_limit.py
# -*- coding: utf-8 -*-
"""
Rate Limiting da API pública do GigSafeHub

Os endpoints de leitura são cacheados (Cache-Control) e ficam sem limite;
as calculadoras fazem processamento por requisição e são limitadas por IP.

Uso:
    from utils.rate_limit import limiter, rate_limit_exceeded_handler

    # No main.py
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Nos routers
    @router.post("/endpoint")
    @limiter.limit(RATE_LIMIT_CALCULATOR)
    def endpoint(request: Request):
        ...
"""

import os
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

logger = logging.getLogger(__name__)


# ==================================================
# CONFIGURAÇÃO
# ==================================================

def get_real_ip(request: Request) -> str:
    """
    Obtém IP real do cliente, considerando headers de proxy.

    Prioridade:
    1. X-Forwarded-For (primeiro IP da lista)
    2. X-Real-IP
    3. IP direto da conexão
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    return get_remote_address(request)


RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
RATE_LIMIT_DEFAULT = os.getenv("RATE_LIMIT_DEFAULT", "100/minute")
RATE_LIMIT_CALCULATOR = os.getenv("RATE_LIMIT_CALCULATOR", "30/minute")

# Storage: memória por padrão, Redis em produção
RATE_LIMIT_STORAGE = os.getenv("RATE_LIMIT_STORAGE", "memory://")


# ==================================================
# LIMITER INSTANCE
# ==================================================

limiter = Limiter(
    key_func=get_real_ip,
    default_limits=[RATE_LIMIT_DEFAULT],
    enabled=RATE_LIMIT_ENABLED,
    storage_uri=RATE_LIMIT_STORAGE,
)


# ==================================================
# HANDLERS
# ==================================================

async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    """Resposta 429 em JSON, com Retry-After."""
    exc_detail = getattr(exc, "detail", str(exc))
    logger.warning(f"Rate limit excedido: {get_real_ip(request)} - {request.url.path} - {exc_detail}")

    retry_after = "60"
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Limite de requisições excedido. Tente novamente em alguns minutos.",
            "error": "rate_limit_exceeded",
            "retry_after": retry_after
        },
        headers={"Retry-After": retry_after}
    )
