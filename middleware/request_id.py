# middleware/request_id.py
"""
Middleware que associa um Request ID a cada requisição da API de conteúdo.

- Aceita um ID vindo do frontend (header X-Request-ID) ou gera um UUID
- Guarda em request.state e num ContextVar, lido pelo logging estruturado
- Devolve o ID no header X-Request-ID da resposta

Uso em outros módulos:
    from middleware.request_id import get_request_id
"""

import uuid
import logging
from contextvars import ContextVar
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = logging.getLogger(__name__)


def get_request_id() -> Optional[str]:
    """
    Retorna o Request ID da requisição atual.

    Retorna None se chamado fora do contexto de uma requisição
    (ex: renderização do sitemap em um script).
    """
    return _request_id_ctx.get()


def generate_request_id() -> str:
    """Gera um novo Request ID (UUID v4)."""
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware FastAPI para gerenciamento de Request ID.

    Uso:
        app.add_middleware(RequestIDMiddleware)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER)
        request_id = incoming[:MAX_REQUEST_ID_LENGTH] if incoming else generate_request_id()

        request.state.request_id = request_id
        token = _request_id_ctx.set(request_id)

        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            # Deixa a exceção propagar para os handlers de erro
            logger.error(f"[{request_id}] Erro durante requisição {request.url.path}: {e}")
            raise

        finally:
            _request_id_ctx.reset(token)
