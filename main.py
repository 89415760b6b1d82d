# main.py
"""
GigSafeHub - API de conteúdo bilíngue (pt-BR / en-US)

Unifica os sistemas:
- Conteúdo (categorias, artigos, menu, resolução de rotas)
- SEO (sitemap, robots, meta tags)
- Calculadoras para motoristas de aplicativo
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import CORS_ORIGINS, ENV, GIT_COMMIT
from database.connection import get_db
from database.init_db import init_database
from middleware.request_id import RequestIDMiddleware, get_request_id
from services.taxonomia import CyclicCategoryGraph, LocaleInvalidoError, TaxonomiaError
from utils.logging_config import setup_logging
from utils.rate_limit import limiter, rate_limit_exceeded_handler
from utils.timezone import now_utc, to_iso

# Import dos sistemas
from sistemas.calculadoras.router import router as calculadoras_router
from sistemas.conteudo.router import router as conteudo_router
from sistemas.seo.router import router as seo_router

logger = logging.getLogger(__name__)

START_TIME = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle events da aplicação.
    Executa na inicialização e no shutdown.
    """
    # Startup
    setup_logging()
    logger.info(f"Iniciando GigSafeHub API (env={ENV}, commit={GIT_COMMIT})")
    init_database()
    yield
    # Shutdown
    logger.info("Encerrando GigSafeHub API")


# Cria a aplicação FastAPI
app = FastAPI(
    title="GigSafeHub API",
    description="Conteúdo bilíngue, rotas localizadas, SEO e calculadoras para trabalhadores da economia gig",
    version="1.0.0",
    lifespan=lifespan
)

# Configuração de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request ID (registrado por último = executa primeiro)
app.add_middleware(RequestIDMiddleware)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


# ==================================================
# TRATAMENTO DE ERROS
# ==================================================

@app.exception_handler(TaxonomiaError)
async def taxonomia_error_handler(request: Request, exc: TaxonomiaError):
    """Erros de domínio: locale inválido -> 400; integridade da taxonomia -> 500."""
    if isinstance(exc, LocaleInvalidoError):
        status_code = 400
    else:
        status_code = 500
        if isinstance(exc, CyclicCategoryGraph):
            logger.error(f"[Taxonomia] {exc.message} ({request.url.path})")
        else:
            logger.error(f"[Taxonomia] {exc.code}: {exc.message} ({request.url.path})")

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "code": exc.code,
            "details": exc.details,
            "request_id": get_request_id(),
        }
    )


# ==================================================
# ROTAS DA API
# ==================================================

@app.get("/")
async def root():
    return {"service": "gigsafehub-api", "docs": "/docs"}


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check para monitoramento"""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Health check: banco indisponível: {e}")
        database = "error"

    return {
        "status": "ok" if database == "ok" else "degraded",
        "uptime": int(time.monotonic() - START_TIME),
        "timestamp": to_iso(now_utc()),
        "environment": ENV,
        "commit": GIT_COMMIT,
        "database": database,
    }


# ==================================================
# ROUTERS DOS SISTEMAS
# ==================================================

app.include_router(conteudo_router)
app.include_router(seo_router)
app.include_router(calculadoras_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=not ENV == "production")
