# sistemas/seo/router.py
"""
Router de SEO: /sitemap.xml, /robots.txt e /api/seo/meta
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import PlainTextResponse

from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import Locale
from sistemas.conteudo.dependencies import get_locale, get_snapshot_service
from sistemas.seo.services import buscar_meta, gerar_robots, gerar_sitemap

logger = logging.getLogger(__name__)

router = APIRouter(tags=["SEO"])

SITEMAP_CACHE_CONTROL = "public, max-age=3600"
ROBOTS_CACHE_CONTROL = "public, max-age=86400"


@router.get("/sitemap.xml")
def sitemap(snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)):
    """Sitemap XML (páginas estáticas, categorias e artigos indexáveis)"""
    xml = gerar_sitemap(snapshots)
    return Response(
        content=xml,
        media_type="application/xml",
        headers={"Cache-Control": SITEMAP_CACHE_CONTROL},
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    return PlainTextResponse(gerar_robots(), headers={"Cache-Control": ROBOTS_CACHE_CONTROL})


@router.get("/api/seo/meta")
def seo_meta(
    response: Response,
    type: str = Query(..., pattern="^(article|category)$", description="article ou category"),
    slug: str = Query(..., min_length=1),
    locale: Locale = Depends(get_locale),
    snapshots: TaxonomySnapshotService = Depends(get_snapshot_service)
) -> Dict[str, Any]:
    """Meta tags e dados estruturados (JSON-LD) de um artigo ou categoria"""
    meta = buscar_meta(snapshots, type, slug, locale)
    if meta is None:
        detail = "Artigo não encontrado" if type == "article" else "Categoria não encontrada"
        raise HTTPException(status_code=404, detail=detail)

    response.headers["Cache-Control"] = SITEMAP_CACHE_CONTROL
    return meta
