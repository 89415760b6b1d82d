# sistemas/calculadoras/router.py
"""
Router das Calculadoras.

Entradas inválidas (negativas, taxa >= 100%) respondem 422.
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from services.taxonomia import Locale
from sistemas.calculadoras.schemas import (
    CombustivelRequest,
    CombustivelResponse,
    OrcamentoRequest,
    OrcamentoResponse,
    PontoEquilibrioRequest,
    PontoEquilibrioResponse,
)
from sistemas.calculadoras.services import (
    calcular_ponto_equilibrio,
    comparar_combustivel,
    simular_orcamento,
)
from utils.rate_limit import RATE_LIMIT_CALCULATOR, limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/calculadoras", tags=["Calculadoras"])


@router.post("/ponto-equilibrio", response_model=PontoEquilibrioResponse)
@limiter.limit(RATE_LIMIT_CALCULATOR)
def ponto_equilibrio(request: Request, req: PontoEquilibrioRequest):
    """Quanto faturar por mês para cobrir os custos"""
    dados = req.model_dump(exclude={"locale"})
    try:
        return calcular_ponto_equilibrio(locale=Locale.parse(req.locale), **dados)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/orcamento", response_model=OrcamentoResponse)
@limiter.limit(RATE_LIMIT_CALCULATOR)
def orcamento(request: Request, req: OrcamentoRequest):
    """Simulador de orçamento mensal do motorista"""
    dados = req.model_dump(exclude={"locale"})
    try:
        return simular_orcamento(locale=Locale.parse(req.locale), **dados)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/combustivel", response_model=CombustivelResponse)
@limiter.limit(RATE_LIMIT_CALCULATOR)
def combustivel(request: Request, req: CombustivelRequest):
    """Etanol ou gasolina?"""
    try:
        return comparar_combustivel(**req.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
