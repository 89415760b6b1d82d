# sistemas/calculadoras/schemas.py
"""
Schemas Pydantic das calculadoras
"""

from typing import List

from pydantic import BaseModel, Field

from services.taxonomia import DEFAULT_LOCALE


# ==========================================
# Requests
# ==========================================

class CalculadoraBase(BaseModel):
    locale: str = Field(DEFAULT_LOCALE.value, description="pt-BR ou en-US (define constantes por km)")


class PontoEquilibrioRequest(CalculadoraBase):
    ipva_anual: float = Field(0, ge=0)
    licenciamento_anual: float = Field(0, ge=0)
    seguro_carro: float = Field(0, ge=0, description="Mensal")
    plano_saude: float = Field(0, ge=0, description="Mensal")
    celular_dados: float = Field(0, ge=0, description="Mensal")
    km_mensal: float = Field(0, ge=0)
    combustivel_por_km: float = Field(0, ge=0)
    tarifa_media: float = Field(0, ge=0)
    distancia_media: float = Field(0, ge=0, description="Km por corrida")
    taxa_plataforma: float = Field(0, ge=0, lt=100, description="Percentual")
    horas_por_dia: float = Field(0, ge=0, le=24)


class OrcamentoRequest(CalculadoraBase):
    ipva_anual: float = Field(0, ge=0)
    licenciamento_anual: float = Field(0, ge=0)
    seguro_carro: float = Field(0, ge=0)
    plano_saude: float = Field(0, ge=0)
    aluguel: float = Field(0, ge=0)
    contas: float = Field(0, ge=0)
    alimentacao: float = Field(0, ge=0)
    celular_dados: float = Field(0, ge=0)
    assinaturas_apps: float = Field(0, ge=0)
    km_mensal: float = Field(0, ge=0)
    consumo_km_litro: float = Field(0, ge=0)
    preco_combustivel: float = Field(0, ge=0)
    faturamento_diario: float = Field(0, ge=0)
    taxa_plataforma: float = Field(0, ge=0, lt=100)


class CombustivelRequest(BaseModel):
    km_mensal: float = Field(0, ge=0)
    consumo_gasolina: float = Field(0, ge=0, description="Km por litro")
    preco_gasolina: float = Field(0, ge=0)
    preco_etanol: float = Field(0, ge=0)
    consumo_etanol: float = Field(0, ge=0, description="0 = 70% do consumo da gasolina")


# ==========================================
# Responses
# ==========================================

class PontoEquilibrioResponse(BaseModel):
    custos_fixos: float
    custo_variavel_por_km: float
    custos_variaveis_mensais: float
    lucro_por_corrida: float
    faturamento_equilibrio: float
    corridas_equilibrio: int
    dias_equilibrio: int
    horas_equilibrio: int
    margem_seguranca: float
    faturamento_recomendado: float


class CustosFixos(BaseModel):
    veiculo: float
    pessoal: float
    trabalho: float
    total: float


class CustosVariaveis(BaseModel):
    combustivel: float
    manutencao: float
    total: float


class ItemDetalhamento(BaseModel):
    categoria: str
    rotulo: str
    valor: float


class OrcamentoResponse(BaseModel):
    custos_fixos: CustosFixos
    custos_variaveis: CustosVariaveis
    custo_total_mensal: float
    faturamento_minimo: float
    faturamento_recomendado: float
    dias_necessarios: int
    detalhamento: List[ItemDetalhamento]


class CombustivelResponse(BaseModel):
    etanol_recomendado: bool
    custo_mensal: float
    custo_diario: float
    custo_por_km: float
    litros_mes: float
    custo_gasolina: float
    custo_etanol: float
    economia: float
    economia_percentual: float
