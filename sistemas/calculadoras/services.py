# sistemas/calculadoras/services.py
"""
Fórmulas das calculadoras para motoristas de aplicativo.

- calcular_ponto_equilibrio: quanto faturar para cobrir custos fixos e variáveis
- simular_orcamento: orçamento mensal (veículo, pessoal, trabalho) e faturamento mínimo
- comparar_combustivel: etanol x gasolina

Todos os valores monetários são mensais; taxas da plataforma em percentual (0-100).
As constantes por km dependem do locale (R$ no Brasil, US$ nos EUA).
"""

import math
from typing import Any, Dict, List

from services.taxonomia import Locale

# Desgaste por km (manutenção, pneus, depreciação)
DESGASTE_POR_KM = {Locale.PT_BR: 0.18, Locale.EN_US: 0.12}

# Manutenção por km usada no simulador de orçamento
MANUTENCAO_POR_KM = {Locale.PT_BR: 0.15, Locale.EN_US: 0.10}

CORRIDAS_POR_HORA = 2  # corrida média de 30 minutos
MARGEM_SEGURANCA = 0.20
FATOR_RECOMENDADO = 1.2
DIAS_PADRAO = 30
CONSUMO_ETANOL_RELATIVO = 0.7  # etanol rende ~70% da gasolina

ROTULOS_ORCAMENTO = {
    "combustivel": {Locale.PT_BR: "Combustível", Locale.EN_US: "Fuel"},
    "moradia": {Locale.PT_BR: "Moradia", Locale.EN_US: "Housing"},
    "alimentacao": {Locale.PT_BR: "Alimentação", Locale.EN_US: "Food"},
    "saude": {Locale.PT_BR: "Saúde", Locale.EN_US: "Health"},
    "veiculo": {Locale.PT_BR: "Veículo (fixos)", Locale.EN_US: "Vehicle (fixed)"},
    "manutencao": {Locale.PT_BR: "Manutenção", Locale.EN_US: "Maintenance"},
    "trabalho": {Locale.PT_BR: "Celular/Apps", Locale.EN_US: "Phone/Apps"},
    "contas": {Locale.PT_BR: "Contas", Locale.EN_US: "Utilities"},
}


def _validar_nao_negativos(**valores: float) -> None:
    negativos = [nome for nome, valor in valores.items() if valor is not None and valor < 0]
    if negativos:
        raise ValueError(f"Valores negativos não são permitidos: {', '.join(sorted(negativos))}")


def _fracao_taxa(taxa_plataforma: float) -> float:
    """Converte percentual em fração; 100% ou mais torna o cálculo impossível."""
    if taxa_plataforma >= 100:
        raise ValueError("A taxa da plataforma deve ser menor que 100%")
    return taxa_plataforma / 100


# ==========================================
# Ponto de equilíbrio
# ==========================================

def calcular_ponto_equilibrio(
    *,
    ipva_anual: float = 0,
    licenciamento_anual: float = 0,
    seguro_carro: float = 0,
    plano_saude: float = 0,
    celular_dados: float = 0,
    km_mensal: float = 0,
    combustivel_por_km: float = 0,
    tarifa_media: float = 0,
    distancia_media: float = 0,
    taxa_plataforma: float = 0,
    horas_por_dia: float = 0,
    locale: Locale = Locale.PT_BR
) -> Dict[str, Any]:
    """
    Ponto de equilíbrio mensal.

    Corridas necessárias = custos fixos / lucro por corrida (arredondado
    para cima). Lucro por corrida <= 0 -> 0 corridas e faturamento de
    referência igual ao dobro dos custos.
    """
    _validar_nao_negativos(
        ipva_anual=ipva_anual, licenciamento_anual=licenciamento_anual,
        seguro_carro=seguro_carro, plano_saude=plano_saude, celular_dados=celular_dados,
        km_mensal=km_mensal, combustivel_por_km=combustivel_por_km, tarifa_media=tarifa_media,
        distancia_media=distancia_media, taxa_plataforma=taxa_plataforma, horas_por_dia=horas_por_dia,
    )
    taxa = _fracao_taxa(taxa_plataforma)

    custos_fixos = ipva_anual / 12 + licenciamento_anual / 12 + seguro_carro + plano_saude + celular_dados

    variavel_por_km = combustivel_por_km + DESGASTE_POR_KM[locale]
    variavel_mensal = variavel_por_km * km_mensal
    custos_totais = custos_fixos + variavel_mensal

    tarifa_liquida = tarifa_media * (1 - taxa)
    lucro_por_corrida = tarifa_liquida - variavel_por_km * distancia_media

    if lucro_por_corrida > 0:
        corridas = math.ceil(custos_fixos / lucro_por_corrida)
        faturamento = custos_totais / (1 - taxa) + variavel_mensal * taxa / (1 - taxa)
    else:
        corridas = 0
        faturamento = custos_totais * 2

    corridas_por_dia = CORRIDAS_POR_HORA * horas_por_dia
    dias = math.ceil(corridas / corridas_por_dia) if corridas_por_dia > 0 else DIAS_PADRAO
    horas = math.ceil(corridas / CORRIDAS_POR_HORA)

    margem = faturamento * MARGEM_SEGURANCA

    return {
        "custos_fixos": custos_fixos,
        "custo_variavel_por_km": variavel_por_km,
        "custos_variaveis_mensais": variavel_mensal,
        "lucro_por_corrida": lucro_por_corrida,
        "faturamento_equilibrio": faturamento,
        "corridas_equilibrio": corridas,
        "dias_equilibrio": dias,
        "horas_equilibrio": horas,
        "margem_seguranca": margem,
        "faturamento_recomendado": faturamento + margem,
    }


# ==========================================
# Simulador de orçamento
# ==========================================

def simular_orcamento(
    *,
    ipva_anual: float = 0,
    licenciamento_anual: float = 0,
    seguro_carro: float = 0,
    plano_saude: float = 0,
    aluguel: float = 0,
    contas: float = 0,
    alimentacao: float = 0,
    celular_dados: float = 0,
    assinaturas_apps: float = 0,
    km_mensal: float = 0,
    consumo_km_litro: float = 0,
    preco_combustivel: float = 0,
    faturamento_diario: float = 0,
    taxa_plataforma: float = 0,
    locale: Locale = Locale.PT_BR
) -> Dict[str, Any]:
    """Orçamento mensal do motorista e faturamento mínimo para fechar as contas."""
    _validar_nao_negativos(
        ipva_anual=ipva_anual, licenciamento_anual=licenciamento_anual, seguro_carro=seguro_carro,
        plano_saude=plano_saude, aluguel=aluguel, contas=contas, alimentacao=alimentacao,
        celular_dados=celular_dados, assinaturas_apps=assinaturas_apps, km_mensal=km_mensal,
        consumo_km_litro=consumo_km_litro, preco_combustivel=preco_combustivel,
        faturamento_diario=faturamento_diario, taxa_plataforma=taxa_plataforma,
    )
    taxa = _fracao_taxa(taxa_plataforma)

    fixo_veiculo = ipva_anual / 12 + licenciamento_anual / 12 + seguro_carro
    fixo_pessoal = plano_saude + aluguel + contas + alimentacao
    fixo_trabalho = celular_dados + assinaturas_apps
    total_fixo = fixo_veiculo + fixo_pessoal + fixo_trabalho

    combustivel = (km_mensal / consumo_km_litro) * preco_combustivel if consumo_km_litro > 0 else 0
    manutencao = km_mensal * MANUTENCAO_POR_KM[locale]
    total_variavel = combustivel + manutencao

    total_mensal = total_fixo + total_variavel

    faturamento_minimo = total_mensal / (1 - taxa)
    liquido_diario = faturamento_diario * (1 - taxa)
    dias = math.ceil(total_mensal / liquido_diario) if liquido_diario > 0 else DIAS_PADRAO

    valores = {
        "combustivel": combustivel,
        "moradia": aluguel,
        "alimentacao": alimentacao,
        "saude": plano_saude,
        "veiculo": fixo_veiculo,
        "manutencao": manutencao,
        "trabalho": fixo_trabalho,
        "contas": contas,
    }
    # sorted é estável: empates mantêm a ordem acima
    detalhamento: List[Dict[str, Any]] = sorted(
        (
            {"categoria": chave, "rotulo": ROTULOS_ORCAMENTO[chave][locale], "valor": valor}
            for chave, valor in valores.items()
            if valor > 0
        ),
        key=lambda item: item["valor"],
        reverse=True,
    )

    return {
        "custos_fixos": {
            "veiculo": fixo_veiculo,
            "pessoal": fixo_pessoal,
            "trabalho": fixo_trabalho,
            "total": total_fixo,
        },
        "custos_variaveis": {
            "combustivel": combustivel,
            "manutencao": manutencao,
            "total": total_variavel,
        },
        "custo_total_mensal": total_mensal,
        "faturamento_minimo": faturamento_minimo,
        "faturamento_recomendado": faturamento_minimo * FATOR_RECOMENDADO,
        "dias_necessarios": dias,
        "detalhamento": detalhamento,
    }


# ==========================================
# Etanol x gasolina
# ==========================================

def comparar_combustivel(
    *,
    km_mensal: float = 0,
    consumo_gasolina: float = 0,
    preco_gasolina: float = 0,
    preco_etanol: float = 0,
    consumo_etanol: float = 0
) -> Dict[str, Any]:
    """
    Compara o custo mensal com etanol e gasolina.

    Consumo do etanol não informado (0) -> 70% do consumo da gasolina.
    Etanol é recomendado quando tem preço e a razão de preços não passa da
    razão de consumos, ou quando simplesmente sai mais barato no mês.
    """
    _validar_nao_negativos(
        km_mensal=km_mensal, consumo_gasolina=consumo_gasolina, preco_gasolina=preco_gasolina,
        preco_etanol=preco_etanol, consumo_etanol=consumo_etanol,
    )
    consumo_etanol = consumo_etanol or consumo_gasolina * CONSUMO_ETANOL_RELATIVO

    litros_gasolina = km_mensal / consumo_gasolina if consumo_gasolina > 0 else 0
    custo_gasolina = litros_gasolina * preco_gasolina

    litros_etanol = km_mensal / consumo_etanol if consumo_etanol > 0 else 0
    custo_etanol = litros_etanol * preco_etanol

    razao_precos = preco_etanol / preco_gasolina if preco_gasolina > 0 else math.inf
    razao_consumo = consumo_etanol / consumo_gasolina if consumo_gasolina > 0 else 0

    etanol_recomendado = preco_etanol > 0 and (
        razao_precos <= razao_consumo or custo_etanol < custo_gasolina
    )

    melhor, pior = (custo_etanol, custo_gasolina) if etanol_recomendado else (custo_gasolina, custo_etanol)
    economia = pior - melhor
    economia_percentual = economia / pior * 100 if pior > 0 else 0

    return {
        "etanol_recomendado": etanol_recomendado,
        "custo_mensal": melhor,
        "custo_diario": melhor / DIAS_PADRAO,
        "custo_por_km": melhor / km_mensal if km_mensal > 0 else 0,
        "litros_mes": litros_etanol if etanol_recomendado else litros_gasolina,
        "custo_gasolina": custo_gasolina,
        "custo_etanol": custo_etanol,
        "economia": max(economia, 0),
        "economia_percentual": max(economia_percentual, 0),
    }
