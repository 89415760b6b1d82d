# services/taxonomia/exceptions.py
"""
Exceções da taxonomia de conteúdo (categorias, artigos e locales).

"Não encontrado" não é exceção aqui: o resolvedor devolve None e quem
atende a requisição decide pelo 404.
"""


class TaxonomiaError(Exception):
    """Exceção base para erros da taxonomia."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or "TAXONOMIA_ERROR"
        self.details = details or {}


class CyclicCategoryGraph(TaxonomiaError):
    """O grafo de parent_id contém um ciclo (violação de integridade)."""

    def __init__(self, cycle_ids: list):
        super().__init__(
            "Ciclo detectado na hierarquia de categorias: " + " -> ".join(str(i) for i in cycle_ids),
            "CYCLIC_CATEGORY_GRAPH",
            {"cycle": list(cycle_ids)}
        )
        self.cycle_ids = list(cycle_ids)


class LocaleInvalidoError(TaxonomiaError):
    """Locale fora da enumeração suportada."""

    def __init__(self, value):
        super().__init__(
            f"Locale não suportado: {value!r}",
            "LOCALE_INVALIDO",
            {"locale": value}
        )


class ContentSourceError(TaxonomiaError):
    """Falha ao carregar o snapshot da fonte de conteúdo (API ou banco)."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "CONTENT_SOURCE_ERROR", details)
