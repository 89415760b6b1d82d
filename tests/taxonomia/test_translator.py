# tests/taxonomia/test_translator.py
"""
Testes da troca de idioma (tradução de caminhos entre pt-BR e en-US).
"""

from services.taxonomia import CategoryIndex, CategoryRecord, Locale, translate_path


def _sem_artigos(slug, locale):
    return None


class TestExemploSeguroMotorista:

    def test_en_para_pt(self):
        index = CategoryIndex([
            CategoryRecord(id="a", slug="insurance"),
            CategoryRecord(
                id="b", slug="driver-insurance", slug_en="driver-insurance",
                slug_pt="seguro-motorista", parent_id="a",
            ),
        ])
        result = translate_path("/en-US/insurance/driver-insurance", Locale.EN_US, Locale.PT_BR, index, _sem_artigos)
        assert result == "/pt-BR/insurance/seguro-motorista"

    def test_pt_para_en(self, index, catalog):
        result = translate_path(
            "/pt-BR/insurance/seguro-motorista/seguro-uber", Locale.PT_BR, Locale.EN_US,
            index, catalog.find_by_slug,
        )
        assert result == "/en-US/insurance/driver-insurance/uber-insurance"


class TestArtigos:

    def test_artigo_usa_caminho_canonico_no_destino(self, index, catalog):
        result = translate_path(
            "/en-US/insurance/driver-insurance/uber-insurance/how-uber-insurance-works",
            Locale.EN_US, Locale.PT_BR, index, catalog.find_by_slug,
        )
        assert result == "/pt-BR/insurance/seguro-motorista/seguro-uber/como-funciona-seguro-uber"

    def test_artigo_sem_categoria(self, index, catalog):
        result = translate_path("/en-US/articles/glossary", Locale.EN_US, Locale.PT_BR, index, catalog.find_by_slug)
        assert result == "/pt-BR/articles/glossario"


class TestMelhorEsforco:

    def test_locale_de_origem_vem_do_prefixo(self, index):
        result = translate_path("/en-US/banking", None, Locale.PT_BR, index, _sem_artigos)
        assert result == "/pt-BR/banco"

    def test_segmento_desconhecido_passa_inalterado(self, index):
        result = translate_path("/en-US/insurance/nao-existe", Locale.EN_US, Locale.PT_BR, index, _sem_artigos)
        assert result == "/pt-BR/insurance/nao-existe"

    def test_mesmo_locale_devolve_o_caminho(self, index):
        result = translate_path("/pt-BR/insurance/seguro-motorista", Locale.PT_BR, Locale.PT_BR, index, _sem_artigos)
        assert result == "/pt-BR/insurance/seguro-motorista"

    def test_falha_troca_so_o_prefixo(self, index):
        def lookup_quebrado(slug, locale):
            raise RuntimeError("API fora do ar")

        result = translate_path(
            "/en-US/insurance/driver-insurance", Locale.EN_US, Locale.PT_BR, index, lookup_quebrado
        )
        assert result == "/pt-BR/insurance/driver-insurance"

    def test_raiz_do_site(self, index):
        assert translate_path("/en-US", Locale.EN_US, Locale.PT_BR, index, _sem_artigos) == "/pt-BR"
