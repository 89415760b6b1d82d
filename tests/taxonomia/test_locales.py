# tests/taxonomia/test_locales.py
"""
Testes de locales, visibilidade de artigos e helpers de caminho.
"""

import pytest

from services.taxonomia import (
    ArticleVisibility,
    CategoryRecord,
    Locale,
    LocaleInvalidoError,
    join_path,
    localized_slug,
    split_locale_prefix,
    split_path,
)


class TestLocaleParse:
    """Normalização das várias grafias de locale."""

    @pytest.mark.parametrize("value", ["pt-BR", "pt_BR", "pt-br", "PT_BR", " pt-BR "])
    def test_variantes_pt(self, value):
        assert Locale.parse(value) is Locale.PT_BR

    @pytest.mark.parametrize("value", ["en-US", "en_US", "en-us"])
    def test_variantes_en(self, value):
        assert Locale.parse(value) is Locale.EN_US

    @pytest.mark.parametrize("value", ["", None, "fr-FR", "pt", 42])
    def test_invalido_levanta_erro(self, value):
        with pytest.raises(LocaleInvalidoError) as exc_info:
            Locale.parse(value)
        assert exc_info.value.code == "LOCALE_INVALIDO"

    def test_is_locale(self):
        assert Locale.is_locale("en-US")
        assert not Locale.is_locale("insurance")

    def test_str_e_o_valor(self):
        assert str(Locale.PT_BR) == "pt-BR"


class TestArticleVisibility:

    @pytest.mark.parametrize("value,expected", [
        (None, ArticleVisibility.BOTH),
        ("", ArticleVisibility.BOTH),
        ("Both", ArticleVisibility.BOTH),
        ("both", ArticleVisibility.BOTH),
        ("pt_BR", ArticleVisibility.PT_ONLY),
        ("pt-BR", ArticleVisibility.PT_ONLY),
        ("en_US", ArticleVisibility.EN_ONLY),
        (Locale.EN_US, ArticleVisibility.EN_ONLY),
    ])
    def test_parse(self, value, expected):
        assert ArticleVisibility.parse(value) is expected

    def test_valor_desconhecido(self):
        with pytest.raises(LocaleInvalidoError):
            ArticleVisibility.parse("es_ES")

    def test_locales_e_visible_in(self):
        assert ArticleVisibility.BOTH.locales() == [Locale.EN_US, Locale.PT_BR]
        assert ArticleVisibility.PT_ONLY.visible_in(Locale.PT_BR)
        assert not ArticleVisibility.PT_ONLY.visible_in(Locale.EN_US)
        assert not ArticleVisibility.EN_ONLY.visible_in(Locale.PT_BR)


class TestLocalizedSlug:

    def test_override_por_locale(self):
        assert localized_slug("driver", "driver-en", "motorista", Locale.PT_BR) == "motorista"
        assert localized_slug("driver", "driver-en", "motorista", Locale.EN_US) == "driver-en"

    def test_override_vazio_cai_no_slug_padrao(self):
        assert localized_slug("driver", "", "", Locale.PT_BR) == "driver"
        assert localized_slug("driver", None, None, Locale.EN_US) == "driver"

    def test_slug_pt_nao_vaza_para_en(self):
        assert localized_slug("driver", None, "motorista", Locale.EN_US) == "driver"


class TestPathHelpers:

    def test_split_path_ignora_barras_extras(self):
        assert split_path("//seguros//uber/") == ["seguros", "uber"]
        assert split_path("") == []

    def test_split_locale_prefix(self):
        assert split_locale_prefix("/pt-BR/seguros/uber") == (Locale.PT_BR, ["seguros", "uber"])
        assert split_locale_prefix("/en_US") == (Locale.EN_US, [])
        assert split_locale_prefix("/seguros") == (None, ["seguros"])

    def test_join_path(self):
        assert join_path(Locale.EN_US, ["insurance", "uber"]) == "/en-US/insurance/uber"
        assert join_path(Locale.PT_BR, []) == "/pt-BR"


class TestTextosLocalizadosDaCategoria:

    def test_descricao_por_locale_com_fallback(self):
        category = CategoryRecord.from_mapping({
            "id": 1, "slug": "insurance", "name": "Insurance",
            "description": "Insurance guides",
            "descriptionPt": "Guias de seguro",
        })

        assert category.localized_description(Locale.PT_BR) == "Guias de seguro"
        assert category.localized_description(Locale.EN_US) == "Insurance guides"

    def test_descricao_en_explicita(self):
        category = CategoryRecord.from_mapping({
            "id": 1, "slug": "banking", "description": "Banco",
            "description_en": "Banking for gig workers",
        })
        assert category.localized_description(Locale.EN_US) == "Banking for gig workers"
        assert category.localized_description(Locale.PT_BR) == "Banco"

    def test_sem_descricao(self):
        assert CategoryRecord(id="x", slug="x").localized_description(Locale.PT_BR) is None
