# services/taxonomia/locales.py
"""
Locales do site e visibilidade de artigos.

O banco e a API antiga misturam "pt-BR", "pt_BR", "en-US", "en_US" e "Both".
Tudo é normalizado aqui, na entrada dos dados, para duas enumerações:

- Locale: idioma/região do site (prefixo da URL)
- ArticleVisibility: em quais locales um artigo é publicado
"""

from enum import Enum
from typing import List, Optional, Tuple

from .exceptions import LocaleInvalidoError


class Locale(str, Enum):
    """Locales suportados pelo site."""

    PT_BR = "pt-BR"
    EN_US = "en-US"

    @classmethod
    def parse(cls, value) -> "Locale":
        """
        Normaliza um locale vindo de URL, query string ou banco.

        Aceita "pt-BR", "pt_BR", "pt-br", "PT_BR", "en-US", "en_us"...

        Raises:
            LocaleInvalidoError: valor vazio ou desconhecido
        """
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            raise LocaleInvalidoError(value)

        normalized = value.strip().replace("_", "-").lower()
        for locale in cls:
            if locale.value.lower() == normalized:
                return locale
        raise LocaleInvalidoError(value)

    @classmethod
    def is_locale(cls, value) -> bool:
        """Indica se o valor é um prefixo de locale válido."""
        try:
            cls.parse(value)
        except LocaleInvalidoError:
            return False
        return True

    def __str__(self) -> str:
        return self.value


DEFAULT_LOCALE = Locale.PT_BR


class ArticleVisibility(str, Enum):
    """Em quais locales um artigo aparece (sitemap, listagens, menu)."""

    PT_ONLY = "pt_BR"
    EN_ONLY = "en_US"
    BOTH = "Both"

    @classmethod
    def parse(cls, value) -> "ArticleVisibility":
        """
        Normaliza o campo "locale" do artigo.

        Valor ausente significa publicado nos dois idiomas.
        """
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return cls.BOTH
        if isinstance(value, Locale):
            return cls.PT_ONLY if value is Locale.PT_BR else cls.EN_ONLY

        normalized = str(value).strip().lower()
        if normalized == "both":
            return cls.BOTH
        locale = Locale.parse(normalized)
        return cls.PT_ONLY if locale is Locale.PT_BR else cls.EN_ONLY

    def locales(self) -> List[Locale]:
        if self is ArticleVisibility.PT_ONLY:
            return [Locale.PT_BR]
        if self is ArticleVisibility.EN_ONLY:
            return [Locale.EN_US]
        return [Locale.EN_US, Locale.PT_BR]

    def visible_in(self, locale: Locale) -> bool:
        return locale in self.locales()


def localized_slug(
    slug: Optional[str],
    slug_en: Optional[str],
    slug_pt: Optional[str],
    locale: Locale
) -> str:
    """
    Regra única de fallback de slug.

    slug_pt em pt-BR (se não vazio), slug_en em en-US (se não vazio),
    senão o slug padrão.
    """
    if locale is Locale.PT_BR and slug_pt:
        return slug_pt
    if locale is Locale.EN_US and slug_en:
        return slug_en
    return slug or ""


def split_path(path: str) -> List[str]:
    """Quebra um caminho de URL em segmentos não vazios."""
    return [segment for segment in (path or "").split("/") if segment]


def split_locale_prefix(path: str) -> Tuple[Optional[Locale], List[str]]:
    """
    Separa o prefixo de locale do restante do caminho.

    "/pt-BR/seguros/uber" -> (Locale.PT_BR, ["seguros", "uber"])
    "/seguros"            -> (None, ["seguros"])
    """
    segments = split_path(path)
    if segments and Locale.is_locale(segments[0]):
        return Locale.parse(segments[0]), segments[1:]
    return None, segments


def join_path(locale: Locale, segments) -> str:
    """Monta "/<locale>/<seg>/<seg>"."""
    return "/" + "/".join([locale.value, *segments])
