# services/taxonomia/translator.py
"""
Tradução de caminhos na troca de idioma.

Quando o usuário alterna pt-BR <-> en-US, o caminho atual precisa apontar
para o mesmo conteúdo com os slugs do novo idioma:

    /en-US/insurance/driver-insurance -> /pt-BR/insurance/seguro-motorista

A navegação nunca é bloqueada: se algo falhar no meio (busca de artigo,
snapshot inconsistente), só o prefixo de locale é trocado.
"""

import logging
from typing import List, Optional

from .index import CategoryIndex
from .locales import Locale, join_path, split_locale_prefix
from .models import CategoryRecord
from .routing import ArticleLookup, article_url

logger = logging.getLogger(__name__)


def _reslug_segments(
    segments: List[str],
    current_locale: Locale,
    target_locale: Locale,
    index: CategoryIndex
) -> List[str]:
    """
    Troca cada segmento pelo slug da categoria correspondente no locale alvo.

    Prefere um filho da categoria casada no segmento anterior; senão faz a
    busca plana. Segmentos sem categoria passam inalterados.
    """
    translated: List[str] = []
    previous: Optional[CategoryRecord] = None

    for segment in segments:
        candidates = index.children_of(previous.id if previous else None)
        category = next(
            (c for c in candidates if c.localized_slug(current_locale) == segment),
            None
        )
        if category is None:
            category = index.find_by_slug(segment, current_locale)

        if category is None:
            translated.append(segment)
        else:
            translated.append(category.localized_slug(target_locale))
        previous = category

    return translated


def translate_path(
    current_path: str,
    current_locale: Optional[Locale],
    target_locale: Locale,
    index: CategoryIndex,
    article_lookup: ArticleLookup
) -> str:
    """
    Devolve o caminho equivalente em target_locale.

    1. Último segmento é artigo -> cadeia de categorias no alvo + slug do artigo
    2. Senão, cada segmento é re-slugado como categoria (melhor esforço)
    3. Qualquer exceção -> apenas o prefixo de locale é trocado
    """
    prefix_locale, segments = split_locale_prefix(current_path)
    source_locale = current_locale or prefix_locale or target_locale

    if source_locale is target_locale:
        return join_path(target_locale, segments)

    try:
        if segments:
            article = article_lookup(segments[-1], source_locale)
            if article is not None:
                return article_url(article, index, target_locale)

        return join_path(
            target_locale,
            _reslug_segments(segments, source_locale, target_locale, index)
        )
    except Exception as e:
        logger.warning(
            f"[Taxonomia] Falha ao traduzir '{current_path}' "
            f"{source_locale.value} -> {target_locale.value}: {e}"
        )
        return join_path(target_locale, segments)
