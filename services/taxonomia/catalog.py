# services/taxonomia/catalog.py
"""
Catálogo de artigos do snapshot.

Também é o "article lookup" usado pela resolução de rotas e pela troca
de idioma: find_by_slug(slug, locale).
"""

from typing import Iterable, Iterator, List, Optional

from .locales import Locale
from .models import ArticleRecord


class ArticleCatalog:
    """Snapshot somente-leitura dos artigos."""

    def __init__(self, articles: Iterable[ArticleRecord] = ()):
        self._articles: List[ArticleRecord] = list(articles)

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[ArticleRecord]:
        return iter(self._articles)

    def get(self, article_id) -> Optional[ArticleRecord]:
        article_id = str(article_id)
        return next((a for a in self._articles if a.id == article_id), None)

    def find_by_slug(self, slug: str, locale: Locale) -> Optional[ArticleRecord]:
        """
        Artigo cujo slug localizado casa com o segmento.

        Se nenhum casar no locale pedido, aceita qualquer um dos slugs
        do artigo (links antigos compartilhados no outro idioma).
        """
        if not slug:
            return None
        exact = next((a for a in self._articles if a.localized_slug(locale) == slug), None)
        if exact is not None:
            return exact
        return next((a for a in self._articles if a.matches_slug(slug)), None)

    def for_locale(self, locale: Locale) -> List[ArticleRecord]:
        """Artigos visíveis no locale."""
        return [a for a in self._articles if a.visibility.visible_in(locale)]

    def in_categories(self, category_ids: Iterable[str]) -> List[ArticleRecord]:
        ids = set(category_ids)
        return [a for a in self._articles if a.category_id in ids]
