# services/taxonomia/index.py
"""
Índice da árvore de categorias (arena + índice).

O snapshot de categorias é carregado em uma lista, na ordem armazenada,
e um mapa id -> posição é montado uma única vez. Toda navegação
(construção de caminho, resolução de slugs, filhos) opera sobre posições.

Operações principais:
- build_path: categoria -> lista de slugs localizados, da raiz até ela
- resolve_by_slug_path: lista de slugs -> categoria (descendo a partir das raízes)

Regras:
- parent_id apontando para categoria inexistente (cache velho, pai removido)
  interrompe a subida e devolve o caminho parcial
- ciclo em parent_id é erro de integridade: CyclicCategoryGraph
- slug não encontrado não é erro: devolve None
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Union

from .exceptions import CyclicCategoryGraph
from .locales import Locale, join_path
from .models import CategoryRecord

logger = logging.getLogger(__name__)

CategoryRef = Union[CategoryRecord, str]


class CategoryIndex:
    """Snapshot somente-leitura das categorias com índices de navegação."""

    def __init__(self, categories: Iterable[CategoryRecord] = ()):
        self._nodes: List[CategoryRecord] = []
        self._positions: Dict[str, int] = {}
        self._children: Dict[Optional[str], List[int]] = {}

        for category in categories:
            if category.id in self._positions:
                logger.warning(f"[Taxonomia] Categoria duplicada ignorada: id={category.id}")
                continue
            self._positions[category.id] = len(self._nodes)
            self._nodes.append(category)

        # Categorias cujo pai não está no snapshot continuam fora das raízes:
        # só são alcançáveis por id ou pela busca plana de slug
        for position, category in enumerate(self._nodes):
            self._children.setdefault(category.parent_id, []).append(position)

    # ------------------------------------------------------------------
    # Acesso básico
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[CategoryRecord]:
        return iter(self._nodes)

    def __contains__(self, category_id) -> bool:
        return str(category_id) in self._positions

    def get(self, category_id) -> Optional[CategoryRecord]:
        if category_id is None:
            return None
        position = self._positions.get(str(category_id))
        return self._nodes[position] if position is not None else None

    def categories(self) -> List[CategoryRecord]:
        return list(self._nodes)

    def roots(self) -> List[CategoryRecord]:
        return [self._nodes[p] for p in self._children.get(None, [])]

    def children_of(self, category_id) -> List[CategoryRecord]:
        """Filhos diretos, na ordem armazenada."""
        if category_id is None:
            return self.roots()
        return [self._nodes[p] for p in self._children.get(str(category_id), [])]

    def _resolve_ref(self, category: CategoryRef) -> Optional[CategoryRecord]:
        if isinstance(category, CategoryRecord):
            return category
        return self.get(category)

    # ------------------------------------------------------------------
    # Construção de caminho
    # ------------------------------------------------------------------

    def ancestors(self, category: CategoryRef) -> List[CategoryRecord]:
        """
        Cadeia da raiz até a categoria (inclusive).

        Para no primeiro parent_id que não existe no snapshot.

        Raises:
            CyclicCategoryGraph: se um nó se repetir na subida
        """
        current = self._resolve_ref(category)
        if current is None:
            return []

        chain: List[CategoryRecord] = []
        visited: Dict[str, int] = {}

        while current is not None:
            if current.id in visited:
                cycle = [c.id for c in chain[visited[current.id]:]] + [current.id]
                raise CyclicCategoryGraph(list(reversed(cycle)))
            visited[current.id] = len(chain)
            chain.append(current)

            if current.parent_id is None:
                break

            parent = self.get(current.parent_id)
            if parent is None:
                logger.debug(
                    f"[Taxonomia] Pai {current.parent_id} de {current.id} ausente no snapshot; "
                    f"caminho parcial"
                )
                break
            current = parent

        chain.reverse()
        return chain

    def build_path(self, category: CategoryRef, locale: Locale) -> List[str]:
        """
        Lista de slugs localizados da raiz até a categoria.

        Aceita o registro ou o id. Categoria desconhecida -> [].
        """
        return [node.localized_slug(locale) for node in self.ancestors(category)]

    def build_url(self, category: CategoryRef, locale: Locale) -> str:
        """Caminho navegável: "/<locale>/<raiz>/.../<categoria>"."""
        return join_path(locale, self.build_path(category, locale))

    # ------------------------------------------------------------------
    # Resolução reversa
    # ------------------------------------------------------------------

    def resolve_by_slug_path(
        self,
        segments: Sequence[str],
        locale: Locale
    ) -> Optional[CategoryRecord]:
        """
        Resolve segmentos de URL para uma categoria, descendo a partir das raízes.

        Em cada nível o primeiro filho (ordem armazenada) cujo slug localizado
        casa com o segmento é escolhido. Qualquer divergência -> None.
        """
        if not segments:
            return None

        parent_id: Optional[str] = None
        match: Optional[CategoryRecord] = None

        for segment in segments:
            match = next(
                (c for c in self.children_of(parent_id) if c.localized_slug(locale) == segment),
                None
            )
            if match is None:
                return None
            parent_id = match.id

        return match

    def find_by_slug(self, slug: str, locale: Locale) -> Optional[CategoryRecord]:
        """Busca plana (qualquer nível) pelo slug localizado; primeiro na ordem armazenada."""
        return next((c for c in self._nodes if c.localized_slug(locale) == slug), None)

    # ------------------------------------------------------------------
    # Subárvores
    # ------------------------------------------------------------------

    def descendant_ids(self, category_id) -> List[str]:
        """Ids da categoria e de todos os descendentes (pré-ordem)."""
        root = self.get(category_id)
        if root is None:
            return []

        ids: List[str] = []
        seen = set()
        stack = [root.id]
        while stack:
            current_id = stack.pop()
            if current_id in seen:
                raise CyclicCategoryGraph([current_id])
            seen.add(current_id)
            ids.append(current_id)
            stack.extend(reversed([c.id for c in self.children_of(current_id)]))
        return ids
