# services/content_source.py
"""
Fontes do snapshot de conteúdo.

Duas implementações do mesmo contrato (ContentSource):
- DatabaseContentSource: lê categorias ativas e artigos publicados do banco
- HttpContentSource: lê da API de conteúdo (GET /api/categories, /api/articles)

Falhas de comunicação viram ContentSourceError; quem decide o fallback
(último snapshot válido ou vazio) é o TaxonomySnapshotService.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Protocol, TypeVar

import httpx
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from services.taxonomia import ArticleRecord, CategoryRecord, ContentSourceError, TaxonomiaError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Erros de um registro isolado (locale desconhecido, campo ausente, tipo errado)
RECORD_ERRORS = (TaxonomiaError, KeyError, ValueError, TypeError)


class ContentSource(Protocol):
    """Contrato de carga do snapshot completo (sem paginação)."""

    def load_categories(self) -> List[CategoryRecord]:
        ...

    def load_articles(self) -> List[ArticleRecord]:
        ...


def build_records(
    items: Iterable[Mapping[str, Any]],
    factory: Callable[[Mapping[str, Any]], T],
    kind: str
) -> List[T]:
    """
    Converte registro a registro; um registro malformado é logado e ignorado
    sem derrubar o snapshot inteiro.
    """
    records: List[T] = []
    for item in items:
        try:
            records.append(factory(item))
        except RECORD_ERRORS as e:
            item_id = item.get("id") if isinstance(item, Mapping) else None
            logger.warning(f"[ContentSource] {kind} {item_id} ignorado(a): {type(e).__name__}: {e}")
    return records


# ==========================================
# Banco de dados
# ==========================================

class DatabaseContentSource:
    """Lê o snapshot do banco via SQLAlchemy."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def load_categories(self) -> List[CategoryRecord]:
        from sistemas.conteudo.models import Categoria

        db = self._session_factory()
        try:
            rows = (
                db.query(Categoria)
                .filter(Categoria.is_active.is_(True))
                .order_by(Categoria.id)
                .all()
            )
            return build_records((row.to_record_dict() for row in rows), CategoryRecord.from_mapping, "Categoria")
        except SQLAlchemyError as e:
            raise ContentSourceError(
                f"Erro ao carregar categorias do banco: {e}",
                {"source": "database"}
            ) from e
        finally:
            db.close()

    def load_articles(self) -> List[ArticleRecord]:
        from sistemas.conteudo.models import Artigo

        db = self._session_factory()
        try:
            rows = (
                db.query(Artigo)
                .filter(Artigo.is_published.is_(True))
                .order_by(Artigo.date.desc(), Artigo.id)
                .all()
            )
            return build_records((row.to_record_dict() for row in rows), ArticleRecord.from_mapping, "Artigo")
        except SQLAlchemyError as e:
            raise ContentSourceError(
                f"Erro ao carregar artigos do banco: {e}",
                {"source": "database"}
            ) from e
        finally:
            db.close()


# ==========================================
# API de conteúdo
# ==========================================

def flatten_category_tree(items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Achata a resposta aninhada da API ({..., children: [...]}) em lista plana.

    O parent_id ausente no filho é herdado do nó onde ele aparece.
    Ids repetidos ficam só na primeira ocorrência (pré-ordem).
    """
    flat: List[Dict[str, Any]] = []
    seen = set()
    stack = [(item, None) for item in reversed(list(items or []))]

    while stack:
        item, parent_id = stack.pop()
        if not isinstance(item, dict) or item.get("id") is None:
            continue

        item_id = str(item["id"])
        if item_id in seen:
            continue
        seen.add(item_id)

        node = {k: v for k, v in item.items() if k != "children"}
        if node.get("parentId") is None and node.get("parent_id") is None and parent_id is not None:
            node["parentId"] = parent_id
        flat.append(node)

        children = item.get("children") or []
        stack.extend((child, item_id) for child in reversed(children))

    return flat


class HttpContentSource:
    """Lê o snapshot da API de conteúdo com httpx (síncrono)."""

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise ContentSourceError(f"Timeout ao acessar {url}", {"url": url}) from e
        except httpx.HTTPError as e:
            raise ContentSourceError(
                f"Erro de comunicação com {url}: {type(e).__name__}",
                {"url": url}
            ) from e

        if response.status_code != 200:
            raise ContentSourceError(
                f"HTTP {response.status_code} em {url}",
                {"url": url, "status_code": response.status_code, "body": response.text[:200]}
            )

        try:
            return response.json()
        except ValueError as e:
            raise ContentSourceError(f"Resposta inválida de {url}", {"url": url}) from e

    @staticmethod
    def _as_list(payload: Any, key: str) -> List[Any]:
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get(key), list):
            return payload[key]
        raise ContentSourceError(f"Formato inesperado na resposta de {key}", {"key": key})

    def load_categories(self) -> List[CategoryRecord]:
        payload = self._get_json("/api/categories")
        items = flatten_category_tree(self._as_list(payload, "categories"))
        logger.info(f"[ContentSource] {len(items)} categorias carregadas de {self.base_url}")
        return build_records(items, CategoryRecord.from_mapping, "Categoria")

    def load_articles(self) -> List[ArticleRecord]:
        payload = self._get_json("/api/articles", params={"limit": 1000})
        items = [a for a in self._as_list(payload, "articles") if isinstance(a, dict) and a.get("id") is not None]
        logger.info(f"[ContentSource] {len(items)} artigos carregados de {self.base_url}")
        return build_records(items, ArticleRecord.from_mapping, "Artigo")

    def close(self) -> None:
        self._client.close()
