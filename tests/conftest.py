# tests/conftest.py
"""
Configuração global do pytest para a API GigSafeHub.

Este arquivo é executado automaticamente pelo pytest antes dos testes.

Fixtures:
- categorias/artigos de exemplo (taxonomia pequena, bilíngue)
- StubContentSource: fonte de conteúdo em memória com contagem de chamadas e falha simulada
- client: TestClient com o serviço de snapshots substituído pela fonte em memória
"""

import sys
import os

# Adiciona o diretório raiz do projeto ao PYTHONPATH
# para que os imports funcionem corretamente nos testes
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Configura variáveis de ambiente para testes
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SEED_SAMPLE_CONTENT", "false")
os.environ.setdefault("BASE_URL", "https://gigsafehub.com")

from datetime import datetime, timezone

import pytest

from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import (
    ArticleCatalog,
    ArticleRecord,
    ArticleVisibility,
    CategoryIndex,
    CategoryRecord,
    ContentSourceError,
)


# ==================================================
# TAXONOMIA DE EXEMPLO
# ==================================================
#
# insurance (a)                       order 1
#   driver-insurance / seguro-motorista (b)   order 2
#     uber-insurance / seguro-uber (d)        sem order
#   delivery-insurance / seguro-entregador (c) order 1
#   legacy-plans (f, fora da navbar)          order 1
# banking / banco (e)                 order 2


def make_categories():
    return [
        CategoryRecord(
            id="a", slug="insurance", name="Insurance", name_pt="Seguros",
            order=1, show_in_navbar=True, show_in_footer=True,
        ),
        CategoryRecord(
            id="b", slug="driver-insurance", slug_en="driver-insurance", slug_pt="seguro-motorista",
            parent_id="a", level=1, order=2, name="Driver Insurance", name_pt="Seguro para Motoristas",
            description="Insurance for ride-hailing drivers",
            description_pt="Seguros para quem dirige por aplicativo",
            show_in_navbar=True, show_in_footer=True,
        ),
        CategoryRecord(
            id="c", slug="delivery-insurance", slug_pt="seguro-entregador",
            parent_id="a", level=1, order=1, name="Delivery Insurance", name_pt="Seguro para Entregadores",
            show_in_navbar=True,
        ),
        CategoryRecord(
            id="d", slug="uber-insurance", slug_pt="seguro-uber",
            parent_id="b", level=2, name="Uber Insurance", name_pt="Seguro para Uber",
            show_in_navbar=True,
        ),
        CategoryRecord(
            id="e", slug="banking", slug_pt="banco", order=2, name="Banking", name_pt="Banco",
            show_in_navbar=True,
        ),
        CategoryRecord(
            id="f", slug="legacy-plans", parent_id="a", level=1, order=1, name="Legacy plans",
        ),
    ]


def make_articles():
    return [
        ArticleRecord(
            id="1", slug="how-uber-insurance-works", slug_en="how-uber-insurance-works",
            slug_pt="como-funciona-seguro-uber", category_id="d",
            title="How Uber insurance works", excerpt="Coverage explained",
            show_in_menu=True, date=datetime(2024, 3, 1, tzinfo=timezone.utc),
            updated_at=datetime(2024, 3, 5, tzinfo=timezone.utc), reading_time=6,
        ),
        ArticleRecord(
            id="2", slug="guia-do-motorista", category_id="b",
            visibility=ArticleVisibility.PT_ONLY, title="Guia do motorista",
            show_in_menu=True, date=datetime(2024, 4, 1, tzinfo=timezone.utc),
        ),
        ArticleRecord(
            id="3", slug="glossary", slug_pt="glossario",
            title="Gig economy glossary", date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
        ArticleRecord(
            id="4", slug="internal-note", category_id="a", robots_index=False,
            title="Internal note", show_in_menu=True, date=datetime(2024, 5, 1, tzinfo=timezone.utc),
        ),
    ]


class StubContentSource:
    """Fonte de conteúdo em memória; `fail=True` simula a API fora do ar."""

    def __init__(self, categories=None, articles=None):
        self.categories = make_categories() if categories is None else categories
        self.articles = make_articles() if articles is None else articles
        self.fail = False
        self.category_calls = 0
        self.article_calls = 0

    def load_categories(self):
        self.category_calls += 1
        if self.fail:
            raise ContentSourceError("API de conteúdo indisponível")
        return list(self.categories)

    def load_articles(self):
        self.article_calls += 1
        if self.fail:
            raise ContentSourceError("API de conteúdo indisponível")
        return list(self.articles)


class FakeClock:
    """Relógio manual para testes de TTL."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ==================================================
# FIXTURES
# ==================================================

@pytest.fixture
def categories():
    return make_categories()


@pytest.fixture
def index(categories):
    return CategoryIndex(categories)


@pytest.fixture
def articles():
    return make_articles()


@pytest.fixture
def catalog(articles):
    return ArticleCatalog(articles)


@pytest.fixture
def stub_source():
    return StubContentSource()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def snapshot_service(stub_source, fake_clock):
    return TaxonomySnapshotService(stub_source, cache_ttl=300, article_ttl=3600, max_size=32, clock=fake_clock)


@pytest.fixture
def client(snapshot_service):
    """
    TestClient da aplicação com o snapshot vindo da fonte em memória.

    O lifespan roda (setup de logging + criação das tabelas no SQLite em memória).
    """
    from fastapi.testclient import TestClient

    from main import app
    from sistemas.conteudo.dependencies import get_snapshot_service

    app.dependency_overrides[get_snapshot_service] = lambda: snapshot_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
