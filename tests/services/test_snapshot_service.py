# tests/services/test_snapshot_service.py
"""
Testes do TaxonomySnapshotService.

Cenários:
- Leitura com cache (a fonte só é chamada uma vez dentro do TTL)
- Expiração por TTL (categorias 5 min, artigos 1 h)
- Fonte fora do ar: último snapshot válido, senão vazio
- Artigos filtrados por visibilidade do locale
"""

from services.snapshot_service import TaxonomySnapshotService
from services.taxonomia import ArticleCatalog, CategoryIndex, Locale


class TestCache:

    def test_categorias_carregadas_uma_vez(self, snapshot_service, stub_source):
        first = snapshot_service.categories(Locale.PT_BR)
        second = snapshot_service.categories(Locale.PT_BR)

        assert first is second
        assert len(first) == 6
        assert stub_source.category_calls == 1

    def test_chave_por_locale(self, snapshot_service, stub_source):
        snapshot_service.categories(Locale.PT_BR)
        snapshot_service.categories(Locale.EN_US)
        snapshot_service.categories()

        assert stub_source.category_calls == 3

    def test_categorias_expiram_em_cinco_minutos(self, snapshot_service, stub_source, fake_clock):
        snapshot_service.categories(Locale.PT_BR)
        fake_clock.advance(299)
        snapshot_service.categories(Locale.PT_BR)
        assert stub_source.category_calls == 1

        fake_clock.advance(1)
        snapshot_service.categories(Locale.PT_BR)
        assert stub_source.category_calls == 2

    def test_artigos_usam_ttl_proprio(self, snapshot_service, stub_source, fake_clock):
        snapshot_service.articles(Locale.PT_BR)
        fake_clock.advance(600)
        snapshot_service.articles(Locale.PT_BR)
        assert stub_source.article_calls == 1

        fake_clock.advance(3000)
        snapshot_service.articles(Locale.PT_BR)
        assert stub_source.article_calls == 2

    def test_invalidate_forca_recarga(self, snapshot_service, stub_source):
        snapshot_service.categories(Locale.PT_BR)
        snapshot_service.articles(Locale.PT_BR)

        assert snapshot_service.invalidate() == 2

        snapshot_service.categories(Locale.PT_BR)
        assert stub_source.category_calls == 2

    def test_stats(self, snapshot_service):
        snapshot_service.categories(Locale.PT_BR)
        snapshot_service.categories(Locale.PT_BR)

        stats = snapshot_service.get_stats()
        assert stats["hits"] == 1
        assert stats["size"] == 1


class TestVisibilidade:

    def test_artigos_por_locale(self, snapshot_service):
        pt_ids = {a.id for a in snapshot_service.articles(Locale.PT_BR)}
        en_ids = {a.id for a in snapshot_service.articles(Locale.EN_US)}

        assert pt_ids == {"1", "2", "3", "4"}
        assert en_ids == {"1", "3", "4"}

    def test_sem_locale_traz_todos(self, snapshot_service):
        assert len(snapshot_service.articles()) == 4


class TestFalhaDaFonte:

    def test_usa_snapshot_anterior(self, snapshot_service, stub_source, fake_clock):
        first = snapshot_service.categories(Locale.PT_BR)

        stub_source.fail = True
        fake_clock.advance(301)
        stale = snapshot_service.categories(Locale.PT_BR)

        assert stale is first
        assert stub_source.category_calls == 2

    def test_snapshot_anterior_sobrevive_ao_invalidate(self, snapshot_service, stub_source):
        first = snapshot_service.articles(Locale.EN_US)
        snapshot_service.invalidate()
        stub_source.fail = True

        assert snapshot_service.articles(Locale.EN_US) is first

    def test_sem_snapshot_anterior_devolve_vazio(self, snapshot_service, stub_source):
        stub_source.fail = True

        categories = snapshot_service.categories(Locale.PT_BR)
        articles = snapshot_service.articles(Locale.PT_BR)

        assert isinstance(categories, CategoryIndex)
        assert len(categories) == 0
        assert isinstance(articles, ArticleCatalog)
        assert len(articles) == 0

    def test_falha_nao_e_cacheada(self, snapshot_service, stub_source):
        stub_source.fail = True
        snapshot_service.categories(Locale.PT_BR)

        stub_source.fail = False
        assert len(snapshot_service.categories(Locale.PT_BR)) == 6

    def test_registro_malformado_conta_como_falha(self, fake_clock):
        class BrokenSource:
            def load_categories(self):
                raise KeyError("id")

            def load_articles(self):
                return []

        service = TaxonomySnapshotService(BrokenSource(), clock=fake_clock)
        assert len(service.categories(Locale.PT_BR)) == 0
