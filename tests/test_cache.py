# tests/test_cache.py
"""
Testes do cache TTL (utils/cache.py).

Testa:
- Hit/miss e expiração com relógio injetado
- Evicção: expirados primeiro, depois o inserido há mais tempo
- Invalidação e estatísticas
"""

import pytest

from utils.cache import TTLCache


@pytest.fixture
def cache(fake_clock):
    return TTLCache(default_ttl=60, max_size=3, clock=fake_clock)


class TestGetPut:

    def test_miss(self, cache):
        assert cache.get("x") == (False, None)

    def test_hit(self, cache):
        cache.put("x", 1)
        assert cache.get("x") == (True, 1)

    def test_valor_none_e_distinguivel_de_miss(self, cache):
        cache.put("x", None)
        assert cache.get("x") == (True, None)

    def test_expira_apos_ttl(self, cache, fake_clock):
        cache.put("x", 1)
        fake_clock.advance(59)
        assert cache.get("x") == (True, 1)
        fake_clock.advance(1)
        assert cache.get("x") == (False, None)
        assert len(cache) == 0

    def test_ttl_por_item(self, cache, fake_clock):
        cache.put("curto", 1, ttl=5)
        cache.put("longo", 2)
        fake_clock.advance(10)
        assert cache.get("curto")[0] is False
        assert cache.get("longo") == (True, 2)


class TestEviccao:

    def test_remove_o_mais_antigo(self, cache):
        for key in ("a", "b", "c", "d"):
            cache.put(key, key)

        assert cache.get("a")[0] is False
        assert [cache.get(k)[0] for k in ("b", "c", "d")] == [True, True, True]
        assert cache.get_stats()["evictions"] == 1

    def test_reinsercao_move_para_o_fim(self, cache):
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("c", 3)
        cache.put("a", 10)
        cache.put("d", 4)

        assert cache.get("a") == (True, 10)
        assert cache.get("b")[0] is False

    def test_expirados_saem_antes(self, cache, fake_clock):
        cache.put("a", 1)
        cache.put("b", 2, ttl=1)
        cache.put("c", 3)
        fake_clock.advance(2)
        cache.put("d", 4)

        assert cache.get("a") == (True, 1)
        assert cache.get_stats()["evictions"] == 0

    def test_max_size_invalido(self):
        with pytest.raises(ValueError):
            TTLCache(max_size=0)


class TestInvalidacaoEStats:

    def test_invalidate(self, cache):
        cache.put("x", 1)
        assert cache.invalidate("x") is True
        assert cache.invalidate("x") is False

    def test_invalidate_all(self, cache):
        cache.put("x", 1)
        cache.put("y", 2)
        assert cache.invalidate_all() == 2
        assert len(cache) == 0

    def test_stats(self, cache):
        cache.put("x", 1)
        cache.get("x")
        cache.get("y")
        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == "50.0%"
        assert stats["max_size"] == 3
