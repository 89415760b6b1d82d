#!/usr/bin/env python
"""
Testes para validar a política de timezone do sistema.

Política:
- Backend grava em UTC (timezone-aware)
- Sitemap e JSON serializam em ISO 8601 com offset explícito

Uso:
    pytest tests/test_timezone.py -v
"""

import pytest
from datetime import datetime, timedelta, timezone


class TestTimezoneModule:
    """Testes do módulo utils/timezone.py"""

    def test_now_utc_returns_timezone_aware(self):
        """now_utc() deve retornar datetime com timezone UTC."""
        from utils.timezone import now_utc

        result = now_utc()

        assert result.tzinfo is not None, "Deve ser timezone-aware"
        assert result.tzinfo == timezone.utc, "Deve ser UTC"

    def test_to_utc_handles_naive_datetime(self):
        """to_utc() deve tratar datetime naive como UTC."""
        from utils.timezone import to_utc

        naive = datetime(2026, 1, 20, 18, 30, 0)
        result = to_utc(naive)

        assert result.tzinfo == timezone.utc
        assert result.hour == 18

    def test_to_utc_converts_aware(self):
        """to_utc() deve converter datetimes com outro offset."""
        from utils.timezone import to_utc

        local = datetime(2026, 1, 20, 14, 30, 0, tzinfo=timezone(timedelta(hours=-4)))
        assert to_utc(local).hour == 18

    def test_to_utc_handles_none(self):
        from utils.timezone import to_utc, to_iso

        assert to_utc(None) is None
        assert to_iso(None) is None

    @pytest.mark.parametrize("value,expected_hour", [
        ("2024-03-05T10:00:00Z", 10),
        ("2024-03-05T10:00:00+00:00", 10),
        ("2024-03-05T07:00:00-03:00", 10),
        ("2024-03-05T10:00:00", 10),
    ])
    def test_parse_iso(self, value, expected_hour):
        """parse_iso() aceita Z, offsets e naive (tratado como UTC)."""
        from utils.timezone import parse_iso

        result = parse_iso(value)
        assert result.tzinfo == timezone.utc
        assert result.hour == expected_hour

    @pytest.mark.parametrize("value", ["", None, "ontem", "2024-13-45"])
    def test_parse_iso_invalido(self, value):
        from utils.timezone import parse_iso

        assert parse_iso(value) is None

    def test_get_utc_now_for_sqlalchemy(self):
        """get_utc_now() deve funcionar como default para SQLAlchemy."""
        from utils.timezone import get_utc_now

        result = get_utc_now()

        assert result.tzinfo is not None, "Deve ser timezone-aware"
        assert result.tzinfo == timezone.utc, "Deve ser UTC"


class TestModelsUseCorrectTimezone:
    """Testes para verificar que os models usam get_utc_now."""

    def test_artigo_model_uses_get_utc_now(self):
        from sistemas.conteudo.models import Artigo

        date_col = Artigo.__table__.columns['date']
        assert date_col.default is not None, "date deve ter default"

    def test_categoria_model_uses_get_utc_now(self):
        from sistemas.conteudo.models import Categoria

        criado_em_col = Categoria.__table__.columns['criado_em']
        assert criado_em_col.default is not None, "criado_em deve ter default"
