# utils/timezone.py
"""
POLÍTICA DE TIMEZONE DO SISTEMA

REGRAS:
1. GRAVAÇÃO NO BANCO: Sempre UTC (timezone-aware)
2. SERIALIZAÇÃO (JSON, sitemap): ISO 8601 com timezone explícito

USO:
    from utils.timezone import now_utc, to_utc, parse_iso, get_utc_now

IMPORTANTE:
- Nunca use datetime.utcnow() ou datetime.now() diretamente
- Datetimes naive vindos do banco (SQLite) são tratados como UTC
"""

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def now_utc() -> datetime:
    """
    Retorna o datetime atual em UTC com timezone-aware.

    USE ESTA FUNÇÃO para gravar timestamps no banco de dados.
    """
    return datetime.now(UTC)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Converte um datetime para UTC.

    - Se naive: assume que já está em UTC
    - Se aware: converte
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """Serializa em ISO 8601 (UTC) ou None."""
    dt = to_utc(dt)
    return dt.isoformat() if dt else None


def parse_iso(iso_string: Optional[str]) -> Optional[datetime]:
    """
    Parseia uma string ISO 8601 para datetime timezone-aware (UTC).

    Returns:
        datetime ou None se vazio/inválido
    """
    if not iso_string:
        return None

    try:
        dt = datetime.fromisoformat(iso_string.replace('Z', '+00:00'))
    except (ValueError, AttributeError):
        return None

    return to_utc(dt)


def get_utc_now():
    """
    Função callable para uso em Column(default=...).

    USE EM MODELS:
        from utils.timezone import get_utc_now
        created_at = Column(DateTime(timezone=True), default=get_utc_now)
    """
    return now_utc()
