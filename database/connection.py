# database/connection.py
"""
Configuração da conexão com o banco de dados usando SQLAlchemy 2.0
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL


def create_db_engine(url: str):
    """
    Cria o engine conforme o banco.

    SQLite em memória usa StaticPool: todas as threads (e o TestClient)
    enxergam a mesma conexão e, portanto, as mesmas tabelas.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}  # Necessário para SQLite
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    # PostgreSQL - configuração otimizada para produção
    return create_engine(
        url,
        echo=False,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,  # Recicla conexões a cada 30 min
        pool_pre_ping=True  # Verifica conexão antes de usar
    )


engine = create_db_engine(DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para os models
Base = declarative_base()


def get_db() -> Generator:
    """
    Dependency que fornece uma sessão do banco de dados.
    Uso: db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
