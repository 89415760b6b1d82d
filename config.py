# config.py
# -*- coding: utf-8 -*-
"""
Configurações centralizadas do Portal GigSafeHub
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Carrega variáveis de ambiente (apenas se existir .env)
load_dotenv()

# ==================================================
# AMBIENTE
# ==================================================
ENV = os.getenv("ENV", "development")
IS_PRODUCTION = ENV == "production"
GIT_COMMIT = os.getenv("GIT_COMMIT", "unknown")

# ==================================================
# CONFIGURAÇÕES DO BANCO DE DADOS
# ==================================================
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gigsafehub.db")

# Railway usa postgres:// mas SQLAlchemy precisa de postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# Popula categorias/artigos de exemplo quando o banco está vazio
SEED_SAMPLE_CONTENT = os.getenv("SEED_SAMPLE_CONTENT", "true").lower() == "true"

# ==================================================
# URLS PÚBLICAS
# ==================================================
# URL do site (usada no sitemap, robots.txt e URLs canônicas)
BASE_URL = os.getenv("BASE_URL", "http://localhost:3000").rstrip("/")

# API de conteúdo externa (opcional). Se vazia, o snapshot é lido do banco local.
CONTENT_API_URL = os.getenv("CONTENT_API_URL", "").rstrip("/")
CONTENT_API_TIMEOUT = float(os.getenv("CONTENT_API_TIMEOUT", "10"))

# ==================================================
# CACHE DE TAXONOMIA
# ==================================================
CATEGORIES_CACHE_TTL = int(os.getenv("CATEGORIES_CACHE_TTL", "300"))  # 5 minutos
ARTICLES_CACHE_TTL = int(os.getenv("ARTICLES_CACHE_TTL", "3600"))     # 1 hora
SNAPSHOT_CACHE_MAX_SIZE = int(os.getenv("SNAPSHOT_CACHE_MAX_SIZE", "32"))

# ==================================================
# CORS
# ==================================================
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
    if origin.strip()
]

# ==================================================
# OUTRAS CONFIGURAÇÕES
# ==================================================
BASE_DIR = Path(__file__).resolve().parent

# Locales suportados pelo site, na ordem em que aparecem no sitemap
SUPPORTED_LOCALES = ("en-US", "pt-BR")

# Páginas estáticas publicadas no sitemap: (caminho, changefreq, prioridade)
SITEMAP_STATIC_PAGES = (
    ("", "daily", 1.0),
    ("/reviews", "daily", 0.9),
    ("/articles", "daily", 0.8),
)
