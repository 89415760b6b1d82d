# services/__init__.py
"""
Serviços compartilhados do portal GigSafeHub.

- taxonomia: regras puras de categorias, rotas, menu e sitemap
- content_source: leitura do snapshot (banco ou API de conteúdo)
- snapshot_service: cache dos snapshots com fallback para o último válido
"""
