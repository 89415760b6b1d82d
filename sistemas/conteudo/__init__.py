# sistemas/conteudo/__init__.py
"""
Sistema de Conteúdo - categorias, artigos, menu e resolução de rotas do site bilíngue
"""
