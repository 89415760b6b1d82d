# sistemas/seo/__init__.py
"""
Sistema de SEO - sitemap.xml, robots.txt e meta tags com dados estruturados
"""
