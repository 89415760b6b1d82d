# tests/test_seo_api.py
"""
Testes do router de SEO: /sitemap.xml, /robots.txt e /api/seo/meta
"""

import xml.etree.ElementTree as ET

from services.taxonomia.assembler import SITEMAP_NAMESPACE

BASE = "https://gigsafehub.com"
NS = {"sm": SITEMAP_NAMESPACE}


def _urls(xml_text):
    root = ET.fromstring(xml_text.encode("utf-8"))
    return {
        url.find("sm:loc", NS).text: url
        for url in root.findall("sm:url", NS)
    }


class TestSitemap:

    def test_formato(self, client):
        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert response.headers["Cache-Control"] == "public, max-age=3600"
        assert response.text.startswith('<?xml version="1.0" encoding="UTF-8"?>')

    def test_contem_paginas_categorias_e_artigos(self, client):
        urls = _urls(client.get("/sitemap.xml").text)

        # 3 páginas x 2 locales + 6 categorias x 2 locales + 5 URLs de artigos
        assert len(urls) == 23
        assert f"{BASE}/en-US" in urls
        assert f"{BASE}/pt-BR/articles" in urls
        assert f"{BASE}/pt-BR/insurance/seguro-motorista/seguro-uber" in urls
        assert f"{BASE}/en-US/legacy-plans" not in urls
        assert f"{BASE}/en-US/insurance/legacy-plans" in urls

    def test_artigo_respeita_visibilidade_e_robots(self, client):
        urls = _urls(client.get("/sitemap.xml").text)

        assert f"{BASE}/pt-BR/insurance/seguro-motorista/guia-do-motorista" in urls
        assert f"{BASE}/en-US/insurance/driver-insurance/guia-do-motorista" not in urls
        assert not any("internal-note" in loc for loc in urls)

    def test_campos_do_artigo(self, client):
        urls = _urls(client.get("/sitemap.xml").text)
        url = urls[f"{BASE}/en-US/insurance/driver-insurance/uber-insurance/how-uber-insurance-works"]

        assert url.find("sm:lastmod", NS).text.startswith("2024-03-05")
        assert url.find("sm:changefreq", NS).text == "monthly"
        assert url.find("sm:priority", NS).text == "0.9"

    def test_campos_da_categoria(self, client):
        url = _urls(client.get("/sitemap.xml").text)[f"{BASE}/pt-BR/banco"]

        assert url.find("sm:lastmod", NS) is None
        assert url.find("sm:changefreq", NS).text == "weekly"
        assert url.find("sm:priority", NS).text == "0.7"

    def test_fonte_fora_do_ar_gera_so_paginas_estaticas(self, client, stub_source):
        stub_source.fail = True
        assert len(_urls(client.get("/sitemap.xml").text)) == 6


class TestRobots:

    def test_conteudo(self, client):
        response = client.get("/robots.txt")

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, max-age=86400"
        lines = response.text.splitlines()
        assert lines[0] == "User-agent: *"
        assert "Disallow: /api/" in lines
        assert lines[-1] == f"Sitemap: {BASE}/sitemap.xml"


class TestMeta:

    def test_artigo(self, client):
        response = client.get(
            "/api/seo/meta",
            params={"type": "article", "slug": "como-funciona-seguro-uber", "locale": "pt-BR"},
        )

        assert response.status_code == 200
        meta = response.json()
        assert meta["title"] == "How Uber insurance works - GigSafeHub"
        assert meta["description"] == "Coverage explained"
        assert meta["og_type"] == "article"
        assert meta["robots"] == "index, follow"
        assert meta["canonical_url"] == f"{BASE}/pt-BR/insurance/seguro-motorista/seguro-uber/como-funciona-seguro-uber"
        assert set(meta["alternates"]) == {"en-US", "pt-BR"}
        assert meta["reading_time"] == 6

        article, breadcrumb = meta["structured_data"]
        assert article["@type"] == "Article"
        assert article["timeRequired"] == "PT6M"
        assert article["publisher"]["logo"]["url"] == f"{BASE}/logo.png"
        assert breadcrumb["@type"] == "BreadcrumbList"
        assert [i["position"] for i in breadcrumb["itemListElement"]] == [1, 2, 3]

    def test_artigo_sem_indexacao(self, client):
        meta = client.get(
            "/api/seo/meta", params={"type": "article", "slug": "internal-note", "locale": "en-US"}
        ).json()
        assert meta["robots"] == "noindex, nofollow"

    def test_artigo_so_pt_tem_um_alternate(self, client):
        meta = client.get(
            "/api/seo/meta", params={"type": "article", "slug": "guia-do-motorista", "locale": "pt-BR"}
        ).json()
        assert list(meta["alternates"]) == ["pt-BR"]

    def test_categoria_por_caminho(self, client):
        meta = client.get(
            "/api/seo/meta",
            params={"type": "category", "slug": "insurance/seguro-motorista", "locale": "pt-BR"},
        ).json()

        assert meta["title"] == "Seguro para Motoristas | GigSafeHub"
        assert meta["description"] == "Seguros para quem dirige por aplicativo"
        assert meta["og_type"] == "website"
        assert meta["alternates"]["en-US"] == f"{BASE}/en-US/insurance/driver-insurance"
        assert meta["structured_data"][0]["@type"] == "BreadcrumbList"

    def test_descricao_da_categoria_em_ingles(self, client):
        meta = client.get(
            "/api/seo/meta",
            params={"type": "category", "slug": "insurance/driver-insurance", "locale": "en-US"},
        ).json()
        assert meta["description"] == "Insurance for ride-hailing drivers"

    def test_nao_encontrado(self, client):
        response = client.get("/api/seo/meta", params={"type": "category", "slug": "nao-existe"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Categoria não encontrada"

    def test_tipo_invalido(self, client):
        response = client.get("/api/seo/meta", params={"type": "page", "slug": "x"})
        assert response.status_code == 422
