# sistemas/conteudo/schemas.py
"""
Schemas Pydantic das respostas do sistema de Conteúdo
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# ==========================================
# Categorias
# ==========================================

class BreadcrumbItem(BaseModel):
    """Item da trilha de navegação (raiz -> atual)"""
    id: str
    name: str
    slug: str
    path: str


class CategoryResponse(BaseModel):
    """Categoria com slug e nome já localizados"""
    id: str
    parent_id: Optional[str] = None
    slug: str
    slug_en: str
    slug_pt: str
    name: str
    description: Optional[str] = None
    level: int = 0
    order: int = 0
    icon: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    show_in_navbar: bool = False
    show_in_footer: bool = False
    full_path: str = Field(..., description="Caminho navegável com prefixo de locale")


class ArticleSummary(BaseModel):
    """Artigo em listagens"""
    id: str
    slug: str
    title: str
    excerpt: str = ""
    image_url: Optional[str] = None
    category_id: Optional[str] = None
    visibility: str
    date: Optional[datetime] = None
    reading_time: Optional[int] = None
    full_path: str


class CategoryDetailResponse(CategoryResponse):
    """Categoria resolvida pelo caminho de slugs"""
    breadcrumbs: List[BreadcrumbItem] = []
    children: List[CategoryResponse] = []
    articles: List[ArticleSummary] = []


# ==========================================
# Artigos
# ==========================================

class ArticleDetailResponse(ArticleSummary):
    """Artigo completo, com caminhos alternativos por locale"""
    slug_en: str
    slug_pt: str
    title_menu: Optional[str] = None
    content: str = ""
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    robots_index: bool = True
    updated_at: Optional[datetime] = None
    breadcrumbs: List[BreadcrumbItem] = []
    alternates: Dict[str, str] = Field(default_factory=dict, description="locale -> caminho")


# ==========================================
# Rotas
# ==========================================

class RouteResolveResponse(BaseModel):
    """Resultado da resolução de um caminho do site"""
    kind: str
    locale: str
    canonical_path: Optional[str] = None
    redirect: bool = False
    category: Optional[CategoryResponse] = None
    article: Optional[ArticleSummary] = None
    breadcrumbs: List[BreadcrumbItem] = []


class RouteTranslateResponse(BaseModel):
    """Caminho equivalente no outro idioma"""
    path: str
    source_locale: Optional[str] = None
    target_locale: str


# ==========================================
# Menu
# ==========================================

class MenuNodeResponse(BaseModel):
    id: str
    name: str
    slug: str
    path: str
    order: int = 0
    children: List["MenuNodeResponse"] = []


class MenuArticle(BaseModel):
    id: str
    title: str
    title_menu: str
    slug: str
    full_path: str
    category_id: Optional[str] = None


class MenuSection(BaseModel):
    root: MenuNodeResponse
    items: List[MenuNodeResponse] = []
    menu_articles: List[MenuArticle] = []


class MenuResponse(BaseModel):
    locale: str
    items: List[MenuSection] = []
    footer: List[MenuNodeResponse] = []


MenuNodeResponse.model_rebuild()
