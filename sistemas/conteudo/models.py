# sistemas/conteudo/models.py
"""
Modelos do sistema de Conteúdo (categorias e artigos)
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean, Float
from sqlalchemy.orm import relationship

from database.connection import Base
from utils.timezone import get_utc_now


class Categoria(Base):
    """Nó da taxonomia do site (ex: Seguros > Seguro para Motoristas)"""
    __tablename__ = "categorias"

    id = Column(Integer, primary_key=True, index=True)
    parent_id = Column(Integer, ForeignKey("categorias.id"), nullable=True, index=True)

    # Slugs: slug é o padrão; slug_en/slug_pt sobrepõem por idioma
    slug = Column(String(200), nullable=False, index=True)
    slug_en = Column(String(200), nullable=True)
    slug_pt = Column(String(200), nullable=True)

    level = Column(Integer, default=0)  # apenas dica; a profundidade real vem do parent_id
    order = Column(Integer, nullable=True)

    name = Column(String(200), nullable=False)
    name_en = Column(String(200), nullable=True)
    name_pt = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    description_pt = Column(Text, nullable=True)
    meta_title = Column(String(300), nullable=True)
    meta_description = Column(Text, nullable=True)
    icon = Column(String(100), nullable=True)

    show_in_navbar = Column(Boolean, default=False)
    show_in_footer = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True, index=True)

    criado_em = Column(DateTime(timezone=True), default=get_utc_now)
    atualizado_em = Column(DateTime(timezone=True), default=get_utc_now, onupdate=get_utc_now)

    parent = relationship("Categoria", remote_side=[id], backref="children")
    articles = relationship("Artigo", back_populates="category")

    def to_record_dict(self) -> dict:
        return {
            "id": self.id,
            "parent_id": self.parent_id,
            "slug": self.slug,
            "slug_en": self.slug_en,
            "slug_pt": self.slug_pt,
            "level": self.level or 0,
            "order": self.order,
            "name": self.name,
            "name_en": self.name_en,
            "name_pt": self.name_pt,
            "description": self.description,
            "description_en": self.description_en,
            "description_pt": self.description_pt,
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "icon": self.icon,
            "show_in_navbar": bool(self.show_in_navbar),
            "show_in_footer": bool(self.show_in_footer),
        }

    def __repr__(self):
        return f"<Categoria(id={self.id}, slug='{self.slug}', parent_id={self.parent_id})>"


class Artigo(Base):
    """Artigo publicado no site"""
    __tablename__ = "artigos"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categorias.id"), nullable=True, index=True)

    slug = Column(String(250), nullable=False, index=True)
    slug_en = Column(String(250), nullable=True)
    slug_pt = Column(String(250), nullable=True)

    # pt_BR, en_US ou Both
    locale = Column(String(10), default="Both")

    title = Column(String(300), nullable=False)
    title_menu = Column(String(120), nullable=True)
    excerpt = Column(Text, default="")
    content = Column(Text, default="")
    image_url = Column(String(500), nullable=True)
    reading_time = Column(Integer, nullable=True)

    meta_title = Column(String(300), nullable=True)
    meta_description = Column(Text, nullable=True)
    robots_index = Column(Boolean, default=True)
    show_in_menu = Column(Boolean, default=False)
    sitemap_priority = Column(Float, nullable=True)
    sitemap_changefreq = Column(String(20), nullable=True)

    is_published = Column(Boolean, default=True, index=True)
    date = Column(DateTime(timezone=True), default=get_utc_now)
    updated_at = Column(DateTime(timezone=True), default=get_utc_now, onupdate=get_utc_now)
    last_modified = Column(DateTime(timezone=True), nullable=True)

    category = relationship("Categoria", back_populates="articles")

    def to_record_dict(self) -> dict:
        return {
            "id": self.id,
            "category_id": self.category_id,
            "slug": self.slug,
            "slug_en": self.slug_en,
            "slug_pt": self.slug_pt,
            "locale": self.locale,
            "title": self.title,
            "title_menu": self.title_menu,
            "excerpt": self.excerpt or "",
            "content": self.content or "",
            "image_url": self.image_url,
            "reading_time": self.reading_time,
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "robots_index": self.robots_index if self.robots_index is not None else True,
            "show_in_menu": bool(self.show_in_menu),
            "sitemap_priority": self.sitemap_priority,
            "sitemap_changefreq": self.sitemap_changefreq,
            "date": self.date,
            "updated_at": self.updated_at,
            "last_modified": self.last_modified,
        }

    def __repr__(self):
        return f"<Artigo(id={self.id}, slug='{self.slug}', locale='{self.locale}')>"
