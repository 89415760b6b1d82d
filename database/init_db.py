# database/init_db.py
"""
Inicialização do banco de dados e seed do conteúdo de exemplo
"""

import time

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from config import SEED_SAMPLE_CONTENT
from database.connection import engine, Base, SessionLocal

# Importa modelos para criar tabelas
from sistemas.conteudo.models import Categoria, Artigo
from utils.logging_config import get_logger

logger = get_logger(__name__)


# Categorias de exemplo: (ref, parent_ref, slug, slug_pt, name_en, name_pt, order, navbar, footer)
SEED_CATEGORIAS = [
    ("insurance", None, "insurance", "seguros", "Insurance", "Seguros", 1, True, True),
    ("banking", None, "banking", "banco", "Banking", "Banco", 2, True, True),
    ("guides", None, "guides", "guias", "Guides", "Guias", 4, True, False),
    ("blog", None, "blog", "blog", "Blog", "Blog", 5, False, True),
    ("drivers", "insurance", "insurance-for-drivers", "seguros-para-motoristas",
     "Insurance for Drivers", "Seguros para Motoristas", 1, True, True),
    ("delivery", "insurance", "insurance-for-delivery", "seguros-para-entregadores",
     "Insurance for Delivery Workers", "Seguros para Entregadores", 2, True, False),
    ("freelancers", "insurance", "insurance-for-freelancers", "seguros-para-freelancers",
     "Insurance for Freelancers", "Seguros para Freelancers", 3, True, False),
    ("uber", "drivers", "uber-insurance", "seguro-para-uber", "Uber Insurance", "Seguro para Uber", 1, True, False),
    ("99", "drivers", "99-insurance", "seguro-para-99", "99 Insurance", "Seguro para 99", 2, True, False),
    ("moto", "delivery", "motorcycle-insurance", "seguro-para-moto",
     "Motorcycle Insurance", "Seguro para Moto", 1, True, False),
]

# Descrições das categorias principais: ref -> (en, pt)
SEED_DESCRICOES = {
    "insurance": (
        "Insurance guides for gig workers, drivers and freelancers",
        "Guias de seguro para trabalhadores de aplicativo, motoristas e freelancers",
    ),
    "banking": (
        "Digital accounts, cards and credit for gig workers",
        "Contas digitais, cartões e crédito para quem trabalha por aplicativo",
    ),
    "drivers": (
        "Car and life insurance for ride-hailing drivers",
        "Seguro de carro e de vida para motoristas de aplicativo",
    ),
}

# Artigos de exemplo: (categoria_ref, slug_en, slug_pt, locale, title, show_in_menu)
SEED_ARTIGOS = [
    ("uber", "how-uber-insurance-works", "como-funciona-o-seguro-uber", "Both",
     "How Uber insurance works", True),
    ("drivers", "best-insurance-for-app-drivers", "melhor-seguro-para-motorista-de-app", "Both",
     "Best insurance for app drivers", True),
    ("moto", None, "seguro-moto-entregador-vale-a-pena", "pt_BR",
     "Seguro de moto para entregador vale a pena?", False),
    (None, "gig-economy-glossary", "glossario-da-economia-gig", "Both",
     "Gig economy glossary", False),
]


def wait_for_db(max_retries=10, delay=3):
    """Aguarda o banco de dados ficar disponível"""
    for attempt in range(max_retries):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Conexão com banco de dados estabelecida")
            return True
        except OperationalError:
            if attempt < max_retries - 1:
                logger.warning(f"Aguardando banco de dados... tentativa {attempt + 1}/{max_retries}")
                time.sleep(delay)
            else:
                logger.error(f"Não foi possível conectar ao banco após {max_retries} tentativas")
                raise
    return False


def create_tables():
    """Cria todas as tabelas no banco de dados"""
    Base.metadata.create_all(bind=engine)
    logger.info("Tabelas criadas com sucesso")


def seed_sample_content(db=None):
    """
    Cria categorias e artigos de exemplo se o banco estiver vazio.

    Returns:
        Quantidade de registros criados (0 se já havia conteúdo)
    """
    own_session = db is None
    db = db or SessionLocal()
    try:
        existing = db.query(Categoria).count()
        if existing:
            logger.info(f"{existing} categoria(s) já existem no banco, seed ignorado")
            return 0

        refs = {}
        for ref, parent_ref, slug, slug_pt, name_en, name_pt, order, navbar, footer in SEED_CATEGORIAS:
            parent = refs.get(parent_ref)
            description_en, description_pt = SEED_DESCRICOES.get(ref, (None, None))
            categoria = Categoria(
                parent_id=parent.id if parent else None,
                slug=slug,
                slug_en=slug,
                slug_pt=slug_pt,
                level=(parent.level + 1) if parent else 0,
                order=order,
                name=name_en,
                name_en=name_en,
                name_pt=name_pt,
                description=description_en,
                description_en=description_en,
                description_pt=description_pt,
                show_in_navbar=navbar,
                show_in_footer=footer,
            )
            db.add(categoria)
            db.flush()
            refs[ref] = categoria

        for categoria_ref, slug_en, slug_pt, locale, title, show_in_menu in SEED_ARTIGOS:
            categoria = refs.get(categoria_ref)
            db.add(Artigo(
                category_id=categoria.id if categoria else None,
                slug=slug_en or slug_pt,
                slug_en=slug_en,
                slug_pt=slug_pt,
                locale=locale,
                title=title,
                excerpt=title,
                show_in_menu=show_in_menu,
            ))

        db.commit()
        total = len(SEED_CATEGORIAS) + len(SEED_ARTIGOS)
        logger.info(f"Conteúdo de exemplo criado ({total} registros)")
        return total
    except Exception:
        db.rollback()
        raise
    finally:
        if own_session:
            db.close()


def init_database():
    """Inicializa o banco de dados completo"""
    logger.info("Inicializando banco de dados...")
    wait_for_db()
    create_tables()
    if SEED_SAMPLE_CONTENT:
        seed_sample_content()
    logger.info("Banco de dados inicializado")


if __name__ == "__main__":
    init_database()
