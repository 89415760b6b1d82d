"""
Setup script para instalação do projeto GigSafeHub API.

Este arquivo permite instalar o projeto em modo editable para desenvolvimento:
    pip install -e .[test]

Isso adiciona o projeto ao PYTHONPATH e permite imports como:
    from services.taxonomia import CategoryIndex
"""

from setuptools import setup, find_packages

setup(
    name="gigsafehub-api",
    version="1.0.0",
    description="GigSafeHub - API de conteúdo bilíngue, SEO e calculadoras",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "sqlalchemy>=2.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
        "structlog>=24.1",
        "httpx>=0.27",
        "slowapi>=0.1.9",
    ],
    extras_require={
        "postgres": ["psycopg2-binary>=2.9"],
        "test": ["pytest>=8.0", "httpx>=0.27"],
    },
)
