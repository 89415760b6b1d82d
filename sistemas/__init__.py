# sistemas/__init__.py
