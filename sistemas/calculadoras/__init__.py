# sistemas/calculadoras/__init__.py
"""
Sistema de Calculadoras - ferramentas financeiras para motoristas de aplicativo
"""
