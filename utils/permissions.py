"""
Matriz de acesso por cargo (comparação pelo nome do cargo).
"""
from typing import Optional

CAIXA = "caixa"
PRODUTOS = "produtos"
FUNCIONARIOS = "funcionarios"
CONFIGURACOES = "configuracoes"
FORNECEDORES = "fornecedores"
RELATORIOS = "relatorios"

FEATURE_ROLES = {
    CAIXA: ("Vendedor", "Gerente", "Administrador"),
    PRODUTOS: ("Vendedor", "Gerente", "Administrador"),
    RELATORIOS: ("Gerente", "Administrador"),
    FORNECEDORES: ("Gerente", "Administrador"),
    FUNCIONARIOS: ("Gerente", "Administrador"),
    CONFIGURACOES: ("Administrador",),
}


def has_access(role_name: Optional[str], feature: str) -> bool:
    if not role_name:
        return False
    return role_name in FEATURE_ROLES.get(feature, ())
