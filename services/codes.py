"""
Geração de códigos sequenciais legíveis (PROD-0001, ADM-001, FOR-001).
O próximo código deriva do maior número já visto, nunca da contagem,
para que exclusões não causem reaproveitamento.
"""
import re
import uuid
from typing import Iterable, Optional, Sequence

from models.employee import Employee, Role

_NON_DIGITS = re.compile(r"\D")


def _numeric_suffix(code: str) -> int:
    digits = _NON_DIGITS.sub("", code or "")
    return int(digits) if digits else 0


def _max_suffix(codes: Iterable[str]) -> int:
    return max((_numeric_suffix(c) for c in codes), default=0)


def next_product_code(codes: Iterable[str]) -> str:
    return f"PROD-{_max_suffix(codes) + 1:04d}"


def next_supplier_code(codes: Iterable[str]) -> str:
    return f"FOR-{_max_suffix(codes) + 1:03d}"


def next_employee_code(
    roles: Sequence[Role], employees: Sequence[Employee], role_id: str
) -> Optional[str]:
    """
    Próximo código para o cargo informado: '{prefixo}-{n:03d}'.
    Considera apenas funcionários cujo código começa com '{prefixo}-'.
    Retorna None se o cargo não existir.
    """
    role = next((r for r in roles if r.id == role_id), None)
    if role is None:
        return None
    prefix = f"{role.prefix}-"
    same_prefix = [e.cod[len(prefix):] for e in employees if e.cod.startswith(prefix)]
    return f"{role.prefix}-{_max_suffix(same_prefix) + 1:03d}"


def new_id() -> str:
    """Identificador interno estável (não exibido ao usuário)."""
    return uuid.uuid4().hex
