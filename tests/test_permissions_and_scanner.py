from services.scanner import ManualScanner, lookup_scanned_product, scan_pix_payload
from utils.permissions import (
    CAIXA,
    CONFIGURACOES,
    FORNECEDORES,
    FUNCIONARIOS,
    PRODUTOS,
    RELATORIOS,
    has_access,
)


def test_vendedor_access():
    assert has_access("Vendedor", CAIXA)
    assert has_access("Vendedor", PRODUTOS)
    assert not has_access("Vendedor", RELATORIOS)
    assert not has_access("Vendedor", FUNCIONARIOS)
    assert not has_access("Vendedor", FORNECEDORES)
    assert not has_access("Vendedor", CONFIGURACOES)


def test_gerente_access():
    assert has_access("Gerente", RELATORIOS)
    assert has_access("Gerente", FUNCIONARIOS)
    assert has_access("Gerente", FORNECEDORES)
    assert not has_access("Gerente", CONFIGURACOES)


def test_administrador_has_everything():
    for feature in (CAIXA, PRODUTOS, RELATORIOS, FUNCIONARIOS, FORNECEDORES, CONFIGURACOES):
        assert has_access("Administrador", feature)


def test_unknown_role_or_feature():
    assert not has_access(None, CAIXA)
    assert not has_access("Estoquista", CAIXA)
    assert not has_access("Administrador", "inexistente")


def test_scanned_code_resolves_product(pos):
    product = lookup_scanned_product(ManualScanner(" PROD-0004 "), pos.catalog)

    assert product.name == "Maçã Fuji"


def test_scanned_unknown_or_cancelled(pos):
    assert lookup_scanned_product(ManualScanner("0000"), pos.catalog) is None
    assert lookup_scanned_product(ManualScanner("   "), pos.catalog) is None
    assert lookup_scanned_product(ManualScanner(), pos.catalog) is None


def test_scanned_pix_payload_is_opaque():
    payload = "00020126580014BR.GOV.BCB.PIX0136"

    assert scan_pix_payload(ManualScanner(payload)) == payload
    assert scan_pix_payload(ManualScanner("")) is None
