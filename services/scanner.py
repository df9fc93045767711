"""
Leitura de código de barras / QR code.
O PDV só precisa do texto decodificado; a captura (câmera, leitor USB,
digitação) fica com quem implementa `scan()`.
"""
from typing import Optional

from models.product import Product


class Scanner:
    """Interface: retorna o texto lido ou None se a leitura foi cancelada."""

    def scan(self) -> Optional[str]:
        raise NotImplementedError


class ManualScanner(Scanner):
    """Código digitado (ou vindo de um leitor que emula teclado)."""

    def __init__(self, value: Optional[str] = None):
        self.value = value

    def scan(self) -> Optional[str]:
        text = (self.value or "").strip()
        return text or None


def lookup_scanned_product(scanner: Scanner, catalog) -> Optional[Product]:
    """Resolve o código lido para um produto do catálogo pelo `cod`."""
    code = scanner.scan()
    if code is None:
        return None
    return catalog.find_product_by_code(code)


def scan_pix_payload(scanner: Scanner) -> Optional[str]:
    """Payload do QR PIX, repassado sem interpretação para a finalização."""
    return scanner.scan()
