"""
Produtos do mercado e regras de quantidade por unidade de medida.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Quantity = Union[int, float]

WEIGHT_DECIMALS = 3


class DiscreteQuantity:
    """
    Quantidade contada (UN, CX): sempre inteira, truncada para baixo.
    """

    is_weighed = False

    def normalize(self, value) -> int:
        return int(math.floor(float(value)))

    def add(self, a, b) -> int:
        return self.normalize(a) + self.normalize(b)

    def subtract(self, a, b) -> int:
        return self.normalize(a) - self.normalize(b)

    def format(self, value) -> str:
        return str(self.normalize(value))


class WeighedQuantity:
    """
    Quantidade pesada (KG, G): fracionária, 3 casas decimais por convenção.
    """

    is_weighed = True

    def normalize(self, value) -> float:
        return round(float(value), WEIGHT_DECIMALS)

    def add(self, a, b) -> float:
        return self.normalize(float(a) + float(b))

    def subtract(self, a, b) -> float:
        return self.normalize(float(a) - float(b))

    def format(self, value) -> str:
        return f"{self.normalize(value):.{WEIGHT_DECIMALS}f}"


_DISCRETE = DiscreteQuantity()
_WEIGHED = WeighedQuantity()


class Unit(str, Enum):
    UN = "UN"
    KG = "KG"
    G = "G"
    CX = "CX"

    @property
    def quantity(self):
        """Regra de quantidade associada à unidade."""
        if self in (Unit.KG, Unit.G):
            return _WEIGHED
        return _DISCRETE

    @classmethod
    def parse(cls, value) -> "Unit":
        if isinstance(value, Unit):
            return value
        try:
            return cls((value or "UN").strip().upper())
        except ValueError:
            return cls.UN


@dataclass
class Product:
    id: str
    cod: str
    name: str
    price: float = 0.0
    stock: Quantity = 0
    unit: Unit = Unit.UN
    supplier_id: Optional[str] = None

    @property
    def rule(self):
        return self.unit.quantity

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "cod": self.cod,
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "unit": self.unit.value,
            "supplierId": self.supplier_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        unit = Unit.parse(data.get("unit"))
        return cls(
            id=str(data["id"]),
            cod=data.get("cod") or "",
            name=data.get("name") or "",
            price=float(data.get("price") or 0.0),
            stock=unit.quantity.normalize(data.get("stock") or 0),
            unit=unit,
            supplier_id=data.get("supplierId"),
        )
