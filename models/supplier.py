from dataclasses import dataclass
from typing import Optional


@dataclass
class Supplier:
    """
    Fornecedor (dado de referência).
    """

    id: str
    cod: str
    name: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "cod": self.cod,
            "name": self.name,
            "contactPerson": self.contact_person,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Supplier":
        return cls(
            id=str(data["id"]),
            cod=data.get("cod") or "",
            name=data.get("name") or "",
            contact_person=data.get("contactPerson"),
            phone=data.get("phone"),
            email=data.get("email"),
            address=data.get("address"),
        )
