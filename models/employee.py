"""
Funcionários e cargos.
O cargo é uma entidade editável; o prefixo do cargo gera o código do funcionário.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Role:
    id: str
    name: str
    prefix: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "prefix": self.prefix}

    @classmethod
    def from_dict(cls, data: dict) -> "Role":
        return cls(id=str(data["id"]), name=data.get("name") or "", prefix=data.get("prefix") or "")


@dataclass
class Employee:
    id: str
    cod: str
    name: str
    role_id: str
    password_hash: Optional[str] = None  # None = login sem senha
    cpf: Optional[str] = None
    rg: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    admission_date: Optional[str] = None
    salary: Optional[float] = None

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "cod": self.cod,
            "name": self.name,
            "roleId": self.role_id,
            "passwordHash": self.password_hash,
            "cpf": self.cpf,
            "rg": self.rg,
            "phone": self.phone,
            "address": self.address,
            "admissionDate": self.admission_date,
            "salary": self.salary,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        salary = data.get("salary")
        return cls(
            id=str(data["id"]),
            cod=data.get("cod") or "",
            name=data.get("name") or "",
            role_id=str(data.get("roleId") or ""),
            password_hash=data.get("passwordHash") or None,
            cpf=data.get("cpf"),
            rg=data.get("rg"),
            phone=data.get("phone"),
            address=data.get("address"),
            admission_date=data.get("admissionDate"),
            salary=float(salary) if salary is not None else None,
        )


@dataclass(frozen=True)
class CurrentUser:
    """
    Quem está no caixa agora. Nunca é persistido.
    """

    id: str
    cod: str
    name: str
    role_id: str
    role_name: str
