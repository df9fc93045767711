"""
Serviço de autenticação e cadastro de funcionários do PDV.
"""
from dataclasses import replace
from typing import Callable, Optional

import bcrypt

from models.app_state import AppState
from models.employee import CurrentUser, Employee
from services import codes
from utils.logger import get_logger

logger = get_logger(__name__)

_UNSET = object()


class AuthService:
    """
    Gerencia login/logout do operador, o usuário atual e os funcionários.
    """

    def __init__(self, state: AppState, commit: Callable[[], None]):
        self.state = state
        self._commit = commit

    @staticmethod
    def hash_password(password: str) -> str:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))

    # ----- Sessão do operador -----

    def login(self, code: str, password: Optional[str] = None) -> bool:
        """
        Autentica pelo código do funcionário. Sem senha cadastrada, qualquer
        senha (ou nenhuma) é aceita. Em caso de sucesso o carrinho é sempre
        esvaziado: um operador não herda a venda em andamento de outro.
        """
        employee = self.find_employee_by_code(code)
        if employee is None:
            logger.info("Login recusado: código %s não encontrado", code)
            return False
        if employee.has_password:
            if not password or not self.verify_password(password, employee.password_hash):
                logger.info("Login recusado: senha inválida para %s", employee.cod)
                return False

        role = next((r for r in self.state.roles if r.id == employee.role_id), None)
        self.state.current_user = CurrentUser(
            id=employee.id,
            cod=employee.cod,
            name=employee.name,
            role_id=employee.role_id,
            role_name=role.name if role else "",
        )
        self.state.cart = []
        logger.info("Operador %s (%s) entrou", employee.cod, employee.name)
        return True

    def logout(self) -> None:
        user = self.state.current_user
        self.state.current_user = None
        self.state.cart = []
        if user:
            logger.info("Operador %s saiu", user.cod)

    def is_authenticated(self) -> bool:
        return self.state.current_user is not None

    def get_current_user(self) -> Optional[CurrentUser]:
        return self.state.current_user

    # ----- Funcionários -----

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.state.employees if e.id == employee_id), None)

    def find_employee_by_code(self, code: str) -> Optional[Employee]:
        code = (code or "").strip().upper()
        if not code:
            return None
        return next((e for e in self.state.employees if e.cod.upper() == code), None)

    def add_employee(
        self,
        name: str,
        role_id: str,
        password: Optional[str] = None,
        **personal,
    ) -> Optional[Employee]:
        """
        Cadastra um funcionário. O código é calculado a partir do prefixo do
        cargo no momento da gravação. Retorna None se o cargo não existir.
        """
        cod = codes.next_employee_code(self.state.roles, self.state.employees, role_id)
        if cod is None:
            logger.info("Cadastro de funcionário ignorado: cargo %s inexistente", role_id)
            return None
        employee = Employee(
            id=codes.new_id(),
            cod=cod,
            name=name,
            role_id=role_id,
            password_hash=self.hash_password(password) if password else None,
            **personal,
        )
        self.state.employees = [*self.state.employees, employee]
        self._commit()
        return employee

    def update_employee(self, employee: Employee, password=_UNSET) -> bool:
        """
        Atualiza os dados do funcionário. `password`: omitido mantém a senha
        atual; None ou "" remove a senha; texto define uma nova senha.
        O código só muda se o cargo mudar: recebe o próximo código do novo
        cargo. Retorna False se o funcionário ou o novo cargo não existir.
        """
        current = self.find_employee(employee.id)
        if current is None:
            return False
        cod = current.cod
        if employee.role_id != current.role_id:
            cod = codes.next_employee_code(self.state.roles, self.state.employees, employee.role_id)
            if cod is None:
                logger.info("Atualização ignorada: cargo %s inexistente", employee.role_id)
                return False
        if password is _UNSET:
            password_hash = current.password_hash
        elif password:
            password_hash = self.hash_password(password)
        else:
            password_hash = None
        updated = replace(employee, cod=cod, password_hash=password_hash)
        self.state.employees = [updated if e.id == employee.id else e for e in self.state.employees]
        self._commit()
        return True

    def delete_employee(self, employee_id: str) -> bool:
        if self.find_employee(employee_id) is None:
            return False
        self.state.employees = [e for e in self.state.employees if e.id != employee_id]
        self._commit()
        return True
