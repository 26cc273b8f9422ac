"""Users who open tickets and technicians who resolve them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .dates import Date, _next_field


@dataclass
class User:
    """A registered user of the help desk."""

    name: str
    cpf: str
    birth: Date
    phone: str
    gender: str
    sector: str
    tickets: int = 0

    @classmethod
    def read(cls, lines: Iterable[str]) -> User:
        """Read a user from name, CPF, birth date, phone, gender and sector lines."""
        it = iter(lines)
        name = _next_field(it)
        cpf = _next_field(it)
        birth = Date.parse(_next_field(it))
        phone = _next_field(it)
        gender = _next_field(it)
        sector = _next_field(it)
        return cls(name, cpf, birth, phone, gender, sector)

    def add_ticket(self) -> None:
        """Count one more ticket opened by this user."""
        self.tickets += 1

    def describe(self) -> str:
        return (
            f"- Nome: {self.name}\n"
            f"- CPF: {self.cpf}\n"
            f"- Data de Nascimento: {self.birth}\n"
            f"- Telefone: {self.phone}\n"
            f"- Genero: {self.gender}\n"
            f"- Setor: {self.sector}\n"
            f"- Tickets solicitados: {self.tickets}\n"
        )


@dataclass
class Technician:
    """A technician with a pool of available hours."""

    name: str
    cpf: str
    birth: Date
    phone: str
    gender: str
    area: str
    salary: int
    available: int
    worked: int = 0

    @classmethod
    def read(cls, lines: Iterable[str]) -> Technician:
        """Read a technician; availability comes before salary in the input."""
        it = iter(lines)
        name = _next_field(it)
        cpf = _next_field(it)
        birth = Date.parse(_next_field(it))
        phone = _next_field(it)
        gender = _next_field(it)
        area = _next_field(it)
        available = int(_next_field(it))
        salary = int(_next_field(it))
        return cls(name, cpf, birth, phone, gender, area, salary, available)

    def assign_hours(self, hours: int) -> None:
        """Move ``hours`` from available time to worked time."""
        self.available -= hours
        self.worked += hours

    def describe(self) -> str:
        return (
            f"- Nome: {self.name}\n"
            f"- CPF: {self.cpf}\n"
            f"- Data de Nascimento: {self.birth}\n"
            f"- Telefone: {self.phone}\n"
            f"- Genero: {self.gender}\n"
            f"- Area de Atuacao: {self.area}\n"
            f"- Salario: {self.salary}.00\n"
            f"- Disponibilidade: {self.available}h\n"
            f"- Tempo Trabalhado: {self.worked}h\n"
        )