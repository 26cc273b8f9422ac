"""Registries of users and technicians, kept in registration order."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .dates import Date
from .people import Technician, User

REFERENCE_DATE = Date(18, 2, 2025)
"""The day ages are measured against unless another date is given."""

_ITEM_SEPARATOR = "--------------------\n"


def _truncated_mean(values: list[int], what: str) -> int:
    """Integer mean of ``values``, truncated toward zero."""
    if not values:
        raise ValueError(f"no {what} registered")
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def _find(people: Sequence[User | Technician], cpf: str) -> int | None:
    return next(
        (index for index, person in enumerate(people) if person.cpf == cpf),
        None,
    )


def _mean_age(people: Iterable[User | Technician], today: Date, what: str) -> int:
    return _truncated_mean([person.birth.years_until(today) for person in people], what)


def _listing(title: str, people: Iterable[User | Technician], closing: str) -> str:
    body = "".join(f"{_ITEM_SEPARATOR}{person.describe()}" for person in people)
    return f"{title}{body}{closing}\n"


class UserRegistry:
    """Registered users; a second user with a known CPF is ignored."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add(self, user: User) -> bool:
        """Register ``user``; return False if its CPF is already known."""
        if self.index_of(user.cpf) is not None:
            return False
        self._users.append(user)
        return True

    def index_of(self, cpf: str) -> int | None:
        """Position of the user with ``cpf``, or ``None`` if not registered."""
        return _find(self._users, cpf)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def __getitem__(self, index: int) -> User:
        return self._users[index]

    def ranking(self) -> list[User]:
        """Users by tickets opened, most first; ties in name order."""
        return sorted(self._users, key=lambda user: (-user.tickets, user.name))

    def describe(self) -> str:
        return _listing(
            "----- BANCO DE USUARIOS -----\n",
            self._users,
            "----------------------------\n",
        )

    def describe_ranking(self) -> str:
        return _listing(
            "----- RANKING DE USUARIOS -----\n",
            self.ranking(),
            "-------------------------------\n",
        )

    def average_age(self, today: Date = REFERENCE_DATE) -> int:
        """Mean age in whole years on ``today``, truncated toward zero."""
        return _mean_age(self._users, today, "users")


class TechnicianRegistry:
    """Registered technicians; a second one with a known CPF is ignored."""

    def __init__(self) -> None:
        self._technicians: list[Technician] = []

    def add(self, technician: Technician) -> bool:
        """Register ``technician``; return False if its CPF is already known."""
        if self.index_of(technician.cpf) is not None:
            return False
        self._technicians.append(technician)
        return True

    def index_of(self, cpf: str) -> int | None:
        """Position of the technician with ``cpf``, or ``None`` if not registered."""
        return _find(self._technicians, cpf)

    def __len__(self) -> int:
        return len(self._technicians)

    def __iter__(self) -> Iterator[Technician]:
        return iter(self._technicians)

    def __getitem__(self, index: int) -> Technician:
        return self._technicians[index]

    def add_hours(self, cpf: str, hours: int) -> None:
        """Assign ``hours`` to the technician with ``cpf``, if registered."""
        index = self.index_of(cpf)
        if index is not None:
            self._technicians[index].assign_hours(hours)

    def ranking(self) -> list[Technician]:
        """Technicians by hours worked, most first; ties in name order."""
        return sorted(self._technicians, key=lambda tech: (-tech.worked, tech.name))

    def describe(self) -> str:
        return _listing(
            "----- BANCO DE TECNICOS -----\n",
            self._technicians,
            "----------------------------\n",
        )

    def describe_ranking(self) -> str:
        return _listing(
            "----- RANKING DE TECNICOS -----\n",
            self.ranking(),
            "-------------------------------\n",
        )

    def average_age(self, today: Date = REFERENCE_DATE) -> int:
        """Mean age in whole years on ``today``, truncated toward zero."""
        return _mean_age(self._technicians, today, "technicians")

    def average_worked(self) -> int:
        """Mean hours worked, truncated toward zero."""
        return _truncated_mean(
            [tech.worked for tech in self._technicians], "technicians"
        )