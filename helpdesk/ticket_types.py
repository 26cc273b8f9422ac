"""The specific kinds of request a ticket can carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .dates import _next_field
from .ticket import TicketKind

_BUG_HOURS = 3
_OTHER_CATEGORY_HOURS = 2
_QUESTION_HOURS = 1

_CONDITION_HOURS = {"RUIM": 3, "REGULAR": 2, "BOM": 1}
_SECTOR_HOURS = {
    "RH": 2,
    "FINANCEIRO": 3,
    "P&D": 1,
    "VENDAS": 1,
    "MARKETING": 1,
}


def software_estimate(category: str, impact: int) -> int:
    """Hours estimated for a software request.

    A ``BUG`` takes the longest. ``DUVIDAS`` gets the middle base, and
    every other category, ``OUTROS`` included, gets the smallest base.
    """
    if category == "BUG":
        return _BUG_HOURS + impact
    if category != "DUVIDAS":
        return _QUESTION_HOURS + impact
    return _OTHER_CATEGORY_HOURS + impact


def maintenance_estimate(condition: str, sector: str) -> int:
    """Hours estimated for a maintenance request.

    The estimate is the condition weight times the sector weight. An
    unknown condition or sector weighs zero.
    """
    return _CONDITION_HOURS.get(condition, 0) * _SECTOR_HOURS.get(sector, 0)


@dataclass
class SoftwareRequest:
    """A problem or question about a piece of software."""

    name: str
    category: str
    impact: int
    reason: str

    @classmethod
    def read(cls, lines: Iterable[str]) -> SoftwareRequest:
        """Read name, category, impact and reason lines."""
        it = iter(lines)
        name = _next_field(it)
        category = _next_field(it)
        impact = int(_next_field(it))
        reason = _next_field(it)
        return cls(name, category, impact, reason)

    def estimated_time(self) -> int:
        return software_estimate(self.category, self.impact)

    def kind(self) -> TicketKind:
        return TicketKind.SOFTWARE

    def describe(self) -> str:
        return (
            "- Tipo: Software\n"
            f"- Nome do software: {self.name}\n"
            f"- Categoria: {self.category}\n"
            f"- Nível do impacto: {self.impact}\n"
            f"- Motivo: {self.reason}\n"
            f"- Tempo estimado: {self.estimated_time()}h\n"
        )


@dataclass
class MaintenanceRequest:
    """Maintenance of a physical item, weighted by the requester's sector."""

    name: str
    condition: str
    location: str
    sector: str

    @classmethod
    def read(cls, lines: Iterable[str], sector: str) -> MaintenanceRequest:
        """Read item name, condition and location lines."""
        it = iter(lines)
        name = _next_field(it)
        condition = _next_field(it)
        location = _next_field(it)
        return cls(name, condition, location, sector)

    def estimated_time(self) -> int:
        return maintenance_estimate(self.condition, self.sector)

    def kind(self) -> TicketKind:
        return TicketKind.MAINTENANCE

    def describe(self) -> str:
        return (
            "- Tipo: Manutencao\n"
            f"- Nome do item: {self.name}\n"
            f"- Estado de conservacao: {self.condition}\n"
            f"- Local: {self.location}\n"
            f"- Tempo estimado: {self.estimated_time()}h\n"
        )


@dataclass
class OtherRequest:
    """Any other request; its difficulty level is its estimate in hours."""

    description: str
    location: str
    level: int

    @classmethod
    def read(cls, lines: Iterable[str]) -> OtherRequest:
        """Read description, location and difficulty level lines."""
        it = iter(lines)
        description = _next_field(it)
        location = _next_field(it)
        level = int(_next_field(it))
        return cls(description, location, level)

    def estimated_time(self) -> int:
        return self.level

    def kind(self) -> TicketKind:
        return TicketKind.OTHER

    def describe(self) -> str:
        return (
            "- Tipo: Outros\n"
            f"- Descricao: {self.description}\n"
            f"- Local: {self.location}\n"
            f"- Nivel de Dificuldade: {self.level}\n"
            f"- Tempo Estimado: {self.estimated_time()}h\n"
        )