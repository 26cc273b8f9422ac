"""Tickets: the common envelope around a specific kind of request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class TicketStatus(str, Enum):
    """Lifecycle state of a ticket."""

    OPEN = "A"
    FINALIZED = "F"


class TicketKind(str, Enum):
    """Kind of request a ticket carries."""

    SOFTWARE = "S"
    MAINTENANCE = "M"
    OTHER = "O"


class TicketPayload(Protocol):
    """What a specific request must provide to be carried by a ticket."""

    def estimated_time(self) -> int: ...

    def kind(self) -> TicketKind: ...

    def describe(self) -> str: ...


@dataclass
class Ticket:
    """A request opened by a user, with an identifier and a status."""

    requester_cpf: str
    payload: TicketPayload
    ticket_id: str = ""
    status: TicketStatus = TicketStatus.OPEN

    def estimated_time(self) -> int:
        return self.payload.estimated_time()

    def kind(self) -> TicketKind:
        return self.payload.kind()

    def finalize(self) -> None:
        self.status = TicketStatus.FINALIZED

    def describe(self) -> str:
        status_line = {
            TicketStatus.FINALIZED: "- Status: Finalizado\n",
            TicketStatus.OPEN: "- Status: Aberto\n",
        }.get(self.status, "")
        return (
            "---------TICKET-----------\n"
            f"- ID: {self.ticket_id}\n"
            f"- Usuario solicitante: {self.requester_cpf}\n"
            f"{self.payload.describe()}"
            f"{status_line}"
            "-------------------------\n"
        )