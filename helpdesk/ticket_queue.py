"""The queue of tickets waiting to be handled, in arrival order."""

from __future__ import annotations

from typing import Iterator

from .ticket import Ticket, TicketPayload, TicketStatus


class TicketQueue:
    """Tickets in the order they were opened."""

    def __init__(self) -> None:
        self._tickets: list[Ticket] = []

    def add(self, requester_cpf: str, payload: TicketPayload) -> Ticket:
        """Append a new open ticket, numbered from ``Tick-1`` upwards."""
        ticket = Ticket(
            requester_cpf, payload, ticket_id=f"Tick-{len(self._tickets) + 1}"
        )
        self._tickets.append(ticket)
        return ticket

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._tickets)

    def __getitem__(self, index: int) -> Ticket:
        return self._tickets[index]

    def count_by_status(self, status: TicketStatus | str) -> int:
        """Number of tickets with the given status."""
        wanted = TicketStatus(status)
        return sum(1 for ticket in self._tickets if ticket.status is wanted)

    def describe(self) -> str:
        """Every ticket's description, each followed by a blank line."""
        return "".join(f"{ticket.describe()}\n" for ticket in self._tickets)