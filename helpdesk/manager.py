"""The help desk: registration, ticket distribution, reports and the command."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable

from .dates import _next_field
from .people import Technician, User
from .registry import TechnicianRegistry, UserRegistry
from .ticket import Ticket, TicketKind, TicketPayload, TicketStatus
from .ticket_queue import TicketQueue
from .ticket_types import MaintenanceRequest, OtherRequest, SoftwareRequest

_IT_AREA = "TI"


class HelpDesk:
    """Users, technicians and the queue of tickets between them."""

    def __init__(self) -> None:
        self.users = UserRegistry()
        self.technicians = TechnicianRegistry()
        self.queue = TicketQueue()

    def register_ticket(self, lines: Iterable[str]) -> Ticket | None:
        """Read a ticket request and queue it if the requester is registered.

        The request's lines are consumed even when it is discarded. Returns
        the queued ticket, or ``None``.
        """
        it = iter(lines)
        cpf = _next_field(it)
        kind = _next_field(it)
        index = self.users.index_of(cpf)
        requester = None if index is None else self.users[index]

        payload: TicketPayload
        if kind == "MANUTENCAO":
            sector = requester.sector if requester is not None else ""
            payload = MaintenanceRequest.read(it, sector)
        elif kind == "OUTROS":
            payload = OtherRequest.read(it)
        elif kind == "SOFTWARE":
            payload = SoftwareRequest.read(it)
        else:
            return None

        if requester is None:
            return None
        ticket = self.queue.add(cpf, payload)
        requester.add_ticket()
        return ticket

    def distribute(self) -> None:
        """Hand open tickets to technicians in round-robin order.

        Software tickets go to IT technicians and all others to the rest; a
        technician takes a ticket only with enough hours available for it.
        """
        technicians = list(self.technicians)
        count = len(technicians)
        start = 0
        for ticket in self.queue:
            if ticket.status is TicketStatus.FINALIZED:
                continue
            is_software = ticket.kind() is TicketKind.SOFTWARE
            for offset in range(count):
                index = (start + offset) % count
                technician = technicians[index]
                if is_software != (technician.area == _IT_AREA):
                    continue
                hours = ticket.estimated_time()
                if hours <= technician.available:
                    technician.assign_hours(hours)
                    ticket.finalize()
                    start = (index + 1) % count
                    break

    def report(self) -> str:
        """The general report of tickets, users and technicians."""
        open_count = self.queue.count_by_status(TicketStatus.OPEN)
        closed_count = self.queue.count_by_status(TicketStatus.FINALIZED)
        user_age = self.users.average_age()
        tech_age = self.technicians.average_age()
        tech_worked = self.technicians.average_worked()
        return (
            "----- RELATORIO GERAL -----\n"
            f"- Qtd tickets: {len(self.queue)}\n"
            f"- Qtd tickets (A): {open_count}\n"
            f"- Qtd tickets (F): {closed_count}\n"
            f"- Qtd usuarios: {len(self.users)}\n"
            f"- Md idade usuarios: {user_age}\n"
            f"- Qtd tecnicos: {len(self.technicians)}\n"
            f"- Md idade tecnicos: {tech_age}\n"
            f"- Md trabalho tecnicos: {tech_worked}\n"
            "---------------------------\n\n"
        )

    def _queue_listing(self) -> str:
        return (
            "----- FILA DE TICKETS -----\n"
            f"{self.queue.describe()}"
            "---------------------------\n\n"
        )

    def _distribute_quietly(self) -> str:
        self.distribute()
        return ""

    def perform(self, action: str) -> str:
        """Carry out a named action and return what it prints.

        Unknown actions do nothing.
        """
        actions: dict[str, Callable[[], str]] = {
            "DISTRIBUI": self._distribute_quietly,
            "NOTIFICA": self._queue_listing,
            "USUARIOS": self.users.describe,
            "TECNICOS": self.technicians.describe,
            "RANKING TECNICOS": self.technicians.describe_ranking,
            "RANKING USUARIOS": self.users.describe_ranking,
            "RELATORIO": self.report,
        }
        handler = actions.get(action)
        return handler() if handler is not None else ""

    def run(self, lines: Iterable[str]) -> str:
        """Process operations until ``F`` or end of input; return the output.

        Operations: ``T`` registers a technician, ``U`` a user, ``A`` opens a
        ticket and ``E`` performs the action named on the next line.
        """
        it = iter(lines)
        output: list[str] = []
        while True:
            try:
                operation = _next_field(it)[0]
            except EOFError:
                break
            if operation == "F":
                break
            if operation == "T":
                self.technicians.add(Technician.read(it))
            elif operation == "U":
                self.users.add(User.read(it))
            elif operation == "A":
                self.register_ticket(it)
            elif operation == "E":
                output.append(self.perform(_next_field(it)))
        return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Run the help desk over standard input, writing to standard output."""
    parser = argparse.ArgumentParser(
        prog="helpdesk",
        description="Process help desk operations read from standard input.",
    )
    parser.parse_args(argv)
    sys.stdout.write(HelpDesk().run(sys.stdin))
    return 0


if __name__ == "__main__":
    sys.exit(main())