from dataclasses import dataclass

from helpdesk.ticket import Ticket, TicketKind, TicketStatus


@dataclass
class FakePayload:
    hours: int
    what: TicketKind = TicketKind.OTHER

    def estimated_time(self):
        return self.hours

    def kind(self):
        return self.what

    def describe(self):
        return f"- Fake: {self.hours}\n"


def make_ticket(hours=4, kind=TicketKind.OTHER):
    return Ticket("cpf-001", FakePayload(hours, kind), ticket_id="Tick-1")


def test_new_ticket_is_open():
    assert make_ticket().status is TicketStatus.OPEN


def test_status_codes_match_single_letters():
    ticket = make_ticket(kind=TicketKind.SOFTWARE)
    assert ticket.status == "A"
    assert ticket.kind() == "S"
    ticket.finalize()
    assert ticket.status == "F"


def test_finalize_changes_status():
    ticket = make_ticket()
    ticket.finalize()
    assert ticket.status is TicketStatus.FINALIZED


def test_estimated_time_and_kind_come_from_payload():
    ticket = make_ticket(hours=9, kind=TicketKind.SOFTWARE)
    assert ticket.estimated_time() == 9
    assert ticket.kind() is TicketKind.SOFTWARE


def test_describe_open_ticket():
    lines = make_ticket(hours=4).describe().splitlines()
    assert lines[0] == "---------TICKET-----------"
    assert lines[1] == "- ID: Tick-1"
    assert lines[2] == "- Usuario solicitante: cpf-001"
    assert lines[3] == "- Fake: 4"
    assert lines[4] == "- Status: Aberto"
    assert lines[5] == "-------------------------"


def test_describe_finalized_ticket():
    ticket = make_ticket()
    ticket.finalize()
    text = ticket.describe()
    assert "- Status: Finalizado\n" in text
    assert "Aberto" not in text
    assert text.endswith("-------------------------\n")