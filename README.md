# helpdesk

A small help-desk ticket system driven by standard input. It keeps users and
technicians in memory, along with a queue of tickets for software, maintenance
and other requests. It can hand open tickets to technicians and print listings,
rankings and a general report.

## Installation

    pip install .

## Usage

The `helpdesk` command reads operations from standard input. It writes
everything the actions print to standard output once the input has been
processed:

    helpdesk < input.txt

The command takes no options other than `--help`.

Each operation is a single letter on its own line. Blank lines are skipped, and
only the first character of an operation line counts.

- `U`: register a user. The name, CPF, birth date (`day/month/year`), phone,
  gender and sector follow, one per line.
- `T`: register a technician. The name, CPF, birth date, phone, gender, area of
  work, available hours and salary follow, one per line.
- `A`: open a ticket. The requester's CPF and the ticket kind follow, then the
  lines for that kind:
  - `SOFTWARE`: software name, category, impact level and reason;
  - `MANUTENCAO`: item name, condition and place;
  - `OUTROS`: description, place and difficulty level.
- `E`: run the action named on the next line. The actions are `DISTRIBUI`,
  `NOTIFICA` (the ticket queue), `USUARIOS`, `TECNICOS`, `RANKING TECNICOS`,
  `RANKING USUARIOS` and `RELATORIO` (the general report). Any other action
  does nothing.
- `F`: stop. Reaching the end of the input also stops processing.

Rules worth knowing:

- A user or technician whose CPF is already registered is ignored.
- A ticket whose requester's CPF is not registered is read and then discarded.
  A ticket of unknown kind is also discarded.
- Tickets are numbered `Tick-1`, `Tick-2`, … in the order they are queued.
- Estimated hours:
  - a software ticket takes its impact plus 3 for `BUG`, plus 2 for `DUVIDAS`
    and plus 1 for any other category;
  - a maintenance ticket takes its condition weight (`RUIM` 3, `REGULAR` 2,
    `BOM` 1) times its requester's sector weight (`RH` 2, `FINANCEIRO` 3,
    `P&D`, `VENDAS`, `MARKETING` 1). An unknown condition or sector weighs 0;
  - any other ticket takes its difficulty level.
- `DISTRIBUI` goes through the open tickets in queue order. It gives software
  tickets to technicians whose area is `TI`, and every other ticket to the
  remaining technicians. It rotates among those who still have enough hours
  available. A ticket that is handed out is finalized, and its hours move from
  the technician's available time to their worked time.
- Rankings order users by tickets opened and technicians by hours worked, most
  first. Ties are broken by name.
- Ages in the report are whole years on 18/2/2025. Averages are truncated
  toward zero. `RELATORIO` fails with `ValueError` when no users or no
  technicians are registered.

## Use as a library

    from helpdesk.manager import HelpDesk

    desk = HelpDesk()
    with open("input.txt") as source:
        print(desk.run(source), end="")

`HelpDesk.run` returns the printed output as a string. `HelpDesk` also offers
`register_ticket`, `distribute`, `report` and `perform` for driving it step by
step. Its state is in `desk.users`, `desk.technicians` and `desk.queue`.

The building blocks are in these modules:

- `helpdesk.dates`: `Date`
- `helpdesk.people`: `User`, `Technician`
- `helpdesk.ticket`: `Ticket`, `TicketStatus`, `TicketKind`, `TicketPayload`
- `helpdesk.ticket_types`: `SoftwareRequest`, `MaintenanceRequest`,
  `OtherRequest`, `software_estimate`, `maintenance_estimate`
- `helpdesk.ticket_queue`: `TicketQueue`
- `helpdesk.registry`: `UserRegistry`, `TechnicianRegistry`

## What it does not do

Nothing is stored between runs. Users, technicians and tickets exist only in
memory while one input is processed.

## Tests

    pip install .[test]
    pytest