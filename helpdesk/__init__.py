"""Help-desk ticket system: users, technicians, a ticket queue, distribution and reports."""

__version__ = "0.1.0"