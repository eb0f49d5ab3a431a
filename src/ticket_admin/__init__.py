"""
Ticket Admin Package

Client-side layer of the event ticketing administration console.
Computes display-ready pricing figures (VAT totals, category percentages,
seat bars) and wraps the admin REST API behind typed services.
"""

__version__ = "1.0.0"
