"""Pending-case (chargesheet) report importer.

Parses hierarchical police-station pending-case reports exported as
spreadsheets or CSV into flat case records and classifies cases against their
investigation deadlines.
"""

__version__ = "0.3.0"
