"""Pending-case report importer services (import run, severity, reminders)."""
