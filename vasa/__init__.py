"""
VAsA: in-memory workspace for clients, tasks, documents, invoices and a daily planner.
"""

__version__ = "0.1.0"
