# File: vasa/core/seed.py
"""
Demo records used to populate a fresh workspace.
"""

from typing import Any, Dict, List

# Oldest first: the client list shows the most recently added client on top
SEED_CLIENTS: List[Dict[str, Any]] = [
    {
        'name': 'Beta LLC',
        'email': 'hello@beta.io',
        'status': 'prospect',
        'projects': 'Initial discovery phase',
        'preferences': 'Slack communication',
        'billing': 'Not yet defined',
    },
    {
        'name': 'Acme Corp',
        'email': 'client@acme.com',
        'status': 'active',
        'projects': 'Landing page redesign, CRM integration',
        'preferences': 'Weekly email, Zoom calls',
        'billing': 'Monthly, due on 1st',
    },
]

SEED_TASKS: List[Dict[str, Any]] = [
    {
        'title': 'Design Landing Page',
        'description': 'Create mockups for homepage',
        'due_date': '2025-06-01',
        'priority': 'High',
        'status': 'To Do',
        'client': 'Acme Corp',
        'subtasks': ['Header', 'Hero Section', 'Footer'],
    },
    {
        'title': 'Setup Analytics',
        'description': 'Integrate Google Analytics',
        'due_date': '2025-06-03',
        'priority': 'Medium',
        'status': 'In Progress',
        'client': 'Beta LLC',
        'subtasks': ['Add GA ID', 'Confirm data stream'],
    },
]

SEED_INVOICES: List[Dict[str, Any]] = [
    {'client': 'Alpha Co.', 'amount': 2500, 'due_date': '2025-06-10', 'is_paid': False},
    {'client': 'Beta Ltd.', 'amount': 1300, 'due_date': '2025-05-28', 'is_paid': True},
]
