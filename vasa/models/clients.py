# File: vasa/models/clients.py

from dataclasses import dataclass
from .enums import ClientStatus
from .common import coerce_enum


@dataclass
class Client:
    """A client of the business, as tracked on the client page."""
    name: str
    email: str
    status: ClientStatus = ClientStatus.ACTIVE
    projects: str = ""
    preferences: str = ""
    billing: str = ""
    id: str = ""

    def __post_init__(self):
        """Auto-convert string status to Enum."""
        self.status = coerce_enum(ClientStatus, self.status, ClientStatus.ACTIVE)

    def is_active(self) -> bool:
        return self.status == ClientStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'status': self.status.value,
            'projects': self.projects,
            'preferences': self.preferences,
            'billing': self.billing,
        }


def client_from_dict(data: dict) -> Client:
    """Create Client from dictionary (form payload or seed data)."""
    return Client(
        id=str(data.get('id', '')),
        name=str(data.get('name', '')).strip(),
        email=str(data.get('email', '')).strip(),
        status=data.get('status', ClientStatus.ACTIVE.value),
        projects=str(data.get('projects', '')),
        preferences=str(data.get('preferences', '')),
        billing=str(data.get('billing', '')),
    )
