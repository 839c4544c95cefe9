# File: vasa/services/client_service.py

from typing import List, Optional

from vasa.core.store import RecordStore
from vasa.models import Client, ClientStatus, client_from_dict, coerce_enum
from vasa.services.forms import FormData, as_form, require_fields
from vasa.utils.logger import LoggerMixin

REQUIRED_FIELDS = ('name', 'email')


class ClientService(LoggerMixin):
    """Client tracker: newest clients are listed first."""

    def __init__(self):
        self.store: RecordStore[Client] = RecordStore("client", newest_first=True)

    def add(self, form: FormData) -> Client:
        data = as_form(form)
        require_fields(data, REQUIRED_FIELDS, "client")
        client = self.store.create(client_from_dict(data))
        self.logger.info(f"Added client '{client.name}' ({client.id})")
        return client

    def edit(self, client_id: str, changes: FormData) -> Client:
        """Apply changes to a client; the id never changes."""
        data = as_form(self.store.require(client_id))
        data.update(as_form(changes))
        require_fields(data, REQUIRED_FIELDS, "client")
        client = self.store.replace(client_id, client_from_dict(data))
        self.logger.info(f"Updated client '{client.name}' ({client_id})")
        return client

    def remove(self, client_id: str) -> bool:
        removed = self.store.delete(client_id)
        if removed:
            self.logger.info(f"Removed client {client_id}")
        return removed

    def get(self, client_id: str) -> Optional[Client]:
        return self.store.get(client_id)

    def list(self) -> List[Client]:
        return self.store.list()

    def by_status(self, status) -> List[Client]:
        status = coerce_enum(ClientStatus, status)
        return self.store.filter(lambda c: c.status == status)

    def search(self, text: str) -> List[Client]:
        """Case-insensitive substring match on name or email."""
        needle = text.strip().lower()
        if not needle:
            return self.store.list()
        return self.store.filter(
            lambda c: needle in c.name.lower() or needle in c.email.lower()
        )
