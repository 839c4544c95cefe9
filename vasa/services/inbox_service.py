# File: vasa/services/inbox_service.py

from typing import List, Optional, Union

from vasa.core.exceptions import ValidationFailed
from vasa.core.store import RecordStore
from vasa.models import InboxEntry, Note, TodoItem
from vasa.utils.logger import LoggerMixin

CONVERT_TARGETS = ("task", "note")


class InboxService(LoggerMixin):
    """Quick capture inbox. Entries are later converted into todos or notes."""

    def __init__(self):
        self.entries: RecordStore[InboxEntry] = RecordStore("inbox entry", newest_first=True)
        self.todos: RecordStore[TodoItem] = RecordStore("todo", newest_first=True)
        self.notes: RecordStore[Note] = RecordStore("note", newest_first=True)

    def capture(self, text: str) -> InboxEntry:
        content = (text or "").strip()
        if not content:
            raise ValidationFailed(['content'], "inbox entry")
        entry = self.entries.create(InboxEntry(content=content))
        self.logger.info(f"Captured inbox entry {entry.id}")
        return entry

    def discard(self, entry_id: str) -> bool:
        return self.entries.delete(entry_id)

    def convert(self, entry_id: str, target: str) -> Optional[Union[TodoItem, Note]]:
        """
        Turn an inbox entry into a todo ("task") or a note.
        
        The entry leaves the inbox. Unknown ids are ignored and return None.
        
        Raises:
            ValueError: If target is neither "task" nor "note"
        """
        if target not in CONVERT_TARGETS:
            raise ValueError(f"Cannot convert inbox entry to '{target}'")

        entry = self.entries.get(entry_id)
        if entry is None:
            self.logger.warning(f"Inbox entry {entry_id} not found, nothing to convert")
            return None

        if target == "task":
            created = self.todos.create(TodoItem(title=entry.content))
        else:
            created = self.notes.create(Note(content=entry.content))

        self.entries.delete(entry_id)
        self.logger.info(f"Converted inbox entry {entry_id} into {target} {created.id}")
        return created

    def toggle_todo(self, todo_id: str) -> TodoItem:
        todo = self.todos.require(todo_id)
        return self.todos.update(todo_id, done=not todo.done)

    def remove_todo(self, todo_id: str) -> bool:
        return self.todos.delete(todo_id)

    def remove_note(self, note_id: str) -> bool:
        return self.notes.delete(note_id)

    def pending_todos(self) -> List[TodoItem]:
        return self.todos.filter(lambda t: not t.done)
