# File: vasa/services/document_service.py

from typing import Dict, List, Optional, Tuple

from vasa.core.config_manager import Config
from vasa.core.exceptions import ValidationFailed
from vasa.core.store import RecordStore
from vasa.models import Document, DocumentRef, document_from_dict
from vasa.services.document_preview import DocumentPreviewer, Preview
from vasa.services.forms import FormData, as_form, is_blank
from vasa.utils.logger import LoggerMixin


class BlobStore:
    """Content-addressed bytes, keyed by sha256 digest."""

    def __init__(self):
        self._blobs: Dict[str, bytes] = {}

    def __contains__(self, digest: str) -> bool:
        return digest in self._blobs

    def __len__(self) -> int:
        return len(self._blobs)

    def put(self, data: bytes, ref: DocumentRef) -> None:
        self._blobs.setdefault(ref.digest, bytes(data))

    def get(self, digest: str) -> Optional[bytes]:
        return self._blobs.get(digest)

    def discard(self, digest: str) -> None:
        self._blobs.pop(digest, None)

    def digests(self) -> List[str]:
        return list(self._blobs)


class DocumentService(LoggerMixin):
    """Document centre: uploads, text documents, search and preview."""

    def __init__(self, previewer: Optional[DocumentPreviewer] = None):
        self.store: RecordStore[Document] = RecordStore("document")
        self.blobs = BlobStore()
        self.previewer = previewer or DocumentPreviewer()

    def attach(self, file_name: str, data: bytes, media_type: Optional[str] = None) -> DocumentRef:
        """
        Register uploaded bytes and return an opaque reference to them.
        
        The bytes are kept until the next document save; a save that leaves
        them unreferenced drops them.
        
        Raises:
            ValidationFailed: If the file type is not accepted
        """
        ref = DocumentRef.for_bytes(file_name, data, media_type)
        if ref.extension not in Config.ACCEPTED_UPLOAD_TYPES:
            raise ValidationFailed(['file'], "document")
        self.blobs.put(data, ref)
        self.logger.info(f"Stored upload '{ref.file_name}' as {ref.digest[:12]} ({ref.size} bytes)")
        return ref

    def _build(self, data: dict) -> Document:
        document = document_from_dict(data)
        missing = []
        if is_blank(document.title):
            missing.append('title')
        if not document.has_body():
            missing.append('content')
        if missing:
            raise ValidationFailed(missing, "document")
        return document

    def add(self, form: FormData) -> Document:
        document = self.store.create(self._build(as_form(form)))
        self._collect()
        self.logger.info(f"Added document '{document.title}' ({document.id})")
        return document

    def edit(self, doc_id: str, changes: FormData) -> Document:
        data = self.store.require(doc_id).to_dict()
        data.update(as_form(changes))
        document = self.store.replace(doc_id, self._build(data))
        self._collect()
        self.logger.info(f"Updated document '{document.title}' ({doc_id})")
        return document

    def remove(self, doc_id: str) -> bool:
        if not self.store.delete(doc_id):
            return False
        self._collect()
        return True

    def _collect(self) -> None:
        """Drop bytes no stored document points at, including unsaved uploads."""
        referenced = {d.file.digest for d in self.store if d.file is not None}
        orphans = [digest for digest in self.blobs.digests() if digest not in referenced]
        for digest in orphans:
            self.blobs.discard(digest)
        if orphans:
            self.logger.debug(f"Released {len(orphans)} unreferenced upload(s)")

    def get(self, doc_id: str) -> Optional[Document]:
        return self.store.get(doc_id)

    def list(self) -> List[Document]:
        return self.store.list()

    def categories(self) -> List[str]:
        """The category filter options: 'All' followed by each category in first-seen order."""
        ordered = []
        for document in self.store:
            if document.category not in ordered:
                ordered.append(document.category)
        return [Config.ALL_CATEGORIES] + ordered

    def search(self, query: str = "", category: str = Config.ALL_CATEGORIES) -> List[Document]:
        """Case-insensitive title match combined with an exact category filter."""
        needle = (query or "").lower()
        return self.store.filter(
            lambda d: needle in d.title.lower()
            and (category == Config.ALL_CATEGORIES or d.category == category)
        )

    def download(self, doc_id: str) -> Optional[Tuple[str, bytes]]:
        """File name and bytes of the attachment, or None for text-only documents."""
        document = self.store.require(doc_id)
        if document.file is None:
            return None
        return document.file.file_name, self.blobs.get(document.file.digest)

    def preview(self, doc_id: str) -> Preview:
        document = self.store.require(doc_id)
        data = self.blobs.get(document.file.digest) if document.file else None
        return self.previewer.render(document, data)
