"""
Contract: Document Repository

Persistence collaborator for the vault. The pipeline computes over
documents; only the repository stores them.
"""

from abc import ABC, abstractmethod

from statusvault.core.entities.document import Document


class IDocumentRepository(ABC):
    """
    Port: Document Repository

    Stores Document entities (with their FieldRecord). Implementations
    may be SQL, a key-value store or in-memory.
    """

    @abstractmethod
    def add(self, document: Document) -> Document:
        """Store a new document and return it."""
        ...

    @abstractmethod
    def update(self, document: Document) -> Document:
        """Persist the current state, dates and timestamps of a document."""
        ...

    def update_many(self, documents: list[Document]) -> None:
        """Persist a batch of documents, e.g. after a lifecycle refresh."""
        for document in documents:
            self.update(document)

    @abstractmethod
    def get(self, document_id: str) -> Document | None:
        """Return the document or None when the id is unknown."""
        ...

    @abstractmethod
    def list_all(self) -> list[Document]:
        """All documents, any state, oldest first."""
        ...

    @abstractmethod
    def delete(self, document_id: str) -> bool:
        """Remove a document. Returns False when the id is unknown."""
        ...
