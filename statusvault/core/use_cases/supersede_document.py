"""
Use Case: Supersede Document.

Marks an older document as replaced by a newer one (a renewed EAD, a
new I-20). Superseded is terminal: the old document leaves every status
computation for good.
"""

from datetime import datetime

from statusvault.core.entities.document import Document, utc_now
from statusvault.core.exceptions import DocumentNotFoundError, InvalidSupersedeError
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine


class SupersedeDocumentUseCase:

    def __init__(self, repository: IDocumentRepository, lifecycle: LifecycleEngine):
        self._repository = repository
        self._lifecycle = lifecycle

    def execute(self, old_id: str, new_id: str, now: datetime | None = None) -> Document:
        if old_id == new_id:
            raise InvalidSupersedeError("A document cannot supersede itself")

        old = self._repository.get(old_id)
        if old is None:
            raise DocumentNotFoundError(old_id)
        new = self._repository.get(new_id)
        if new is None:
            raise DocumentNotFoundError(new_id)

        self._lifecycle.supersede(old, new, now or utc_now())
        return self._repository.update(old)
