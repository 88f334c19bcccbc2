"""
Status Engine.

Folds the whole document set into one StatusSnapshot. Rules run in a
fixed order and later rules overwrite the status label of earlier ones:

    1. EAD   -> work authorization
    2. I-20  -> study authorization, "F-1 Student"
    3. Visa  -> "<visa type> Visa Holder" (beats the I-20 label)
    4. any expired document -> "<n> document(s) expired"

Within a kind the live document with the latest expiry is used; a
document without expiry never beats a dated one.
"""

from datetime import datetime

from statusvault.core.entities.document import Document, DocumentKind, DocumentState, utc_now
from statusvault.core.entities.status_snapshot import UNKNOWN_STATUS, StatusSnapshot

STUDENT_STATUS = "F-1 Student"


def latest_expiring(documents: list[Document], kind: DocumentKind) -> Document | None:
    """Live document of `kind` with the latest expiry; first one wins ties."""
    best = None
    for document in documents:
        if document.kind != kind:
            continue
        if best is None or _expiry_key(document) > _expiry_key(best):
            best = document
    return best


def _expiry_key(document: Document) -> datetime:
    return document.expiry_date or datetime.min


class StatusEngine:
    """Computes the current status snapshot. Pure over its input."""

    def compute_snapshot(
        self, documents: list[Document], now: datetime | None = None
    ) -> StatusSnapshot:
        live = [d for d in documents if d.is_live]

        can_work = False
        can_study = False
        must_maintain_status = False
        work_expiry_date = None
        study_expiry_date = None
        current_status = UNKNOWN_STATUS
        warnings: list[str] = []

        ead = latest_expiring(live, DocumentKind.EAD)
        if ead is not None:
            can_work = True
            work_expiry_date = ead.expiry_date
            if ead.state == DocumentState.EXPIRING_SOON:
                warnings.append("EAD card expiring soon")

        i20 = latest_expiring(live, DocumentKind.I20)
        if i20 is not None:
            can_study = True
            must_maintain_status = True
            study_expiry_date = i20.expiry_date
            current_status = STUDENT_STATUS
            if i20.state == DocumentState.EXPIRING_SOON:
                warnings.append("I-20 expiring soon")

        visa = latest_expiring(live, DocumentKind.VISA)
        if visa is not None:
            if visa.fields is not None and visa.fields.visa_type:
                current_status = f"{visa.fields.visa_type} Visa Holder"
            if visa.state == DocumentState.EXPIRING_SOON:
                warnings.append("Visa expiring soon")

        expired = sum(1 for d in documents if d.state == DocumentState.EXPIRED)
        if expired:
            warnings.append(f"{expired} document(s) expired")

        return StatusSnapshot(
            current_status=current_status,
            can_work=can_work,
            work_expiry_date=work_expiry_date,
            can_study=can_study,
            study_expiry_date=study_expiry_date,
            must_maintain_status=must_maintain_status,
            warnings=tuple(warnings),
            active_documents=tuple(d.id for d in live),
            timestamp=now or utc_now(),
        )
