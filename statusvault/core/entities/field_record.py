"""
Entity: Field Record

Structured fields extracted from one document's recognized text.
Flat superset schema: every field exists on every record and is None
when the document kind does not carry it or the text did not yield it.
"""

from dataclasses import asdict, dataclass, fields
from datetime import date


@dataclass
class FieldRecord:
    """Fields extracted from a document, plus the raw text they came from."""
    # Common
    full_name: str | None = None
    document_number: str | None = None
    issued_date: date | None = None
    expiration_date: date | None = None
    country_of_issuance: str | None = None

    # I-20
    sevis_id: str | None = None
    school_name: str | None = None
    degree_level: str | None = None
    major_field: str | None = None
    program_end_date: date | None = None

    # EAD
    ead_category: str | None = None
    valid_from: date | None = None
    valid_until: date | None = None

    # Passport
    passport_number: str | None = None
    nationality: str | None = None
    date_of_birth: date | None = None
    place_of_birth: str | None = None

    # Visa
    visa_type: str | None = None
    visa_number: str | None = None
    entries_allowed: str | None = None

    # I-94
    admission_number: str | None = None
    class_of_admission: str | None = None
    admit_until_date: date | None = None

    # I-797
    receipt_number: str | None = None
    case_type: str | None = None
    petitioner_name: str | None = None
    beneficiary_name: str | None = None

    # Audit trail
    raw_text: str | None = None

    def present(self) -> dict:
        """Extracted fields that hold a value (raw text excluded)."""
        return {
            k: v for k, v in asdict(self).items()
            if v is not None and k != "raw_text"
        }

    def to_dict(self) -> dict:
        """JSON-safe dict; dates become ISO strings."""
        data = {}
        for k, v in asdict(self).items():
            data[k] = v.isoformat() if isinstance(v, date) else v
        return data

    @classmethod
    def from_dict(cls, data: dict | None) -> "FieldRecord":
        """Inverse of to_dict. Unknown keys are ignored."""
        record = cls()
        if not data:
            return record
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            if f.name in DATE_FIELDS and isinstance(value, str):
                value = date.fromisoformat(value)
            setattr(record, f.name, value)
        return record


DATE_FIELDS = frozenset({
    "issued_date", "expiration_date", "program_end_date", "valid_from",
    "valid_until", "date_of_birth", "admit_until_date",
})
