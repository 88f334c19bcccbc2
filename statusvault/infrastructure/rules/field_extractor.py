"""
Adapter: Immigration Field Extractor.

Per-kind extraction rules over recognized text. Each kind owns an
ordered list of independent rules; a rule that finds nothing leaves its
fields as None and the remaining rules still run. The raw text is
always attached to the record for auditability.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from statusvault.core.entities.document import DocumentKind
from statusvault.core.entities.field_record import FieldRecord
from statusvault.core.interfaces.document_parser import IFieldExtractor, RawText
from statusvault.infrastructure.rules.date_parser import parse_date_from_line
from statusvault.infrastructure.rules.patterns import (
    as_lines,
    date_near,
    find_first,
    line_after_label,
    value_after_label,
)

logger = logging.getLogger(__name__)

# ── Identifier patterns ─────────────────────────────────────────────
SEVIS_ID = r"N\d{10}"
EAD_CARD_NUMBER = r"[A-Z]{3}-\d{2}-\d{3}-\d{4}"
EAD_CATEGORY = r"C\d{2}[A-Z]?"
PASSPORT_NUMBER = r"[A-Z]{1,2}\d{7,9}"
VISA_TYPE = r"[A-Z]-\d[A-Z]?"
I94_ADMISSION_NUMBER = r"\d{11}"
I797_RECEIPT_NUMBER = r"[A-Z]{3}\d{10}"


@dataclass(frozen=True)
class FieldRule:
    """One extraction attempt: reads the lines, writes into the record."""
    name: str
    apply: Callable[[list[str], FieldRecord], None]


def pattern_rule(pattern: str, *targets: str) -> FieldRule:
    def apply(lines: list[str], record: FieldRecord) -> None:
        value = find_first(lines, pattern)
        if value is not None:
            for target in targets:
                setattr(record, target, value)
    return FieldRule(f"{targets[0]}~/{pattern}/", apply)


def label_rule(label: str, target: str) -> FieldRule:
    def apply(lines: list[str], record: FieldRecord) -> None:
        value = value_after_label(lines, label)
        if value is not None:
            setattr(record, target, value)
    return FieldRule(f"{target}@'{label}'", apply)


def date_rule(label: str, target: str) -> FieldRule:
    def apply(lines: list[str], record: FieldRecord) -> None:
        setattr(record, target, date_near(lines, label))
    return FieldRule(f"{target}@'{label}'", apply)


def _ead_name(lines: list[str], record: FieldRecord) -> None:
    # EAD cards print the name under a header, without a colon
    name = line_after_label(lines, "name")
    if name is not None:
        record.full_name = name


def _date_here_or_below(lines: list[str], index: int):
    found = parse_date_from_line(lines[index].strip())
    if found is None and index + 1 < len(lines):
        found = parse_date_from_line(lines[index + 1])
    return found


def _ead_validity(lines: list[str], record: FieldRecord) -> None:
    for i, line in enumerate(lines):
        lowered = line.strip().lower()

        if "valid from" in lowered or "card expires" in lowered:
            found = _date_here_or_below(lines, i)
            if found is not None and "valid from" in lowered:
                record.valid_from = found

        if "valid until" in lowered or "expires" in lowered:
            found = _date_here_or_below(lines, i)
            if found is not None:
                record.valid_until = found
                record.expiration_date = found


EXTRACTION_RULES: dict[DocumentKind, tuple[FieldRule, ...]] = {
    DocumentKind.I20: (
        pattern_rule(SEVIS_ID, "sevis_id"),
        label_rule("Name", "full_name"),
        date_rule("Issue Date", "issued_date"),
        date_rule("Program End Date", "program_end_date"),
    ),
    DocumentKind.EAD: (
        pattern_rule(EAD_CARD_NUMBER, "document_number"),
        FieldRule("full_name@header", _ead_name),
        pattern_rule(EAD_CATEGORY, "ead_category"),
        FieldRule("validity", _ead_validity),
    ),
    DocumentKind.PASSPORT: (
        pattern_rule(PASSPORT_NUMBER, "passport_number", "document_number"),
        label_rule("Surname", "full_name"),
        date_rule("Date of birth", "date_of_birth"),
        date_rule("Date of issue", "issued_date"),
        date_rule("Date of expiry", "expiration_date"),
    ),
    DocumentKind.VISA: (
        pattern_rule(VISA_TYPE, "visa_type"),
        date_rule("Issue Date", "issued_date"),
        date_rule("Expiration Date", "expiration_date"),
    ),
    DocumentKind.I94: (
        pattern_rule(I94_ADMISSION_NUMBER, "admission_number"),
        label_rule("Class of Admission", "class_of_admission"),
        date_rule("Admit Until Date", "admit_until_date"),
    ),
    DocumentKind.I797: (
        pattern_rule(I797_RECEIPT_NUMBER, "receipt_number"),
        label_rule("Beneficiary", "beneficiary_name"),
        date_rule("Notice Date", "issued_date"),
        # Bound to "Valid From" on purpose; see DESIGN.md open questions
        date_rule("Valid From", "expiration_date"),
    ),
    DocumentKind.OTHER: (),
}


class ImmigrationFieldExtractor(IFieldExtractor):
    """Runs the rule list of the given kind over the text."""

    def __init__(self, rules: dict[DocumentKind, tuple[FieldRule, ...]] | None = None):
        self._rules = rules if rules is not None else EXTRACTION_RULES

    def rules_for(self, kind: DocumentKind) -> tuple[FieldRule, ...]:
        return self._rules.get(kind, ())

    def extract(self, text: RawText, kind: DocumentKind) -> FieldRecord:
        lines = as_lines(text)
        record = FieldRecord(raw_text="\n".join(lines))

        for rule in self.rules_for(kind):
            try:
                rule.apply(lines, record)
            except Exception as e:
                logger.warning(f"Extraction rule {rule.name} failed for {kind.value}: {e}")

        return record


_default = ImmigrationFieldExtractor()


def extract(text: RawText, kind: DocumentKind) -> FieldRecord:
    """Extract with the default rule set."""
    return _default.extract(text, kind)
