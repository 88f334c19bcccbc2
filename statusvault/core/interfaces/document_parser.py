"""
Contract: Document Parser

Deterministic rules that turn recognized text into a document kind and
a field record. Rule engines, not learned models: every decision must
be traceable to an ordered rule.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from statusvault.core.entities.document import DocumentKind
from statusvault.core.entities.field_record import FieldRecord

# Recognized text: one string, or its lines in reading order
RawText = str | Sequence[str]


class IDocumentClassifier(ABC):
    """
    Port: Document Classifier

    Maps raw text to exactly one DocumentKind. Total: unrecognized or
    malformed input maps to DocumentKind.OTHER, never to an error.
    """

    @abstractmethod
    def classify(self, text: RawText) -> DocumentKind:
        ...


class IFieldExtractor(ABC):
    """
    Port: Field Extractor

    Applies the extraction rules of one document kind. Fields that are
    not found stay None; a missing field never aborts the others.
    """

    @abstractmethod
    def extract(self, text: RawText, kind: DocumentKind) -> FieldRecord:
        """
        Extract structured fields.

        Args:
            text: Recognized text of the document.
            kind: Kind returned by the classifier.

        Returns:
            FieldRecord with the raw text always attached.
        """
        ...
