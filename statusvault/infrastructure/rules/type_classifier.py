"""
Adapter: Keyword Type Classifier.

Maps recognized text to a DocumentKind with an ordered list of keyword
signatures. The first matching signature wins; order is the precedence
contract (an I-20 mentioning employment authorization is still an I-20).
"""

from dataclasses import dataclass

from statusvault.core.entities.document import DocumentKind
from statusvault.core.interfaces.document_parser import IDocumentClassifier, RawText
from statusvault.infrastructure.rules.patterns import as_text


@dataclass(frozen=True)
class Signature:
    """Matches when any `any_of` keyword is present and no `none_of` keyword is."""
    kind: DocumentKind
    any_of: tuple[str, ...]
    none_of: tuple[str, ...] = ()

    def matches(self, lowered: str) -> bool:
        if any(word in lowered for word in self.none_of):
            return False
        return any(word in lowered for word in self.any_of)


SIGNATURES: tuple[Signature, ...] = (
    Signature(DocumentKind.I20, ("sevis", "i-20", "certificate of eligibility")),
    Signature(DocumentKind.EAD, ("employment authorization", "ead", "i-766")),
    Signature(DocumentKind.PASSPORT, ("passport",)),
    # "immigrant visa" shows up on passports and I-797s that are not visas
    Signature(DocumentKind.VISA, ("visa",), none_of=("immigrant visa",)),
    Signature(DocumentKind.I94, ("i-94", "arrival/departure")),
    Signature(DocumentKind.I797, ("i-797", "notice of action", "uscis")),
)


class KeywordTypeClassifier(IDocumentClassifier):
    """First-match keyword classifier; OTHER when nothing matches."""

    def __init__(self, signatures: tuple[Signature, ...] = SIGNATURES):
        self._signatures = signatures

    @property
    def signatures(self) -> tuple[Signature, ...]:
        return self._signatures

    def classify(self, text: RawText) -> DocumentKind:
        lowered = as_text(text).lower()
        for signature in self._signatures:
            if signature.matches(lowered):
                return signature.kind
        return DocumentKind.OTHER


_default = KeywordTypeClassifier()


def classify(text: RawText) -> DocumentKind:
    """Classify with the default signature list."""
    return _default.classify(text)
