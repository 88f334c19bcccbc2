"""
Contract: Text Source

Turns a document photo into recognized text. On-device OCR, a cloud
vision API or a manual transcription all satisfy this contract; the
pipeline only ever sees the resulting lines.

No engine ships with StatusVault. An OCR adapter implements
ITextSource and is passed to IngestDocumentUseCase as `text_source`;
`execute_image` is its only caller. The API ingests text that was
recognized on the client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class RecognizedText:
    """Text recognized from one document image."""
    lines: list[str]                     # reading order, one entry per line
    source: str = ""                     # engine identification
    details: dict = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ITextSource(ABC):
    """
    Port: Text Source

    The text acquisition collaborator. Owns its own image handling,
    confidence handling and retry semantics.
    """

    @abstractmethod
    def read_text(self, image_bytes: bytes) -> RecognizedText:
        """
        Recognize the text on a document image.

        Args:
            image_bytes: Image in bytes (JPEG/PNG).

        Returns:
            RecognizedText with the lines in reading order.
        """
        ...
