"""
Use-case level errors.

The pipeline itself is total and raises nothing; these are raised by
the use cases when a caller asks for something the vault cannot do.
"""


class DocumentNotFoundError(LookupError):
    """No document with the given id is stored."""

    def __init__(self, document_id: str):
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id


class TextSourceUnavailableError(RuntimeError):
    """Image ingestion requested but no text source is configured."""


class InvalidSupersedeError(ValueError):
    """A document cannot supersede itself."""
