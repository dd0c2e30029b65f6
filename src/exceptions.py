"""Exception hierarchy for the brand-token pipeline.

Each exception carries a JSON-RPC style ``code`` so the tool layer can
report it in the same shape a protocol host would.
"""

INTERNAL_ERROR = -32603
INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601


class BrandTokensError(Exception):
    """Base exception for all pipeline errors."""
    code = INTERNAL_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidParamsError(BrandTokensError):
    """A required parameter is missing or has the wrong shape."""
    code = INVALID_PARAMS


class ToolNotFoundError(BrandTokensError):
    """The requested tool name is not registered."""
    code = METHOD_NOT_FOUND


class DocumentError(BrandTokensError):
    """Base for failures while turning a document into text."""


class DocumentNotFoundError(DocumentError):
    """The document path does not exist."""


class DocumentDecodeError(DocumentError):
    """The document exists but could not be decoded."""


class UnsupportedDocumentError(DocumentError):
    """The document type has no reader."""
