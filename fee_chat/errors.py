"""
Error taxonomy shared by the handlers and the service adapters.

Adapters translate library exceptions (openai, PyPDF2, SQLAlchemy) into these
so that routes only have to know about four failure kinds.
"""


class FeeChatError(Exception):
    """Base class for request failures"""
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(FeeChatError):
    """Missing or empty required field"""
    status_code = 400


class ExtractionError(FeeChatError):
    """Uploaded document could not be read"""


class CompletionError(FeeChatError):
    """Language-model call failed, timed out or returned no text"""


class StorageError(FeeChatError):
    """Datastore unreachable or statement failed"""
