"""
Request handlers: validation, the external call, then persistence.

Each handler takes its collaborators as arguments and raises from
fee_chat.errors; translating those into HTTP responses is the route's job.
A failure at any step stops the steps after it, so nothing is persisted for
a request whose extraction or completion failed.
"""
from typing import Any, Dict, List, Optional

from flask import current_app

from fee_chat.errors import ValidationError

FEE_PERSONA = (
    "You are Fee, a helpful persona from SESMag. "
    "Use the provided PDF content to assist with your responses."
)

DEFAULT_MAX_TOKENS = 100


def compose_prompt(message: str, pdf_content: Optional[str] = None) -> str:
    """User-turn text. The persona is repeated here as well as in the system
    message; existing clients rely on that exact wording."""
    if pdf_content:
        return f"{FEE_PERSONA}\n\nPDF Content: {pdf_content}\n\nUser's Question: {message}"
    return f"{FEE_PERSONA}\n\nUser's Question: {message}"


def _require_text(value: Any, error: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(error)
    return value


def handle_upload(storage, extractor, file_name: str, data: bytes) -> str:
    if not file_name:
        raise ValidationError("No file uploaded.")

    text = extractor.extract_text(data)
    current_app.logger.debug("Extracted %d characters from %s", len(text), file_name)

    row = storage.insert_upload(file_name, text)
    current_app.logger.info("File saved to database: upload id=%s name=%s", row.id, row.file_name)
    return text


def handle_chat(storage, completer, message: Any, pdf_content: Any = None,
                max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
    message = _require_text(message, "Message cannot be empty.")
    if pdf_content is not None and not isinstance(pdf_content, str):
        raise ValidationError("pdfContent must be a string.")

    prompt = compose_prompt(message, pdf_content)
    current_app.logger.debug("Full prompt sent to OpenAI: %s", prompt)

    reply = completer.complete(FEE_PERSONA, prompt, max_tokens)
    current_app.logger.info("OpenAI reply: %s", reply)

    row = storage.insert_conversation(message, reply)
    current_app.logger.info("Conversation saved to database: id=%s", row.id)
    return reply


def handle_form_submission(storage, name: Any, email: Any, message: Any) -> Dict[str, Any]:
    error = "All fields are required."
    name = _require_text(name, error)
    email = _require_text(email, error)
    message = _require_text(message, error)

    row = storage.insert_form_submission(name, email, message)
    current_app.logger.info("Form submission saved: id=%s", row.id)
    return row.to_dict()


def list_conversations(storage) -> List[Dict[str, Any]]:
    return [row.to_dict() for row in storage.list_conversations()]


def list_uploads(storage) -> List[Dict[str, Any]]:
    return [row.to_dict() for row in storage.list_uploads()]


def list_form_submissions(storage) -> List[Dict[str, Any]]:
    return [row.to_dict() for row in storage.list_form_submissions()]
