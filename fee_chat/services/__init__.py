"""
Collaborators the request handlers depend on.

Handlers only see these three capabilities; the concrete adapters below are
wired in by create_app and can be swapped for fakes in tests.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from fee_chat.services.openai_service import OpenAICompleter
from fee_chat.services.pdf_service import PyPDF2Extractor
from fee_chat.services.storage_service import SQLAlchemyStorage


class Completer(Protocol):
    def complete(self, system_prompt: str, user_prompt: str, max_tokens: int = 100) -> str: ...


class Extractor(Protocol):
    def extract_text(self, data: bytes) -> str: ...


class Storage(Protocol):
    def insert_conversation(self, user_message: str, fee_response: str): ...
    def list_conversations(self) -> List: ...
    def insert_upload(self, file_name: str, file_content: str): ...
    def list_uploads(self) -> List: ...
    def insert_form_submission(self, name: str, email: str, message: str): ...
    def list_form_submissions(self) -> List: ...


@dataclass
class Services:
    storage: Storage
    completer: Completer
    extractor: Extractor


__all__ = [
    "Completer",
    "Extractor",
    "OpenAICompleter",
    "PyPDF2Extractor",
    "SQLAlchemyStorage",
    "Services",
    "Storage",
]
