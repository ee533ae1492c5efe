"""Datastore gateway.

Thin pass-through over the Flask-SQLAlchemy session. Every call is one
statement committed on its own; failures roll the session back and surface as
StorageError.
"""
from __future__ import annotations

from typing import List

from sqlalchemy.exc import SQLAlchemyError

from fee_chat import db
from fee_chat.errors import StorageError
from fee_chat.models import Conversation, FormSubmission, Upload


class SQLAlchemyStorage:

    def _insert(self, row):
        try:
            db.session.add(row)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"Insert into {row.__tablename__} failed: {e}") from e
        return row

    def _list(self, model, column) -> list:
        # id breaks timestamp ties so later inserts still come first
        try:
            return model.query.order_by(column.desc(), model.id.desc()).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"Select from {model.__tablename__} failed: {e}") from e

    def insert_conversation(self, user_message: str, fee_response: str) -> Conversation:
        return self._insert(Conversation(user_message=user_message, fee_response=fee_response))

    def list_conversations(self) -> List[Conversation]:
        return self._list(Conversation, Conversation.timestamp)

    def insert_upload(self, file_name: str, file_content: str) -> Upload:
        return self._insert(Upload(file_name=file_name, file_content=file_content))

    def list_uploads(self) -> List[Upload]:
        return self._list(Upload, Upload.uploaded_at)

    def insert_form_submission(self, name: str, email: str, message: str) -> FormSubmission:
        return self._insert(FormSubmission(name=name, email=email, message=message))

    def list_form_submissions(self) -> List[FormSubmission]:
        return self._list(FormSubmission, FormSubmission.submitted_at)
