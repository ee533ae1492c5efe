"""
Database Models

Key Models:
- Conversation: one chat turn (user message + Fee's reply)
- Upload: an uploaded PDF and the text extracted from it
- FormSubmission: a contact form entry

All three are append-only; rows are never updated or deleted.
"""
from datetime import datetime, timezone

from fee_chat import db


def _utcnow():
    return datetime.now(timezone.utc)


def _iso(value):
    return value.isoformat() if value else None


class Conversation(db.Model):
    __tablename__ = 'conversations'

    id = db.Column(db.Integer, primary_key=True)
    user_message = db.Column(db.Text, nullable=False)
    fee_response = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'user_message': self.user_message,
            'fee_response': self.fee_response,
            'timestamp': _iso(self.timestamp),
        }


class Upload(db.Model):
    __tablename__ = 'uploads'

    id = db.Column(db.Integer, primary_key=True)
    file_name = db.Column(db.String(255), nullable=False)
    file_content = db.Column(db.Text, nullable=False, default='')  # may be empty for image-only PDFs
    uploaded_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'file_name': self.file_name,
            'file_content': self.file_content,
            'uploaded_at': _iso(self.uploaded_at),
        }


class FormSubmission(db.Model):
    __tablename__ = 'forms'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    submitted_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'message': self.message,
            'submitted_at': _iso(self.submitted_at),
        }
