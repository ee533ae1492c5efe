"""
Test Configuration and Fixtures
"""
import pytest
from fee_chat import create_app, db
from fee_chat.errors import CompletionError, ExtractionError


class FakeCompleter:
    """Records every call and answers with a canned reply (or raises)."""

    def __init__(self, reply="Hello from Fee."):
        self.reply = reply
        self.error = None
        self.calls = []

    def complete(self, system_prompt, user_prompt, max_tokens=100):
        self.calls.append({
            'system_prompt': system_prompt,
            'user_prompt': user_prompt,
            'max_tokens': max_tokens,
        })
        if self.error:
            raise self.error
        return self.reply


class FakeExtractor:
    """Returns fixed text for any bytes; raises for documents marked broken."""

    def __init__(self, text="Extracted PDF text."):
        self.text = text
        self.seen = []

    def extract_text(self, data):
        self.seen.append(data)
        if data.startswith(b'broken'):
            raise ExtractionError('Could not read PDF')
        return self.text


@pytest.fixture
def completer():
    return FakeCompleter()


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def app(tmp_path, completer, extractor):
    """Create application for testing"""
    app = create_app('testing', completer=completer, extractor=extractor)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def storage(app):
    return app.extensions['fee_chat'].storage


@pytest.fixture
def failing_completer(completer):
    completer.error = CompletionError('LLM request failed: APIConnectionError')
    return completer
