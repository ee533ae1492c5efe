"""
API Blueprint - chat, upload, history and contact form endpoints

Routes keep the paths and JSON shapes the browser client already uses.
Every failure is caught here and answered with a generic {"error": ...} body.
"""
import os
import uuid
from typing import Tuple

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from fee_chat import handlers
from fee_chat.errors import FeeChatError, ValidationError

api_bp = Blueprint('api', __name__)


# ============ Helper Functions ============

def services():
    return current_app.extensions["fee_chat"]


def _staging_path(filename: str) -> str:
    ext = os.path.splitext((filename or "").strip())[1].lower()
    if ext != ".pdf":
        ext = ".bin"
    return os.path.join(current_app.config["UPLOAD_FOLDER"], f"{uuid.uuid4().hex}{ext}")


def read_staged_upload(file_storage) -> bytes:
    """Write the upload to the staging folder, read it back, then remove it."""
    os.makedirs(current_app.config["UPLOAD_FOLDER"], exist_ok=True)
    path = _staging_path(file_storage.filename)
    try:
        file_storage.save(path)
        with open(path, "rb") as f:
            return f.read()
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError:
            current_app.logger.warning("Could not remove staged upload %s", path)


def json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def failure(error: Exception, public_message: str) -> Tuple:
    if isinstance(error, ValidationError):
        current_app.logger.error(error.message)
        return jsonify({"error": error.message}), 400
    current_app.logger.error("%s %s", public_message, error)
    return jsonify({"error": public_message}), 500


# ============ API Routes ============

@api_bp.route("/", methods=["GET"])
def index():
    current_app.logger.info("GET request to /")
    return "Hello from the backend!"


@api_bp.route("/upload", methods=["POST"])
def upload():
    current_app.logger.info("POST request to /upload")
    file = request.files.get("file")
    if not file or not file.filename:
        return failure(ValidationError("No file uploaded."), "")

    try:
        data = read_staged_upload(file)
        text = handlers.handle_upload(services().storage, services().extractor, file.filename, data)
    except (FeeChatError, OSError) as e:
        return failure(e, "Failed to process the PDF file.")

    return jsonify({"message": "File uploaded successfully!", "content": text}), 200


@api_bp.route("/chat", methods=["POST"])
def chat():
    current_app.logger.info("POST request to /chat")
    payload = json_body()
    try:
        reply = handlers.handle_chat(
            services().storage,
            services().completer,
            payload.get("message"),
            payload.get("pdfContent"),
            max_tokens=current_app.config.get("OPENAI_MAX_TOKENS", handlers.DEFAULT_MAX_TOKENS),
        )
    except FeeChatError as e:
        return failure(e, "Failed to process the request.")

    return jsonify({"reply": reply}), 200


@api_bp.route("/conversations", methods=["GET"])
def conversations():
    try:
        rows = handlers.list_conversations(services().storage)
    except FeeChatError as e:
        return failure(e, "Failed to fetch conversations.")
    return jsonify(rows), 200


@api_bp.route("/uploads", methods=["GET"])
def uploads():
    try:
        rows = handlers.list_uploads(services().storage)
    except FeeChatError as e:
        return failure(e, "Failed to fetch uploads.")
    return jsonify(rows), 200


@api_bp.route("/submit-form", methods=["POST"])
def submit_form():
    current_app.logger.info("POST request to /submit-form")
    payload = json_body()
    try:
        data = handlers.handle_form_submission(
            services().storage,
            payload.get("name"),
            payload.get("email"),
            payload.get("message"),
        )
    except FeeChatError as e:
        return failure(e, "Failed to save form submission.")

    return jsonify({"message": "Form submitted successfully!", "data": data}), 201


@api_bp.route("/form-submissions", methods=["GET"])
def form_submissions():
    try:
        rows = handlers.list_form_submissions(services().storage)
    except FeeChatError as e:
        return failure(e, "Failed to fetch form submissions.")
    return jsonify(rows), 200


@api_bp.app_errorhandler(Exception)
def unhandled_error(e):
    if isinstance(e, HTTPException):
        return jsonify({"error": e.description}), e.code
    current_app.logger.exception("Unhandled exception")
    return jsonify({"error": "Internal server error"}), 500
