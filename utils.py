import logging
import os
import uuid

from flask import jsonify, request
from werkzeug.utils import secure_filename

from stores import FailureKind, StoreResult

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif'}

# StoreResult failure -> HTTP status
STATUS_BY_FAILURE = {
    FailureKind.INVALID: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.DUPLICATE_KEY: 409,
    FailureKind.IO_ERROR: 503,
}


class FieldError(ValueError):
    """A request field has the wrong type. Rendered as a 400 by the app."""


def allowed_file(filename):
    """Check if the file has an allowed extension."""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def save_equipment_image(file, upload_folder):
    """Store an uploaded image under a fresh ``<uuid>.jpg`` name and return it.

    Existing files are never overwritten. Writing is best-effort: on an
    unsupported extension or any OS error None is returned and the caller
    keeps whatever image the record had.
    """
    if not file or not file.filename:
        return None
    if not allowed_file(file.filename):
        logger.warning("Ignoring image %r: unsupported extension", file.filename)
        return None

    filename = f"{uuid.uuid4()}.jpg"
    try:
        os.makedirs(upload_folder, exist_ok=True)
        file.save(os.path.join(upload_folder, filename))
    except OSError:
        logger.exception("Could not write image %s", filename)
        return None
    return filename


def discard_image(upload_folder, filename):
    """Best-effort removal of a stored image."""
    if not filename:
        return
    try:
        os.remove(os.path.join(upload_folder, secure_filename(filename)))
    except OSError:
        logger.warning("Could not remove image %s", filename)


def form_data():
    """Request body as a dict, whether it came as JSON or as a form."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def text(data, key, default="", strip=True):
    """A string field from the body; ``default`` when it is missing."""
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise FieldError(f"{key} must be a string")
    return value.strip() if strip else value


def optional(data, key):
    """Blank form fields mean "not set" and are stored as NULL."""
    return text(data, key, default=None) or None


def failure_response(result):
    return jsonify(error=result.error.value, message=result.message), STATUS_BY_FAILURE[result.error]


def invalid_response(message):
    return failure_response(StoreResult.failure(FailureKind.INVALID, message))
