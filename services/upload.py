from flask import current_app
from werkzeug.utils import secure_filename
from extensions import api

MAX_IMAGE_SIZE = 5 * 1024 * 1024


class UploadRejected(ValueError):
    """The file was refused before any request was made."""


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in current_app.config["ALLOWED_EXTENSIONS"]


def file_size(fileobj):
    stream = fileobj.stream
    pos = stream.tell()
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(pos)
    return size


def check_image(fileobj):
    if not (fileobj.mimetype or "").startswith("image/") or not allowed_file(fileobj.filename or ""):
        raise UploadRejected("Please select a valid image file")
    if file_size(fileobj) > MAX_IMAGE_SIZE:
        raise UploadRejected("Image size must be less than 5MB")


def upload_image(fileobj):
    """Send a werkzeug ``FileStorage`` to the API; ``data`` is its stored path."""
    check_image(fileobj)
    fileobj.stream.seek(0)
    files = {"file": (secure_filename(fileobj.filename), fileobj.stream, fileobj.mimetype)}
    return api.post("/upload/image", files=files)
