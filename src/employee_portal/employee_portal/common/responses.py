from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_success(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def json_error(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def api_errors(view):
    """Map domain errors to JSON responses; log anything unexpected."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error("Internal server error", 500)

    return wrapper
