from __future__ import annotations

import hmac
from functools import wraps

from flask import current_app, g, request

from models import storage
from models.user import User
from utils.errors import AppError, ErrorKind
from utils.security import get_api_key, get_bearer_token, validate_jwt


def jwt_required():
    """
    Require a valid access token. On success g.current_user holds the token's
    subject; any failure surfaces as an AppError mapped to 401.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            token = get_bearer_token(request.headers)
            user_id = validate_jwt(token, current_app.config["JWT_SECRET"])
            user = storage.get(User, user_id)
            if not user:
                raise AppError(ErrorKind.INVALID_TOKEN, "User not found")
            g.current_user = user
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def api_key_required(config_key: str = "POLKA_KEY"):
    """Require `Authorization: ApiKey <key>` matching app.config[config_key]."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            key = get_api_key(request.headers)
            expected = current_app.config.get(config_key) or ""
            if not expected or not hmac.compare_digest(key.encode(), expected.encode()):
                raise AppError(ErrorKind.INVALID_TOKEN, "Invalid API key")
            return fn(*args, **kwargs)

        return wrapper

    return decorator
