"""
Authentication blueprint:
- POST /login    -> user + access token + refresh token
- POST /refresh  -> new access token for a valid refresh token
- POST /revoke   -> revoke a refresh token

Access tokens are short-lived HS256 JWTs and are never stored. Refresh tokens
are opaque random strings stored in the refresh_tokens table so they can be
revoked; they are sent as `Authorization: Bearer <refresh token>`.
"""
from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, current_app

from models import storage
from models.schemas.user import UserLoginSchema, UserOutSchema
from utils.errors import AppError, ErrorKind
from utils.refresh_tokens import issue_refresh_token, redeem_refresh_token, revoke_refresh_token
from utils.security import check_password_hash, get_bearer_token, make_jwt

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()
user_out_schema = UserOutSchema()


def _access_token_for(user_id: str) -> str:
    lifetime = int(current_app.config["ACCESS_TOKEN_EXPIRES"].total_seconds())
    return make_jwt(user_id, lifetime, current_app.config["JWT_SECRET"])


@bp.post("/login")
def login():
    """
    Login: returns the user with an access token and a refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns tokens)
      401:
        description: Unauthorized
    """
    payload = user_login_schema.load(request.get_json(silent=True) or {})

    user = storage.find_user_by_email(payload["email"])
    if not user or not check_password_hash(payload["password"], user.hashed_password):
        logger.info("Failed login attempt")
        raise AppError(ErrorKind.INVALID_CREDENTIALS, "Incorrect email or password")

    token = _access_token_for(user.id)
    refresh = issue_refresh_token(storage, user.id, current_app.config["REFRESH_TOKEN_EXPIRES"])

    body = user_out_schema.dump(user)
    body["token"] = token
    body["refreshToken"] = refresh.token
    return jsonify(body), 200


@bp.post("/refresh")
def refresh():
    """
    Exchange a refresh token for a new access token (the refresh token is not rotated)
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK (returns a new access token)
      401:
        description: Invalid, expired or revoked refresh token
    """
    token = get_bearer_token(request.headers)
    user_id = redeem_refresh_token(storage, token)
    return jsonify({"token": _access_token_for(user_id)}), 200


@bp.post("/revoke")
def revoke():
    """
    Revoke a refresh token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: Revoked
      401:
        description: Missing or malformed Authorization header
      404:
        description: Unknown refresh token
    """
    token = get_bearer_token(request.headers)
    revoke_refresh_token(storage, token)
    return ("", 204)
