from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, g

from models import storage
from models.schemas.user import UserCreateSchema, UserUpdateSchema, UserOutSchema
from utils.decorators import jwt_required
from utils.errors import AppError, ErrorKind
from utils.security import hash_password

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__)

user_create_schema = UserCreateSchema()
user_update_schema = UserUpdateSchema()
user_out_schema = UserOutSchema()


@bp.post("/users")
def create_user():
    """
    Register a new user.
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      201:
        description: Created
      400:
        description: Validation error
      409:
        description: Email already registered
    """
    data = user_create_schema.load(request.get_json(silent=True) or {})

    if storage.find_user_by_email(data["email"]):
        raise AppError(ErrorKind.CONFLICT, "Email already registered")

    user = storage.create_user(data["email"], hash_password(data["password"]))
    logger.info("Registered user %s", user.id)
    return jsonify(user_out_schema.dump(user)), 201


@bp.put("/users")
@jwt_required()
def update_user():
    """
    Update the current user's email and password.
    ---
    tags:
      - Users
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
      409:
        description: Email already registered
    """
    data = user_update_schema.load(request.get_json(silent=True) or {})
    user_id = g.current_user.id

    existing = storage.find_user_by_email(data["email"])
    if existing and existing.id != user_id:
        raise AppError(ErrorKind.CONFLICT, "Email already registered")

    user = storage.update_user_credentials(user_id, data["email"], hash_password(data["password"]))
    if not user:
        raise AppError(ErrorKind.NOT_FOUND, "User not found")
    return jsonify(user_out_schema.dump(user)), 200
