from __future__ import annotations

from flask import Blueprint, request, jsonify, g

from models import storage
from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema, clean_body
from utils.decorators import jwt_required
from utils.errors import AppError, ErrorKind

bp = Blueprint("chirps", __name__)

create_schema = ChirpCreateSchema()
out_schema = ChirpOutSchema()
out_list_schema = ChirpOutSchema(many=True)


def parse_sort(default="asc") -> bool:
    """Return True for descending order."""
    sort = (request.args.get("sort") or default).lower()
    if sort not in ("asc", "desc"):
        raise AppError(ErrorKind.BAD_REQUEST, "Unsupported sort order. Allowed: asc, desc")
    return sort == "desc"


@bp.post("/chirps")
@jwt_required()
def create_chirp():
    """
    Create a chirp as the authenticated user
    ---
    tags: [Chirps]
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            body: { type: string, maxLength: 140 }
    responses:
      201: { description: Created }
      400: { description: Validation error }
      401: { description: Unauthorized }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    chirp = storage.create_chirp(clean_body(data["body"]), g.current_user.id)
    return jsonify(out_schema.dump(chirp)), 201


@bp.get("/chirps")
def list_chirps():
    """
    List chirps ordered by creation time
    ---
    tags: [Chirps]
    parameters:
      - in: query
        name: authorId
        type: string
      - in: query
        name: sort
        type: string
        default: asc
        description: "Allowed: asc or desc"
    responses:
      200: { description: OK }
    """
    descending = parse_sort()
    rows = storage.get_chirps(author_id=request.args.get("authorId"), descending=descending)
    return jsonify(out_list_schema.dump(rows)), 200


@bp.get("/chirps/<chirp_id>")
def get_chirp(chirp_id: str):
    """
    Get a chirp by id
    ---
    tags: [Chirps]
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    chirp = storage.get_chirp(chirp_id)
    if not chirp:
        raise AppError(ErrorKind.NOT_FOUND, "Chirp not found")
    return jsonify(out_schema.dump(chirp)), 200


@bp.delete("/chirps/<chirp_id>")
@jwt_required()
def delete_chirp(chirp_id: str):
    """
    Delete a chirp (author only)
    ---
    tags: [Chirps]
    security:
      - Bearer: []
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      204: { description: Deleted }
      401: { description: Unauthorized }
      403: { description: Not the author }
      404: { description: Not found }
    """
    chirp = storage.get_chirp(chirp_id)
    if not chirp:
        raise AppError(ErrorKind.NOT_FOUND, "Chirp not found")
    if chirp.user_id != g.current_user.id:
        raise AppError(ErrorKind.FORBIDDEN, "You can only delete your own chirps")
    storage.delete_chirp(chirp)
    return ("", 204)


@bp.post("/validate_chirp")
def validate_chirp():
    """
    Validate a chirp body and return it with banned words masked
    ---
    tags: [Chirps]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            body: { type: string, maxLength: 140 }
    responses:
      200: { description: OK }
      400: { description: Validation error }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    return jsonify({"cleanedBody": clean_body(data["body"])}), 200
