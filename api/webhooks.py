"""
Partner webhooks. Polka calls us when a user upgrades to Chirpy Red;
requests carry `Authorization: ApiKey <POLKA_KEY>`.
"""
from __future__ import annotations

import logging

from flask import Blueprint, request

from models import storage
from models.schemas.webhook import WebhookEventSchema, USER_UPGRADED
from utils.decorators import api_key_required
from utils.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)

bp = Blueprint("webhooks", __name__)

event_schema = WebhookEventSchema()


@bp.post("/polka/webhooks")
@api_key_required("POLKA_KEY")
def polka_webhook():
    """
    Handle a Polka payment event
    ---
    tags: [Webhooks]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            event: { type: string }
            data:
              type: object
              properties:
                userId: { type: string }
    responses:
      204: { description: Handled or ignored }
      401: { description: Bad API key }
      404: { description: Unknown user }
    """
    payload = event_schema.load(request.get_json(silent=True) or {})
    if payload["event"] != USER_UPGRADED:
        return ("", 204)

    data = payload.get("data")
    if not data:
        raise AppError(ErrorKind.BAD_REQUEST, "data.userId is required")

    user = storage.upgrade_user_to_chirpy_red(data["user_id"])
    if not user:
        raise AppError(ErrorKind.NOT_FOUND, "User not found")
    logger.info("User %s upgraded to Chirpy Red", user.id)
    return ("", 204)
