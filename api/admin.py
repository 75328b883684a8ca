import logging

from flask import Blueprint, current_app

from models import storage
from utils.errors import AppError, ErrorKind
from .fileserver import get_metrics

logger = logging.getLogger(__name__)

bp = Blueprint("admin", __name__)

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@bp.get("/metrics")
def metrics():
    """
    Fileserver visit count
    ---
    tags: [Admin]
    produces:
      - text/html
    responses:
      200: { description: OK }
    """
    body = METRICS_TEMPLATE.format(hits=get_metrics().hits)
    return body, 200, {"Content-Type": "text/html; charset=utf-8"}


@bp.post("/reset")
def reset():
    """
    Delete all users and reset the visit counter (dev platform only)
    ---
    tags: [Admin]
    responses:
      200: { description: Reset }
      403: { description: Not a dev platform }
    """
    if current_app.config.get("PLATFORM") != "dev":
        raise AppError(ErrorKind.FORBIDDEN, "Reset is only allowed in dev environment")
    deleted = storage.delete_all_users()
    get_metrics().reset()
    logger.warning("Admin reset: deleted %d users", deleted)
    return "Reset successful", 200, {"Content-Type": "text/plain; charset=utf-8"}
