"""
Static file server mounted at /app/ with a visit counter.

The counter lives on app.extensions and is reset by POST /admin/reset; it is
not synchronised across workers or threads.
"""
from flask import Blueprint, current_app, send_from_directory

bp = Blueprint("fileserver", __name__)


class FileserverMetrics:
    def __init__(self):
        self.hits = 0

    def increment(self):
        self.hits += 1

    def reset(self):
        self.hits = 0


def get_metrics() -> FileserverMetrics:
    return current_app.extensions["fileserver_metrics"]


@bp.before_request
def count_hit():
    get_metrics().increment()


@bp.get("/", defaults={"filename": "index.html"})
@bp.get("/<path:filename>")
def serve(filename: str):
    return send_from_directory(current_app.config["STATIC_ROOT"], filename)
