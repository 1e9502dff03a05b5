import logging
import os

from quart import Blueprint, jsonify, send_file, send_from_directory

from ..common.config import settings

_logger = logging.getLogger(__name__)

bp = Blueprint("downloads", __name__)


@bp.get("/downloads/<path:filename>")
async def download(filename: str):
    return await send_from_directory(settings.DOWNLOADS_DIR, filename, as_attachment=True)


@bp.get("/api/download/project-source")
async def project_source():
    path = settings.PROJECT_SOURCE_PATH
    if not os.path.isfile(path):
        _logger.error("Download error | file not found path=%s", path)
        return jsonify({"error": "File not found"}), 404
    return await send_file(path, mimetype="application/gzip", as_attachment=True)
