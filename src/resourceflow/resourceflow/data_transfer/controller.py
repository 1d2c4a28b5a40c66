from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today
from ..common.validators import require_enum
from ..container import Container
from ..core.enums import ImportMode
from ..core.exceptions import ValidationError
from ..web.http import api_view


def register(app: Flask, container: Container) -> None:
    service = container.data_transfer_service

    @app.route("/api/export", methods=["GET"], endpoint="data_export")
    @api_view
    def data_export():
        if (request.args.get("format") or "json").lower() == "xlsx":
            content = service.export_excel()
            return send_file(
                io.BytesIO(content),
                mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                as_attachment=True,
                download_name=f"resourceflow-export-{today().isoformat()}.xlsx",
            )
        return jsonify(service.export_data())

    @app.route("/api/import", methods=["POST"], endpoint="data_import")
    @api_view
    def data_import():
        payload = request.get_json(silent=True)
        if payload is None:
            raise ValidationError("Request body must be JSON")
        mode = require_enum(ImportMode, request.args.get("mode") or ImportMode.APPEND.value, "mode")
        return jsonify(service.import_data(payload, mode=mode).to_dict())

    @app.route("/api/data/stats", methods=["GET"], endpoint="data_stats")
    @api_view
    def data_stats():
        return jsonify(service.stats())
