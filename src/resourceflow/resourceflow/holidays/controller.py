from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..web.http import api_view, created, json_body


def register(app: Flask, container: Container) -> None:
    service = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="holidays_list")
    @api_view
    def holidays_list():
        holidays = service.list(country=request.args.get("country"), year=request.args.get("year"))
        return jsonify([h.to_dict() for h in holidays])

    @app.route("/api/holidays/<int:holiday_id>", methods=["GET"], endpoint="holidays_get")
    @api_view
    def holidays_get(holiday_id: int):
        return jsonify(service.get(holiday_id).to_dict())

    @app.route("/api/holidays", methods=["POST"], endpoint="holidays_create")
    @api_view
    def holidays_create():
        return created(service.create(json_body()).to_dict())

    @app.route("/api/holidays/<int:holiday_id>", methods=["PUT"], endpoint="holidays_update")
    @api_view
    def holidays_update(holiday_id: int):
        return jsonify(service.update(holiday_id, json_body()).to_dict())

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="holidays_delete")
    @api_view
    def holidays_delete(holiday_id: int):
        service.delete(holiday_id)
        return jsonify({"message": "Holiday deleted successfully"})
