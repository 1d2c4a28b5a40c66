from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.http import api_view, created, json_body, query_int


def register(app: Flask, container: Container) -> None:
    service = container.vacation_service

    @app.route("/api/vacations", methods=["GET"], endpoint="vacations_list")
    @api_view
    def vacations_list():
        vacations = service.list(employee_id=query_int("employeeId", "employee_id"))
        return jsonify([v.to_dict() for v in vacations])

    @app.route("/api/vacations/<int:vacation_id>", methods=["GET"], endpoint="vacations_get")
    @api_view
    def vacations_get(vacation_id: int):
        return jsonify(service.get(vacation_id).to_dict())

    @app.route("/api/vacations", methods=["POST"], endpoint="vacations_create")
    @api_view
    def vacations_create():
        return created(service.create(json_body()).to_dict())

    @app.route("/api/vacations/<int:vacation_id>", methods=["PUT"], endpoint="vacations_update")
    @api_view
    def vacations_update(vacation_id: int):
        return jsonify(service.update(vacation_id, json_body()).to_dict())

    @app.route("/api/vacations/<int:vacation_id>", methods=["DELETE"], endpoint="vacations_delete")
    @api_view
    def vacations_delete(vacation_id: int):
        service.delete(vacation_id)
        return jsonify({"message": "Vacation deleted successfully"})
