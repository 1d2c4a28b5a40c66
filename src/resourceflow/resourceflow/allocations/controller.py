from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.http import api_view, created, json_body, query_int


def register(app: Flask, container: Container) -> None:
    service = container.allocation_service

    @app.route("/api/project-allocations", methods=["GET"], endpoint="allocations_list")
    @api_view
    def allocations_list():
        allocations = service.list(
            employee_id=query_int("employeeId", "employee_id"),
            project_id=query_int("projectId", "project_id"),
        )
        return jsonify([a.to_dict() for a in allocations])

    @app.route("/api/project-allocations/<int:allocation_id>", methods=["GET"], endpoint="allocations_get")
    @api_view
    def allocations_get(allocation_id: int):
        return jsonify(service.get(allocation_id).to_dict())

    @app.route("/api/project-allocations", methods=["POST"], endpoint="allocations_create")
    @api_view
    def allocations_create():
        return created(service.create(json_body()).to_dict())

    @app.route("/api/project-allocations/<int:allocation_id>", methods=["PUT"], endpoint="allocations_update")
    @api_view
    def allocations_update(allocation_id: int):
        return jsonify(service.update(allocation_id, json_body()).to_dict())

    @app.route("/api/project-allocations/<int:allocation_id>", methods=["DELETE"], endpoint="allocations_delete")
    @api_view
    def allocations_delete(allocation_id: int):
        service.delete(allocation_id)
        return jsonify({"message": "Project allocation deleted successfully"})
