from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import require_date
from ..common.validators import require_positive_id
from ..container import Container
from ..web.http import api_view, created, json_body


def register(app: Flask, container: Container) -> None:
    service = container.planner_service

    @app.route("/api/planner/drop", methods=["POST"], endpoint="planner_drop")
    @api_view
    def planner_drop():
        return created(service.drop(json_body()).to_dict())

    @app.route("/api/planner/allocations/<int:allocation_id>/move", methods=["POST"], endpoint="planner_move")
    @api_view
    def planner_move(allocation_id: int):
        return jsonify(service.move(allocation_id, json_body()).to_dict())

    @app.route("/api/planner/allocations/<int:allocation_id>/resize", methods=["POST"], endpoint="planner_resize")
    @api_view
    def planner_resize(allocation_id: int):
        return jsonify(service.resize(allocation_id, json_body()).to_dict())

    @app.route("/api/planner/cell", methods=["GET"], endpoint="planner_cell")
    @api_view
    def planner_cell():
        employee_id = require_positive_id(request.args.get("employeeId") or request.args.get("employee_id"), "Employee")
        day = require_date(request.args.get("date"), "Date")
        return jsonify(service.cell(employee_id=employee_id, day=day))
