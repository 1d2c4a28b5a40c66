from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import require_date, require_month, today
from ..common.validators import require_int
from ..container import Container
from ..web.http import api_view, query_int


def register(app: Flask, container: Container) -> None:
    service = container.utilization_service

    def _month():
        return require_month(request.args.get("month"), default=today())

    @app.route("/api/utilization", methods=["GET"], endpoint="utilization_team")
    @api_view
    def utilization_team():
        return jsonify([m.to_dict() for m in service.team_month(month=_month())])

    @app.route("/api/utilization/members/<int:member_id>", methods=["GET"], endpoint="utilization_member")
    @api_view
    def utilization_member(member_id: int):
        if request.args.get("start"):
            start = require_month(request.args.get("start"))
            months = require_int(request.args.get("months") or 6, "months")
            rows = service.timeline(member_id=member_id, start_month=start, months=months)
            return jsonify([r.to_dict() for r in rows])
        return jsonify(service.member_month(member_id=member_id, month=_month()).to_dict())

    @app.route("/api/utilization/projects", methods=["GET"], endpoint="utilization_projects")
    @api_view
    def utilization_projects():
        return jsonify([p.to_dict() for p in service.project_distribution(month=_month())])

    @app.route("/api/utilization/daily", methods=["GET"], endpoint="utilization_daily")
    @api_view
    def utilization_daily():
        start = require_date(request.args.get("start"), "start")
        end = require_date(request.args.get("end"), "end")
        return jsonify(service.daily(start=start, end=end, employee_id=query_int("employeeId", "employee_id")))

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api_view
    def dashboard():
        return jsonify(service.dashboard(month=_month()))
