from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.http import api_view, created, json_body, query_flag


def register(app: Flask, container: Container) -> None:
    service = container.team_member_service

    @app.route("/api/team-members", methods=["GET"], endpoint="team_members_list")
    @api_view
    def team_members_list():
        members = service.list(active_only=query_flag("active"))
        return jsonify([m.to_dict() for m in members])

    @app.route("/api/team-members/<int:member_id>", methods=["GET"], endpoint="team_members_get")
    @api_view
    def team_members_get(member_id: int):
        return jsonify(service.get(member_id).to_dict())

    @app.route("/api/team-members", methods=["POST"], endpoint="team_members_create")
    @api_view
    def team_members_create():
        return created(service.create(json_body()).to_dict())

    @app.route("/api/team-members/<int:member_id>", methods=["PUT"], endpoint="team_members_update")
    @api_view
    def team_members_update(member_id: int):
        return jsonify(service.update(member_id, json_body()).to_dict())

    @app.route("/api/team-members/<int:member_id>", methods=["DELETE"], endpoint="team_members_delete")
    @api_view
    def team_members_delete(member_id: int):
        service.delete(member_id)
        return jsonify({"message": "Team member deleted successfully"})
