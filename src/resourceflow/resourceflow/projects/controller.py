from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..web.http import api_view, created, json_body


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.route("/api/projects", methods=["GET"], endpoint="projects_list")
    @api_view
    def projects_list():
        projects = service.list(status=request.args.get("status"), search=request.args.get("search"))
        return jsonify([p.to_dict() for p in projects])

    @app.route("/api/projects/<int:project_id>", methods=["GET"], endpoint="projects_get")
    @api_view
    def projects_get(project_id: int):
        return jsonify(service.get(project_id).to_dict())

    @app.route("/api/projects", methods=["POST"], endpoint="projects_create")
    @api_view
    def projects_create():
        return created(service.create(json_body()).to_dict())

    @app.route("/api/projects/<int:project_id>", methods=["PUT"], endpoint="projects_update")
    @api_view
    def projects_update(project_id: int):
        return jsonify(service.update(project_id, json_body()).to_dict())

    @app.route("/api/projects/<int:project_id>", methods=["DELETE"], endpoint="projects_delete")
    @api_view
    def projects_delete(project_id: int):
        service.delete(project_id)
        return jsonify({"message": "Project deleted successfully"})
