from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.http import api_view, json_body


def register(app: Flask, container: Container) -> None:
    service = container.settings_service

    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    @api_view
    def settings_get():
        return jsonify(service.get().to_dict())

    @app.route("/api/settings", methods=["PUT"], endpoint="settings_update")
    @api_view
    def settings_update():
        return jsonify(service.update(json_body()).to_dict())
