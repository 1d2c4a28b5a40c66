from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..container import Container
from .http import json_error


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hello", methods=["GET"], endpoint="hello")
    def hello():
        return jsonify({"message": "Hello from ResourceFlow API"})

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        return json_error(error.code or 500, error.name, error.description or error.name)
