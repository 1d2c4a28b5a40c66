from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .database.bootstrap import apply_schema, ensure_default_settings, list_tables, populate_holidays, seed_sample_data

from .container import build_container
from .allocations.controller import register as register_allocations
from .capacity.controller import register as register_capacity
from .data_transfer.controller import register as register_data_transfer
from .holidays.controller import register as register_holidays
from .planner.controller import register as register_planner
from .projects.controller import register as register_projects
from .settings.controller import register as register_settings
from .team_members.controller import register as register_team_members
from .vacations.controller import register as register_vacations
from .web.controller import register as register_web
from .web.security import register_security_headers

logger = logging.getLogger("resourceflow")

_SETTING_NAMES = (
    "SECRET_KEY",
    "DATABASE_URL",
    "DEBUG",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
    "WEEKS_PER_MONTH",
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "SQL_ECHO",
)


def _load_settings(overrides: Optional[dict]) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name, None) for name in _SETTING_NAMES}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def _configure_logging(level_name: Optional[str]) -> None:
    level = getattr(logging, str(level_name or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = _load_settings(overrides)
    _configure_logging(settings["LOG_LEVEL"])

    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings["DEBUG"])
    app.json.sort_keys = False
    database_url = str(settings["DATABASE_URL"])

    origins = settings["CORS_ORIGINS"] or "*"
    CORS(app, resources={r"/api/*": {"origins": origins}})
    register_security_headers(app)

    container = build_container(
        database_url=database_url,
        echo=bool(settings["SQL_ECHO"]),
        weeks_per_month=float(settings["WEEKS_PER_MONTH"] or 4),
    )
    app.extensions["resourceflow"] = container

    logger.info("settings=%s db=%s", settings["SETTINGS_MODULE"], container.conn.engine.url.render_as_string(hide_password=True))

    if settings["AUTO_INIT_DB"]:
        apply_schema(container.conn)
        ensure_default_settings(container.conn)
        logger.info("schema ready (tables=%s)", len(list_tables(container.conn)))
    if settings["AUTO_SEED_DB"]:
        seeded = seed_sample_data(container.conn)
        inserted, _ = populate_holidays(container.conn)
        logger.info("sample data %s, holidays inserted=%s", "seeded" if seeded else "already present", inserted)

    register_web(app, container)
    register_team_members(app, container)
    register_projects(app, container)
    register_holidays(app, container)
    register_vacations(app, container)
    register_allocations(app, container)
    register_settings(app, container)
    register_capacity(app, container)
    register_planner(app, container)
    register_data_transfer(app, container)

    return app
