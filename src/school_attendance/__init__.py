"""School attendance backend.

Organized by feature modules (students, attendance, results, notifications)
with a thin Flask controller layer over service and repository layers.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .common.log_config import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_MAIL_FROM
from .database.bootstrap import apply_schema, list_tables
from .attendance.controller import register as register_attendance
from .health.controller import register as register_health
from .results.controller import register as register_results
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    When container is None it is built from the active settings module
    (APP_ENV), which opens the MySQL pool.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    app.json.sort_keys = False

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            f"settings={settings_module} "
            f"db={db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info(f"schema ready (tables={len(list_tables(db_config))})")

        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_DB_POOL_SIZE)),
            resend_api_key=getattr(settings, "RESEND_API_KEY", None),
            mail_from=getattr(settings, "MAIL_FROM", DEFAULT_MAIL_FROM),
        )

    app.extensions["container"] = container

    register_students(app, container)
    register_attendance(app, container)
    register_results(app, container)
    register_health(app, container)

    return app
