from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .students.controller import register as register_students
from .students.seed import seed_if_empty

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Any] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()
    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    container = container or build_container(settings=settings)
    logger.info("Student store backend: %s", backend)

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        if seed_if_empty(container.store, container.clock()):
            logger.info("Seeded demo students")

    register_error_handlers(app)
    register_students(app, container)
    register_attendance(app, container)

    return app
