from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .export.controller import register as register_export

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_STATS_DAYS"] = int(getattr(settings, "DEFAULT_STATS_DAYS", 30))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = container or build_container(settings=settings)
    logger.info(
        "[employee-portal] settings=%s overtime_threshold=%s multiplier=%s",
        settings_module,
        container.policy.overtime_threshold,
        container.policy.overtime_multiplier,
    )

    register_attendance(app, container)
    register_employees(app, container)
    register_export(app, container)

    return app
