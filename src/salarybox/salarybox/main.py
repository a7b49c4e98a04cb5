from __future__ import annotations

import importlib
import logging
from datetime import datetime
from typing import Callable

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.datetime_utils import now_local
from .common.web import register_error_handlers
from .config import get_settings_module
from .container import build_container
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users


def create_app(settings_module: str | None = None, *, clock: Callable[[], datetime] | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    latency = float(getattr(settings, "SIMULATED_LATENCY", 0.3))
    seed = int(getattr(settings, "RANDOM_SEED", 42))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.info("settings=%s latency=%ss seed=%s", settings_module, latency, seed)

    container = build_container(latency=latency, seed=seed, clock=clock or now_local)
    app.extensions["salarybox"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)

    return app
