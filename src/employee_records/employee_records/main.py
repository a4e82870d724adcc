from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

import mysql.connector
import structlog
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, can_connect, list_tables
from .employees.controller import register as register_employees

SERVICE_NAME = "employee-records"
DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"

logger = structlog.get_logger(__name__)


def configure_database(db_config: dict, *, auto_init: bool, auto_seed: bool, production: bool) -> None:
    """Bring the schema up to date before the first request.

    Production keeps starting when the database is misconfigured (requests will
    report data-access errors); other environments fail fast.
    """

    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    logger.info("database_configuration_started", db=target)

    try:
        if not can_connect(db_config):
            logger.warning("database_unreachable_at_startup", db=target)
            return

        if auto_init:
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        if auto_seed:
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")

        tables = list_tables(db_config)
        if "Employees" not in tables and "employees" not in tables:
            logger.warning("employees_table_missing", db=target, tables=tables)
        else:
            logger.info("database_ready", db=target, tables=len(tables))
    except (mysql.connector.Error, OSError) as e:
        logger.error("database_configuration_failed", db=target, error=str(e), exc_info=True)
        if production:
            logger.warning("starting_despite_database_configuration_failure")
            return
        raise RuntimeError("Database configuration failed during startup.") from e


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(
        SERVICE_NAME,
        log_level=getattr(settings, "LOG_LEVEL", "INFO"),
        json_logs=bool(getattr(settings, "JSON_LOGS", True)),
    )
    logger.info("app_starting", settings=settings_module)

    if container is None:
        configure_database(
            db_config,
            auto_init=bool(getattr(settings, "AUTO_INIT_DB", False)),
            auto_seed=bool(getattr(settings, "AUTO_SEED_DB", False)),
            production=settings_module == "config.production",
        )
        container = build_container(db_config=db_config)

    register_employees(app, container)

    return app
