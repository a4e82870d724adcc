import mysql.connector
import pytest

from src.employee_records.employee_records import main as main_module
from src.employee_records.employee_records.container import Container

DB_CONFIG = {"host": "db", "port": 3306, "user": "app", "password": "pw", "database": "employee_db"}


def test_unreachable_database_does_not_block_startup(monkeypatch):
    calls = []
    monkeypatch.setattr(main_module, "can_connect", lambda cfg: False)
    monkeypatch.setattr(main_module, "apply_schema", lambda *a, **k: calls.append("schema"))

    main_module.configure_database(DB_CONFIG, auto_init=True, auto_seed=False, production=False)

    assert calls == []


def test_schema_and_seed_applied_when_enabled(monkeypatch):
    calls = []
    monkeypatch.setattr(main_module, "can_connect", lambda cfg: True)
    monkeypatch.setattr(main_module, "apply_schema", lambda cfg, schema_path: calls.append(schema_path.name))
    monkeypatch.setattr(main_module, "apply_seed_sql", lambda cfg, seed_path: calls.append(seed_path.name))
    monkeypatch.setattr(main_module, "list_tables", lambda cfg: ["Employees"])

    main_module.configure_database(DB_CONFIG, auto_init=True, auto_seed=True, production=False)

    assert calls == ["schema.sql", "seed.sql"]


def _failing_schema(cfg, schema_path):
    raise mysql.connector.ProgrammingError(msg="Access denied for user 'app'", errno=1044)


def test_configuration_failure_is_fatal_outside_production(monkeypatch):
    monkeypatch.setattr(main_module, "can_connect", lambda cfg: True)
    monkeypatch.setattr(main_module, "apply_schema", _failing_schema)

    with pytest.raises(RuntimeError, match="Database configuration failed during startup."):
        main_module.configure_database(DB_CONFIG, auto_init=True, auto_seed=False, production=False)


def test_configuration_failure_is_tolerated_in_production(monkeypatch):
    monkeypatch.setattr(main_module, "can_connect", lambda cfg: True)
    monkeypatch.setattr(main_module, "apply_schema", _failing_schema)

    main_module.configure_database(DB_CONFIG, auto_init=True, auto_seed=False, production=True)


def test_app_finds_sql_files_and_templates_in_checkout(monkeypatch, repo, service):
    monkeypatch.setenv("APP_ENV", "testing")

    app = main_module.create_app(container=Container(conn=None, employees_repo=repo, employee_service=service))

    assert (main_module.DATABASE_DIR / "schema.sql").is_file()
    assert (main_module.DATABASE_DIR / "seed.sql").is_file()
    assert app.jinja_env.get_template("employees/list.html") is not None
    assert app.jinja_env.get_template("employees/confirm_delete.html") is not None
