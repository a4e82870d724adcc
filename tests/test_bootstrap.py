from pathlib import Path

from src.employee_records.employee_records.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

DATABASE_DIR = Path(__file__).resolve().parents[1] / "database"


def test_splitter_ignores_semicolons_in_quotes_and_comments():
    sql = "-- setup; not a statement\nINSERT INTO t VALUES ('a;b');\nSELECT 1"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_schema_is_db_name_agnostic():
    sql = _strip_create_db_and_use((DATABASE_DIR / "schema.sql").read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 1
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS Employees")
    assert "UNIQUE KEY ux_employees_email (Email)" in statements[0]


def test_seed_inserts_three_demo_employees():
    sql = _strip_create_db_and_use((DATABASE_DIR / "seed.sql").read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 1
    assert statements[0].startswith("INSERT IGNORE INTO Employees")
    assert statements[0].count("@company.com") == 3


def test_email_index_is_case_insensitive_but_accent_sensitive():
    sql = _strip_create_db_and_use((DATABASE_DIR / "schema.sql").read_text(encoding="utf-8"))
    table = list(_iter_sql_statements(sql))[0]

    assert "Email        VARCHAR(150) NOT NULL COLLATE utf8mb4_0900_as_ci" in table
    assert "unicode_ci" not in table
