from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

_CREATE_DB_OR_USE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")


def _strip_create_db_and_use(sql: str) -> str:
    """schema.sql names its own database; the configured one wins."""
    return _CREATE_DB_OR_USE.sub("", sql)


def _iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';', ignoring separators inside quotes and ``--`` comments."""
    stmt: list[str] = []
    quote = ""
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            stmt.append(ch)
            if ch == "\\" and i + 1 < len(sql):
                stmt.append(sql[i + 1])
                i += 1
            elif ch == quote:
                quote = ""
        elif ch in ("'", '"', "`"):
            quote = ch
            stmt.append(ch)
        elif sql.startswith("--", i):
            newline = sql.find("\n", i)
            i = len(sql) if newline == -1 else newline
            continue
        elif ch == ";":
            text = "".join(stmt).strip()
            if text:
                yield text
            stmt = []
        else:
            stmt.append(ch)
        i += 1

    text = "".join(stmt).strip()
    if text:
        yield text


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Create the database if needed and run every statement of ``schema_path`` (idempotent DDL)."""
    ensure_database_exists(db_config)
    statements = list(_iter_sql_statements(_strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied", extra={"schema": str(schema_path), "statements": len(statements)})


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def ensure_employees(repo, employees) -> int:
    """Insert each employee whose code is not stored yet; returns how many were created."""
    created = 0
    for employee in employees:
        if repo.find_by_code(employee.code) is not None:
            continue
        repo.create(employee)
        created += 1
    logger.info("Employees seeded", extra={"employees_created": created})
    return created
