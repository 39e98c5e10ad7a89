from __future__ import annotations

import importlib
import logging
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from config import get_settings_module

from .common.logging_utils import setup_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    setup_logging(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        json_logs=bool(getattr(settings, "JSON_LOGS", True)),
    )
    logger.info(
        "Settings loaded",
        extra={
            "settings": settings_module,
            "db": f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
        },
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("Schema ready", extra={"tables": len(list_tables(db_config))})

    return build_container(
        db_config=db_config,
        timezone=ZoneInfo(getattr(settings, "TIMEZONE")),
        strict_day_counts=bool(getattr(settings, "STRICT_DAY_COUNTS", False)),
    )
