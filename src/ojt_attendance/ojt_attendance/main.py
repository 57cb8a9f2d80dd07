from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .attendance.controller import register as register_attendance
from .common.datetime_utils import load_timezone
from .container import Container, build_container
from .core.constants import DEFAULT_OFFICE_SSID, ITEMS_PER_PAGE
from .database.bootstrap import apply_schema, list_tables
from .network.gate import NetworkPolicy

logger = logging.getLogger("ojt_attendance")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG")

    if container is None:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            network_policy=NetworkPolicy.from_settings(
                allowed_ips=getattr(settings, "CAMPUS_PUBLIC_IPS", ()),
                allow_local=bool(getattr(settings, "ALLOW_LOCAL_NETWORK", False)),
            ),
            admin_email=getattr(settings, "ADMIN_EMAIL", ""),
            admin_password_hash=getattr(settings, "ADMIN_PASSWORD_HASH", ""),
            tz=load_timezone(getattr(settings, "TIMEZONE", "")),
            office_ssid=getattr(settings, "OFFICE_SSID", DEFAULT_OFFICE_SSID),
            page_size=int(getattr(settings, "ITEMS_PER_PAGE", ITEMS_PER_PAGE)),
        )

    register_attendance(app, container)
    register_admin(app, container)

    return app
