"""Dugout - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv

import flet as ft

from dugout.app.routes import ROUTE_WELCOME
from dugout.app.state import Store
from dugout.app.ui.layouts.shell import build_shell
from dugout.shared.core.configuration import ValidationLevel, get_config

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
LOGS_DIR = DATA_DIR / "logs"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """File handler at LOG_LEVEL (default DEBUG) in data/logs/dugout.log, console at WARNING+."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    log_file_path = LOGS_DIR / "dugout.log"

    log_level_str = os.getenv("LOG_LEVEL", "DEBUG").upper()
    file_log_level = getattr(logging, log_level_str, logging.DEBUG)
    if not isinstance(file_log_level, int):
        file_log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_core").setLevel(logging.WARNING)
    logging.getLogger("flet_runtime").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)

    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")


async def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info("Initializing Dugout...")

    store = Store.create(config=get_config(ValidationLevel.LENIENT))
    await store.app.initialize()

    shell = build_shell(page, store)
    shell.render(page.route if page.route not in ("", "/") else ROUTE_WELCOME)

    logger.info("Application initialized successfully")


def run() -> None:
    """Console entry point: desktop window, or a web server when FLET_WEB_MODE is on."""
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")
    configure_logging()

    ui = get_config(ValidationLevel.LENIENT).ui
    assets_dir = str(PROJECT_ROOT / ui.assets_dir)
    if ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {ui.flet_port}")
        ft.app(target=main, view=ft.AppView.WEB_BROWSER, port=ui.flet_port, assets_dir=assets_dir)
    else:
        ft.app(target=main, assets_dir=assets_dir)


if __name__ == "__main__":
    run()
