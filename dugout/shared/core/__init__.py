"""
Shared Core Module
==================

Event system, configuration, errors and process-exit cleanup.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Errors
from .errors import CatalogError, DugoutError, TeamNotFoundError

# Cleanup
from .service_registry import register_cleanup_handler, run_cleanup_handlers

# Configuration
from .configuration import (
    BannerConfig,
    ConfigManager,
    SearchConfig,
    SearchScope,
    SystemConfig,
    UIConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Errors
    "DugoutError",
    "TeamNotFoundError",
    "CatalogError",
    # Cleanup
    "register_cleanup_handler",
    "run_cleanup_handlers",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "UIConfig",
    "BannerConfig",
    "SearchConfig",
    "SearchScope",
    "ValidationLevel",
    "get_config_manager",
    "get_config",
]
