"""
FoodQ Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    FOODQ = {
        "QUEUE_STORE": "foodq.adapters.memory.InMemoryQueueStore",
        "LOCK_TIMEOUT": 5,
    }

    # Option 2: Flat
    FOODQ_QUEUE_STORE = "foodq.adapters.memory.InMemoryQueueStore"
    FOODQ_LOCK_TIMEOUT = 5

All settings have sensible defaults; no configuration is required.
"""

import logging
import threading

from django.conf import settings

logger = logging.getLogger(__name__)


# ── Defaults ──

DEFAULTS = {
    "QUEUE_STORE": "foodq.adapters.orm.OrmQueueStore",
    "DATABASE_ALIAS": "default",
    "LOCK_TIMEOUT": 10,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a foodq setting.

    Looks up in order:
    1. FOODQ dict (e.g. FOODQ = {"LOCK_TIMEOUT": 5})
    2. Flat setting (e.g. FOODQ_LOCK_TIMEOUT = 5)
    3. DEFAULTS
    """
    foodq_dict = getattr(settings, "FOODQ", {})
    if name in foodq_dict:
        return foodq_dict[name]

    flat_value = getattr(settings, f"FOODQ_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


_queue_service_lock = threading.Lock()
_queue_service_instance = None


def get_queue_service():
    """
    Return the process-wide QueueService.

    Built once from the QUEUE_STORE setting and shared by every request.
    """
    global _queue_service_instance

    if _queue_service_instance is None:
        with _queue_service_lock:
            if _queue_service_instance is None:  # double-checked
                from django.utils.module_loading import import_string

                from foodq.service import QueueService

                store_class = import_string(get_setting("QUEUE_STORE"))
                _queue_service_instance = QueueService(store_class())
                logger.info(f"Queue service started with {store_class.__name__}")

    return _queue_service_instance


def reset_queue_service() -> None:
    """Close the store and drop the singleton (shutdown and tests)."""
    global _queue_service_instance

    with _queue_service_lock:
        if _queue_service_instance is not None:
            _queue_service_instance.store.close()
        _queue_service_instance = None
