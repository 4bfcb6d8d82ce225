"""GUI utility modules."""

from .qt_scheduler import QtScheduler
from .service_factory import create_search_controller, create_settings

__all__ = ["QtScheduler", "create_search_controller", "create_settings"]
