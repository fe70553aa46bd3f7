# showcase_api/services/__init__.py
from .base import BaseService
from .registry import list_services, get_service_class, get_service_instance

__all__ = [
    "BaseService",
    "list_services",
    "get_service_class",
    "get_service_instance",
]
