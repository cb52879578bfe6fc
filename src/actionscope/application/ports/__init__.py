"""Application ports - interfaces for external adapters."""

from actionscope.application.ports.permission_checker import PermissionChecker
from actionscope.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
