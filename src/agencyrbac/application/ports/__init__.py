"""Application ports - interfaces for external adapters."""

from agencyrbac.application.ports.permission_resolver import PermissionResolver
from agencyrbac.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
