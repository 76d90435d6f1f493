"""Agency RBAC - layered permission resolution for multi-tenant agencies."""

__version__ = "0.1.0"
