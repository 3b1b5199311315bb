"""Core domain layer - reminder entity, ports, exceptions and services."""

from src.core import entities, exceptions, interfaces, services

__all__ = ["entities", "interfaces", "exceptions", "services"]
