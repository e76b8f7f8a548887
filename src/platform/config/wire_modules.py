"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import purchase_tickets_use_case


WIRE_MODULES: list[ModuleType] = [
    purchase_tickets_use_case,
]
