"""Runtime access to public CLI facade symbols.

Command modules look up ``get_lookback_days`` and ``today`` on ``salesreport.cli``
when they run, so tests can monkeypatch them on the facade.
"""

from importlib import import_module
from types import ModuleType


def cli_module() -> ModuleType:
    """Return the public CLI facade module."""
    return import_module("salesreport.cli")
