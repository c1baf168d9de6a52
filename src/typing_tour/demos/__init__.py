"""Registry of topic demonstrations.

Each topic module defines numbered ``demo_*`` functions and a ``run_all``
entry point. Every demo prints numbered lines so a missing line is easy to
spot when comparing runs.

To add a topic:
1. Create ``<topic>.py`` with numbered ``demo_*`` functions and a ``run_all``.
2. Append its module name to ``TOPICS``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Callable

TOPICS = [
    "value_types",
    "strings",
    "ordered_collections",
]

MODULES: list[tuple[str, Callable[[], None]]] = []


def register(module_name: str) -> None:
    module = import_module(f"{__name__}.{module_name}")
    MODULES.append((module_name, module.run_all))


for name in TOPICS:
    register(name)
