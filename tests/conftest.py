"""Global pytest configuration.

Registers the shared graph fixtures in ``tests.sample_graphs`` as a plugin so
pytest imports it with assertion rewriting enabled.
"""

from __future__ import annotations

pytest_plugins: list[str] = ["tests.sample_graphs"]
