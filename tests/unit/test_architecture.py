"""Architecture tests: the domain layer stays free of outer layers.

- domain/ imports nothing from application, infrastructure, config,
  bootstrap or the CLI
- domain/ imports no third-party libraries
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[2] / "swarm_relay"
DOMAIN_ROOT = PACKAGE_ROOT / "domain"

OUTER_LAYERS = (
    "swarm_relay.application",
    "swarm_relay.infrastructure",
    "swarm_relay.config",
    "swarm_relay.bootstrap",
    "swarm_relay.cli",
)


def _imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            modules.append(node.module)
        elif isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
    return modules


DOMAIN_FILES = sorted(DOMAIN_ROOT.rglob("*.py"))


class TestDomainBoundary:
    """Domain modules only import the standard library and the domain."""

    def test_domain_files_found(self) -> None:
        assert DOMAIN_FILES

    @pytest.mark.parametrize("path", DOMAIN_FILES, ids=lambda p: p.name)
    def test_no_outer_layer_imports(self, path: Path) -> None:
        violations = [
            module
            for module in _imported_modules(path)
            if module.startswith(OUTER_LAYERS)
        ]
        assert violations == []

    @pytest.mark.parametrize("path", DOMAIN_FILES, ids=lambda p: p.name)
    def test_no_third_party_imports(self, path: Path) -> None:
        third_party = [
            module
            for module in _imported_modules(path)
            if module.split(".")[0] not in sys.stdlib_module_names
            and not module.startswith("swarm_relay.domain")
            and module != "__future__"
        ]
        assert third_party == []
