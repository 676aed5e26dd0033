"""Architecture boundary checks keeping the parser core free of runtime coupling."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_FORBIDDEN_PREFIXES = ("pantryline.runtime", "pantryline.application", "pantryline.cli")


def _imports(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    result: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                result.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            base = "." * node.level + (node.module or "")
            result.append(base)
    return result


@pytest.mark.parametrize("package", ["domain", "inventory"])
def test_pure_packages_do_not_import_runtime_layers(package: str) -> None:
    violations: list[str] = []
    for path in sorted((_ROOT / package).rglob("*.py")):
        for mod in _imports(path):
            if mod.startswith(_FORBIDDEN_PREFIXES):
                violations.append(f"{path}: {mod}")
    assert not violations, "Pure package -> runtime layer import violations:\n" + "\n".join(violations)


@pytest.mark.parametrize("package", ["domain", "inventory"])
def test_pure_packages_do_no_file_io(package: str) -> None:
    violations: list[str] = []
    for path in sorted((_ROOT / package).rglob("*.py")):
        for mod in _imports(path):
            if mod in {"pathlib", "os", "tomllib", "io"}:
                violations.append(f"{path}: {mod}")
    assert not violations, "Pure package I/O imports:\n" + "\n".join(violations)
