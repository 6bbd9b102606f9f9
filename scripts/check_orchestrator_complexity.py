#!/usr/bin/env python3
"""Size and nesting guard for the run orchestration modules."""

from __future__ import annotations

import ast
from collections.abc import Iterator
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGETS = (
    ROOT / "src/debom/application/use_cases.py",
    ROOT / "src/debom/infrastructure/strategies.py",
)
MAX_STATEMENTS = 25
MAX_BLOCK_DEPTH = 3

_FUNCTIONS = (ast.FunctionDef, ast.AsyncFunctionDef)
_BLOCKS = (ast.If, ast.For, ast.AsyncFor, ast.While, ast.With, ast.AsyncWith, ast.Try, ast.Match)


def _child_statements(node: ast.AST) -> Iterator[ast.stmt]:
    for child in ast.iter_child_nodes(node):
        if isinstance(child, ast.stmt):
            yield child
        elif isinstance(child, (ast.ExceptHandler, ast.match_case)):
            yield from _child_statements(child)


def _count_statements(node: ast.AST) -> int:
    total = 0
    for child in _child_statements(node):
        total += 1
        if not isinstance(child, _FUNCTIONS):
            total += _count_statements(child)
    return total


def _block_depth(node: ast.AST) -> int:
    deepest = 0
    for child in _child_statements(node):
        if isinstance(child, _FUNCTIONS):
            continue
        depth = _block_depth(child) + (1 if isinstance(child, _BLOCKS) else 0)
        deepest = max(deepest, depth)
    return deepest


def check_module(path: Path) -> list[str]:
    """Return one violation line per function over either threshold.

    Nested functions are measured on their own and do not count toward the
    enclosing function.
    """
    tree = ast.parse(path.read_text(encoding="utf-8"))
    violations: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, _FUNCTIONS):
            continue
        statements = _count_statements(node)
        if statements > MAX_STATEMENTS:
            violations.append(f"{path.name}:{node.lineno} {node.name}: {statements} statements")
        depth = _block_depth(node)
        if depth > MAX_BLOCK_DEPTH:
            violations.append(f"{path.name}:{node.lineno} {node.name}: blocks nested {depth} deep")
    return violations


def main() -> None:
    """Fail when an orchestration function grows too long or too deep."""
    violations = [line for target in TARGETS for line in check_module(target)]
    if violations:
        raise SystemExit(
            "Orchestrator complexity threshold exceeded:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
