from __future__ import annotations

import ast
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
STORE_FILE = PROJECT_ROOT / "src" / "normstore" / "core" / "store.py"

# Methods that mutate a plain list/dict in place; on a persistent container
# their result must be kept.
_MUTATING_METHODS = frozenset(
    {"append", "extend", "insert", "pop", "popitem", "remove", "clear", "sort", "setdefault"}
)


def _is_state_access(node: ast.expr) -> bool:
    """True for ``state`` or ``state.<field>``."""
    if isinstance(node, ast.Name):
        return node.id == "state"
    return isinstance(node, ast.Attribute) and _is_state_access(node.value)


class StateMutationVisitor(ast.NodeVisitor):
    def __init__(self) -> None:
        self._function_stack: list[str] = []
        self.violations: list[tuple[int, str, str]] = []

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._function_stack.append(node.name)
        self.generic_visit(node)
        self._function_stack.pop()

    def _record(self, node: ast.AST, message: str) -> None:
        function = self._function_stack[-1] if self._function_stack else "<module>"
        self.violations.append((getattr(node, "lineno", 0), function, message))

    def _check_targets(self, node: ast.AST, targets: list[ast.expr]) -> None:
        for target in targets:
            if isinstance(target, ast.Attribute | ast.Subscript) and _is_state_access(target.value):
                self._record(node, "assignment into the input state")

    def visit_Assign(self, node: ast.Assign) -> None:
        self._check_targets(node, node.targets)
        self.generic_visit(node)

    def visit_AugAssign(self, node: ast.AugAssign) -> None:
        self._check_targets(node, [node.target])
        self.generic_visit(node)

    def visit_Delete(self, node: ast.Delete) -> None:
        self._check_targets(node, node.targets)
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        func = node.func
        if (
            isinstance(func, ast.Attribute)
            and func.attr in _MUTATING_METHODS
            and _is_state_access(func.value)
            and isinstance(node.parent, ast.Expr)  # type: ignore[attr-defined]
        ):
            self._record(node, f"result of state...{func.attr}() is discarded")
        self.generic_visit(node)


def _link_parents(tree: ast.AST) -> None:
    for parent in ast.walk(tree):
        for child in ast.iter_child_nodes(parent):
            child.parent = parent  # type: ignore[attr-defined]


def main() -> int:
    source = STORE_FILE.read_text(encoding="utf-8")
    tree = ast.parse(source, filename=str(STORE_FILE))
    _link_parents(tree)
    visitor = StateMutationVisitor()
    visitor.visit(tree)

    if not visitor.violations:
        print("semantic-lint: ok")
        return 0

    print("semantic-lint: found operations that touch their input state in place:")
    for line, function, message in visitor.violations:
        print(f"  - {STORE_FILE}:{line} ({function}): {message}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
