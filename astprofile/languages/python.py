"""Python syntax trees from the ast module."""

from __future__ import annotations

import ast
from pathlib import Path

from astprofile.core.exceptions import ParseError, TreeTooDeepError
from astprofile.core.models import NodeKind
from astprofile.languages.base import SyntaxTree

# Context and operator nodes are shared singletons in CPython; they are
# folded into their parent's label instead of being walked.
_SKIPPED = (ast.expr_context, ast.boolop, ast.operator, ast.unaryop, ast.cmpop)

_KINDS: dict[type[ast.AST], NodeKind] = {
    ast.If: NodeKind.CONDITIONAL,
    ast.For: NodeKind.LOOP,
    ast.AsyncFor: NodeKind.LOOP,
    ast.While: NodeKind.LOOP,
    ast.match_case: NodeKind.CASE,
    ast.IfExp: NodeKind.CONDITIONAL_EXPRESSION,
    ast.Assign: NodeKind.VARIABLE_DECLARATION,
    ast.AnnAssign: NodeKind.VARIABLE_DECLARATION,
}


class PythonTreeProvider:
    """Tree provider for Python source files using the ast module."""

    def supports(self, file: Path) -> bool:
        """Check if this provider supports the given file."""
        return file.suffix == ".py"

    def parse(self, file: Path) -> SyntaxTree:
        """Parse a Python file into a Module tree."""
        try:
            source = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Cannot read {file}: {e}") from e

        return self.parse_source(source, file)

    def parse_source(self, source: str, file: Path | None = None) -> SyntaxTree:
        """Parse Python source text that did not come from disk."""
        filename = str(file) if file else "<string>"
        try:
            tree = ast.parse(source, filename=filename)
        except (SyntaxError, ValueError) as e:
            raise ParseError(f"Syntax error in {filename}: {e}") from e
        except RecursionError as e:
            raise TreeTooDeepError(f"{filename} nests too deeply to parse: {e}") from e
        except MemoryError as e:
            raise ParseError(f"Out of memory while parsing {filename}") from e

        return SyntaxTree(file=file, root=tree, provider=self)

    def children(self, node: ast.AST) -> list[ast.AST]:
        return [c for c in ast.iter_child_nodes(node) if not isinstance(c, _SKIPPED)]

    def kind(self, node: ast.AST) -> NodeKind:
        return _KINDS.get(type(node), NodeKind.OTHER)

    def label(self, node: ast.AST) -> str:
        name = type(node).__name__
        detail = _detail(node)
        return f"{name} {detail}" if detail else name


def _detail(node: ast.AST) -> str:
    """Identifier, operator, or literal that distinguishes a node."""
    match node:
        case ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name) | ast.ClassDef(
            name=name
        ):
            return name
        case ast.Name(id=ident):
            return ident
        case ast.Attribute(attr=attr):
            return attr
        case ast.arg(arg=arg):
            return arg
        case ast.alias(name=name):
            return name
        case ast.keyword(arg=arg) if arg:
            return arg
        case ast.Constant(value=value):
            return repr(value)
        case ast.BinOp(op=op) | ast.BoolOp(op=op) | ast.UnaryOp(op=op) | ast.AugAssign(op=op):
            return type(op).__name__
        case ast.Compare(ops=ops):
            return " ".join(type(op).__name__ for op in ops)
        case _:
            return ""
