from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.markup import escape

from .colors import Colors
from ..core.ast import ASTNode, ASTVisitor, LiteralNode, IdentifierNode, BinaryOpNode, AssignmentNode
from ..core.diagnostics import Diagnostic, DiagnosticLevel
from ..core.tokens import Token

console = Console()
err_console = Console(stderr=True)


def _is_minimal() -> bool:
    return bool(getattr(Colors, 'MINIMAL', False))


def print_stage(step: int, total: int, message: str):
    """Print a staged progress line (e.g. [1/5] Parsing)"""
    if _is_minimal():
        console.print(f"[{step}/{total}] {message}", markup=False)
    else:
        console.print(f"[cyan]●[/cyan] [bold]{step}/{total}[/bold] {escape(message)}")


def print_info(message: str):
    if _is_minimal():
        return
    console.print(f"[yellow]Info:[/yellow] {escape(message)}")


def print_error(message: str):
    if _is_minimal():
        err_console.print(f"[ERROR] {message}", markup=False)
        return
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str):
    if _is_minimal():
        err_console.print(f"[WARN] {message}", markup=False)
        return
    err_console.print(f"[#9b59b6]Warning:[/#9b59b6] {escape(message)}")


def print_success(message: str):
    if _is_minimal():
        console.print(f"[OK] {message}", markup=False)
        return
    console.print(f"[green]Success:[/green] {escape(message)}")


def print_diagnostics(diagnostics: Iterable[Diagnostic]):
    for diag in diagnostics:
        text = diag.format(with_colors=False)
        if diag.level == DiagnosticLevel.ERROR:
            print_error(text)
        elif diag.level == DiagnosticLevel.WARNING:
            print_warning(text)
        else:
            print_info(text)


def render_tokens(tokens: List[Token]) -> Table:
    table = Table(title="Tokens")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Text", style="bold")
    table.add_column("Location", style="dim")
    for i, tok in enumerate(tokens):
        location = f"{tok.location.line}:{tok.location.column}" if tok.location else ""
        style = "red" if tok.type.name == "ERROR" else None
        table.add_row(str(i), tok.type.name, escape(tok.value), location, style=style)
    return table


class _TreeBuilder(ASTVisitor):
    def visit_literal(self, node: LiteralNode):
        return Tree(f"[green]Literal[/green] {escape(node.value)}")

    def visit_identifier(self, node: IdentifierNode):
        return Tree(f"[cyan]Identifier[/cyan] {escape(node.name)}")

    def visit_binary_op(self, node: BinaryOpNode, left, right):
        tree = Tree(f"[magenta]BinaryOp[/magenta] {escape(node.operator)}")
        tree.children.extend((left, right))
        return tree

    def visit_assignment(self, node: AssignmentNode, expression):
        tree = Tree(f"[yellow]Assignment[/yellow] {escape(node.identifier)}")
        tree.children.append(expression)
        return tree


def _prune(root: Tree, max_depth: int):
    # Levels below max_depth collapse into a single "..." leaf
    stack = [(root, 0)]
    while stack:
        tree, depth = stack.pop()
        if depth >= max_depth and tree.children:
            tree.children = [Tree("[dim]...[/dim]")]
            continue
        stack.extend((child, depth + 1) for child in tree.children)


def render_ast(statements: List[ASTNode], max_depth: Optional[int] = None) -> Tree:
    if max_depth is None:
        max_depth = max(4, (console.width - 24) // 4)
    root = Tree("[bold]Program[/bold]")
    builder = _TreeBuilder()
    for stmt in statements:
        root.children.append(builder.visit(stmt))
    _prune(root, max_depth)
    return root


def render_symbols(symbols: dict) -> Table:
    table = Table(title="Symbols")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    for name, type_name in symbols.items():
        table.add_row(escape(name), type_name)
    return table


def render_ir(instructions) -> Table:
    table = Table(title="Intermediate Code")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Op", style="magenta")
    table.add_column("Operand", style="bold")
    for i, instruction in enumerate(instructions):
        table.add_row(str(i), instruction.opcode.value, escape(instruction.operand))
    return table
