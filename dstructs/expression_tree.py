"""Build binary expression trees from infix or postfix notation."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

INFIX_EXAMPLE = "(4+6)*2"
POSTFIX_EXAMPLE = "ab+c*"


@dataclass
class ExprNode:
    """A node holding an operand or an operator symbol."""

    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator; -1 for anything else."""
    if symbol == "^":
        return 3
    if symbol in "*/" and symbol:
        return 2
    if symbol in "+-" and symbol:
        return 1
    return -1


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def _combine(operator: str, operands: list[ExprNode]) -> None:
    if len(operands) < 2:
        raise ValueError(f"operator {operator!r} is missing an operand")
    right = operands.pop()
    left = operands.pop()
    operands.append(ExprNode(operator, left, right))


def _single(operands: list[ExprNode]) -> ExprNode:
    if len(operands) != 1:
        raise ValueError("malformed expression")
    return operands[0]


def from_infix(expression: str) -> ExprNode:
    """Parse an infix expression of single-character operands.

    Operators of equal precedence group to the left; whitespace is ignored.
    """
    operands: list[ExprNode] = []
    operators: list[str] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if _is_operand(symbol):
            operands.append(ExprNode(symbol))
        elif symbol == "(":
            operators.append(symbol)
        elif symbol == ")":
            while operators and operators[-1] != "(":
                _combine(operators.pop(), operands)
            if not operators:
                raise ValueError("unbalanced ')'")
            operators.pop()
        else:
            while (
                operators
                and operators[-1] != "("
                and precedence(operators[-1]) >= precedence(symbol)
            ):
                _combine(operators.pop(), operands)
            operators.append(symbol)
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ValueError("unbalanced '('")
        _combine(operator, operands)
    return _single(operands)


def from_postfix(expression: str) -> ExprNode:
    """Parse a postfix expression of single-character operands."""
    operands: list[ExprNode] = []
    for symbol in expression:
        if _is_operand(symbol):
            operands.append(ExprNode(symbol))
        else:
            _combine(symbol, operands)
    return _single(operands)


def preorder(root: ExprNode | None) -> str:
    """Return the symbols in root, left, right order."""
    if root is None:
        return ""
    return root.data + preorder(root.left) + preorder(root.right)


def inorder(root: ExprNode | None) -> str:
    """Return the symbols in left, root, right order, without parentheses."""
    if root is None:
        return ""
    return inorder(root.left) + root.data + inorder(root.right)


def main(argv: list[str] | None = None) -> int:
    """Build an expression tree and print a traversal of it."""
    parser = argparse.ArgumentParser(
        prog="expression-tree", description="Build a binary expression tree."
    )
    parser.add_argument("expression", nargs="?", help="expression to parse")
    parser.add_argument(
        "--postfix", action="store_true", help="read the expression as postfix"
    )
    args = parser.parse_args(argv)
    try:
        if args.postfix:
            root = from_postfix(args.expression or POSTFIX_EXAMPLE)
        else:
            root = from_infix(args.expression or INFIX_EXAMPLE)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.postfix:
        print("In-order Traversal of the Expression Tree:")
        print(" ".join(inorder(root)))
    else:
        print(preorder(root))
    return 0


if __name__ == "__main__":
    sys.exit(main())