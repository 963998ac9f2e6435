"""
Safe evaluator for operator-defined arithmetic formulas.

Operators type formulas like "(宽 + 背封边) × 2 × 高" into the config screens
(bag area, box panel area). Evaluation never touches eval(): the formula is
substituted, normalized, tokenized and walked by a small recursive-descent
parser over a closed grammar:

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := number | '(' expression ')'

Anything the grammar can't read evaluates to 0. The quote screen recomputes
on every keystroke and a half-typed formula must not crash it.
"""

import logging
import math
import re
from typing import Dict, List, NamedTuple, Optional

logger = logging.getLogger(__name__)

# Keyword → dimension field. Longer keywords win during substitution.
DIMENSION_KEYWORDS = {
    "袋宽": "width",
    "宽": "width",
    "袋高": "height",
    "高": "height",
    "长": "length",
    "底插入": "bottom_insert",
    "侧面展开": "side_expansion",
    "背封边": "back_seal",
    "侧风琴": "side_gusset",
    "封边": "seal_edge",
}

GLYPHS = {
    "×": "*",
    "÷": "/",
    "＊": "*",
    "／": "/",
    "＋": "+",
    "－": "-",
    "−": "-",
    "（": "(",
    "）": ")",
    "{": "(",
    "}": ")",
    "[": "(",
    "]": ")",
}

_OPERATOR_CHARS = "+-*/×÷＋－＊／−"
_ILLEGAL_CHAR = re.compile(r"[^0-9.\s+\-*/()]")
_NUMBER = re.compile(r"\d+(?:\.\d+)?|\.\d+")


class FormulaError(ValueError):
    """Raised internally when a formula doesn't fit the grammar."""


class Token(NamedTuple):
    kind: str   # "num" | "op" | "lparen" | "rparen"
    value: object


def tokenize(expr: str) -> List[Token]:
    tokens = []
    i = 0
    while i < len(expr):
        ch = expr[i]
        if ch.isspace():
            i += 1
            continue
        match = _NUMBER.match(expr, i)
        if match:
            tokens.append(Token("num", float(match.group())))
            i = match.end()
            continue
        if ch in "+-*/":
            tokens.append(Token("op", ch))
        elif ch == "(":
            tokens.append(Token("lparen", ch))
        elif ch == ")":
            tokens.append(Token("rparen", ch))
        else:
            raise FormulaError(f"unexpected character {ch!r}")
        i += 1
    return tokens


class _Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def parse(self) -> float:
        if not self.tokens:
            raise FormulaError("empty formula")
        value = self.expression()
        if self.pos != len(self.tokens):
            raise FormulaError(f"trailing input at token {self.pos}")
        return value

    def expression(self) -> float:
        left = self.term()
        while True:
            tok = self._peek()
            if tok is None or tok.kind != "op" or tok.value not in "+-":
                return left
            self.pos += 1
            right = self.term()
            left = left + right if tok.value == "+" else left - right

    def term(self) -> float:
        left = self.factor()
        while True:
            tok = self._peek()
            if tok is None or tok.kind != "op" or tok.value not in "*/":
                return left
            self.pos += 1
            right = self.factor()
            left = left * right if tok.value == "*" else left / right

    def factor(self) -> float:
        tok = self._peek()
        if tok is None:
            raise FormulaError("unexpected end of formula")
        if tok.kind == "num":
            self.pos += 1
            return tok.value
        if tok.kind == "lparen":
            self.pos += 1
            value = self.expression()
            closing = self._peek()
            if closing is None or closing.kind != "rparen":
                raise FormulaError("missing closing parenthesis")
            self.pos += 1
            return value
        raise FormulaError(f"unexpected token {tok.value!r}")


def _format_value(value: float) -> str:
    text = repr(float(value))
    if "e" in text or "E" in text or "n" in text:
        text = f"{float(value):.12f}"
    return f"({text})"


class FormulaEvaluator:
    """
    Validity check + safe evaluation for dimension formulas.

    Usage:
        evaluator = FormulaEvaluator()
        evaluator.is_valid("2×宽+3×高")                       # True
        evaluator.evaluate("2×宽+3×高", {"宽": 10, "高": 5})   # 35.0
    """

    def __init__(self, keywords: Optional[Dict[str, str]] = None):
        self.keywords = dict(keywords or DIMENSION_KEYWORDS)

    def is_valid(self, formula: str) -> bool:
        """Needs a known dimension keyword, an operator and a digit."""
        if not formula or not formula.strip():
            return False
        has_keyword = any(k in formula for k in self.keywords)
        has_operator = any(ch in _OPERATOR_CHARS for ch in formula)
        has_digit = any(ch.isdigit() for ch in formula)
        return has_keyword and has_operator and has_digit

    def dimensions(self, formula: str) -> List[str]:
        """Dimension fields the formula references (no duplicates)."""
        fields = []
        remaining = formula or ""
        for keyword in sorted(self.keywords, key=len, reverse=True):
            if keyword in remaining:
                field = self.keywords[keyword]
                if field not in fields:
                    fields.append(field)
                remaining = remaining.replace(keyword, " ")
        return fields

    def bind(self, values: Dict[str, float]) -> Dict[str, float]:
        """Map {field_name: value} onto every keyword that names that field."""
        return {
            keyword: values[field]
            for keyword, field in self.keywords.items()
            if field in values
        }

    def substitute(self, formula: str, binding: Dict[str, float]) -> str:
        expr = formula
        for keyword in sorted(binding, key=len, reverse=True):
            expr = expr.replace(keyword, _format_value(binding[keyword]))
        for glyph, canonical in GLYPHS.items():
            expr = expr.replace(glyph, canonical)
        return expr.strip()

    def evaluate(self, formula: str, binding: Dict[str, float]) -> float:
        """Evaluate with keyword values bound. Invalid or non-finite → 0."""
        if not self.is_valid(formula):
            return 0.0
        try:
            expr = self.substitute(formula, binding)
            if not expr or _ILLEGAL_CHAR.search(expr):
                logger.debug("Formula %r has unresolved characters after substitution: %r", formula, expr)
                return 0.0
            result = _Parser(tokenize(expr)).parse()
        except (FormulaError, ZeroDivisionError, OverflowError, TypeError, ValueError) as e:
            logger.debug("Formula %r not evaluated: %s", formula, e)
            return 0.0
        if not math.isfinite(result) or result < 0:
            return 0.0
        return result


evaluator = FormulaEvaluator()
