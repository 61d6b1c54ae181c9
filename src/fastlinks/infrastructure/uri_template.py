"""URI template token parsing: "/orders/{id}/items/{item}" → ("id", "item")."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VariableToken:
    """One variable occurrence in a mapping.

    Attributes:
        name: Variable name
        text: Literal token text in the mapping, e.g. "{id}" or "{id:\\d{3}}"
    """

    name: str
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("variable name must not be empty")
        if not self.text.startswith("{") or not self.text.endswith("}"):
            raise ValueError(f"token text must be braced, got {self.text!r}")


def _closing_brace(mapping: str, opening: int) -> int:
    """Index of the brace closing the one at opening, -1 if unbalanced.

    Braces nest, so regex quantifiers like {id:\\d{3}} stay in one token.
    """
    depth = 0
    for index in range(opening, len(mapping)):
        char = mapping[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def parse_variables(mapping: str) -> tuple[VariableToken, ...]:
    """All variable tokens, left to right. Duplicates are kept.

    Tokens are {name} or {name:regex}. Text after an unbalanced
    opening brace is literal.
    """
    tokens: list[VariableToken] = []
    start = mapping.find("{")
    while start != -1:
        end = _closing_brace(mapping, start)
        if end == -1:
            break
        text = mapping[start : end + 1]
        name = text[1:-1].split(":", 1)[0].strip()
        if name and "/" not in name:
            tokens.append(VariableToken(name=name, text=text))
        start = mapping.find("{", end + 1)
    return tuple(tokens)


def parse_variable_names(mapping: str) -> tuple[str, ...]:
    """All variable names, left to right. Duplicates are kept."""
    return tuple(token.name for token in parse_variables(mapping))
