"""Variable declaration scanner.

Recognizes ``@name: value`` anywhere in a document, comments and strings
included. There is no grammar awareness: the pattern is the whole contract.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """One occurrence of ``sigil name : value`` in a document."""

    name: str
    value: str
    offset: int = 0  # Index of the sigil in the document text
    line: int = 1  # 1-based line of the sigil

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


def build_pattern(sigil: str = "@", identifier_chars: str = r"\w\-") -> re.Pattern[str]:
    """Compile the declaration pattern for *sigil*.

    Group 1 is the variable name, group 2 the raw value up to ``;`` or the end
    of the line.
    """
    return re.compile(
        rf"{re.escape(sigil)}([{identifier_chars}]+)\s*:\s*([^\n;]+)",
        re.IGNORECASE,
    )


class DeclarationScanner:
    """Extracts variable declarations from document text."""

    def __init__(self, sigil: str = "@", identifier_chars: str = r"\w\-"):
        self.sigil = sigil
        self.pattern = build_pattern(sigil, identifier_chars)

    def scan(self, text: str) -> list[Declaration]:
        """Extract every declaration in document order.

        Duplicates are kept; a name declared twice yields two entries.
        """
        declarations = []
        line = 1
        last_offset = 0

        for match in self.pattern.finditer(text):
            offset = match.start()
            line += text.count("\n", last_offset, offset)
            last_offset = offset

            declarations.append(Declaration(
                name=match.group(1),
                value=match.group(2),
                offset=offset,
                line=line,
            ))

        return declarations


def list_declarations(text: str, sigil: str = "@") -> list[Declaration]:
    """Scan *text* with the default identifier rules."""
    return DeclarationScanner(sigil).scan(text)
