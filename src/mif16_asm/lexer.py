from __future__ import annotations
import re
from typing import List, Optional, Tuple

COMMENT_CHAR = "#"

def strip_comment(line: str) -> str:
    """Remove everything from the first '#' and trim surrounding whitespace."""
    idx = line.find(COMMENT_CHAR)
    if idx >= 0:
        line = line[:idx]
    return line.strip()

def tokenize(line: str) -> List[str]:
    """Split on whitespace runs; an empty list means a blank line."""
    return line.split()

def split_label(tokens: List[str]) -> Optional[str]:
    """Return the label name if the first token declares one ('name:'), else None."""
    if not tokens:
        return None
    head = tokens[0]
    idx = head.find(":")
    if idx < 0:
        return None
    return head[:idx]

def split_directive(tokens: List[str]) -> Optional[str]:
    """Return the directive keyword if the first token contains '.', else None."""
    if not tokens:
        return None
    head = tokens[0]
    idx = head.find(".")
    if idx < 0:
        return None
    return head[idx + 1:].lower()

def split_operands(tokens: List[str]) -> List[str]:
    """Flatten operand tokens, dropping separating/trailing commas.

    ['$v0,', '$a0,', '$a1'] -> ['$v0', '$a0', '$a1']
    ['$v0,$a0', '2']        -> ['$v0', '$a0', '2']
    """
    out: List[str] = []
    for tok in tokens:
        for piece in tok.split(","):
            piece = piece.strip()
            if piece:
                out.append(piece)
    return out

MEM_RE = re.compile(r"^(?P<off>[^(]*)\(\s*(?P<base>[^)]+?)\s*\)$")

def split_mem(token: str) -> Tuple[str, str]:
    """Split 'IMM(REG)' into ('IMM', 'REG'); an empty offset becomes '0'."""
    m = MEM_RE.match(token.strip())
    if not m:
        raise ValueError(f"Operando de memoria inválido: '{token}' (esperado imm(reg))")
    off = m.group("off").strip() or "0"
    return off, m.group("base")
