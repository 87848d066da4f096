# src/mif16_asm/linker.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .ast import (
    Instruction, Encodable, Label, BlankLine,
    Org, Space, Asciiz, JumpLabel, JumpAddr,
)
from .isa import INSTR_SIZE
from .pseudo import expand
from .utils import u16
from .diagnostics import Diagnostic, error, warning

log = logging.getLogger(__name__)

# ---------- Resultados de las pasadas ----------

@dataclass(frozen=True)
class LinkResult:
    placed: List[Tuple[int, Instruction]]   # (dirección, nodo) en orden de fuente
    symtab: Dict[str, int]
    end_addr: int                           # contador al terminar
    diagnostics: List[Diagnostic]

@dataclass(frozen=True)
class ResolveResult:
    instrs: List[Tuple[int, Encodable]]
    diagnostics: List[Diagnostic]

# ---------- Pasada 1 (direcciones y tabla de símbolos) ----------

def _advance(lc: int, n: Instruction) -> int:
    if isinstance(n, Org):
        return n.addr
    if isinstance(n, Space):
        return u16(lc + n.size)
    if isinstance(n, Asciiz):
        return u16(lc + len(n.text.encode("utf-8")))
    # etiquetas, líneas vacías, .byte, .word, instrucciones y pseudo: una unidad
    return u16(lc + INSTR_SIZE)

def first_pass(
    nodes: List[Instruction],
    *,
    origin: int = 0,
    filename: Optional[str] = None,
) -> LinkResult:
    """Asigna una dirección a cada línea y construye la tabla de símbolos.

    La pseudo 'li' se cuenta como una sola unidad aunque la pasada 2 la
    expanda a dos instrucciones.
    """
    symtab: Dict[str, int] = {}
    diags: List[Diagnostic] = []
    placed: List[Tuple[int, Instruction]] = []

    lc = u16(origin)
    for n in nodes:
        placed.append((lc, n))
        if isinstance(n, Label):
            if n.name in symtab:
                diags.append(warning(
                    f"Etiqueta redefinida: {n.name} (0x{symtab[n.name]:X} -> 0x{lc:X})",
                    line=n.line, file=filename, hint="se usa la última definición"))
            symtab[n.name] = lc
        lc = _advance(lc, n)

    log.debug("pasada 1: %d líneas, %d símbolos, fin en 0x%X", len(placed), len(symtab), lc)
    return LinkResult(placed=placed, symtab=symtab, end_addr=lc, diagnostics=diags)

# ---------- Pasada 2 (resolución y expansión) ----------

_LAYOUT_ONLY = (Label, BlankLine, Space, Org)

def second_pass(
    placed: List[Tuple[int, Instruction]],
    symtab: Dict[str, int],
    *,
    filename: Optional[str] = None,
) -> ResolveResult:
    """Resuelve etiquetas de salto y expande pseudos; descarta nodos de layout.

    El destino de un salto a etiqueta es la dirección de la etiqueta + 1
    (la etiqueta ocupa su propia unidad). Una etiqueta no definida es fatal.
    """
    out: List[Tuple[int, Encodable]] = []
    diags: List[Diagnostic] = []

    for addr, n in placed:
        if isinstance(n, _LAYOUT_ONLY):
            continue
        if isinstance(n, JumpLabel):
            target = symtab.get(n.label)
            if target is None:
                diags.append(error(f"Etiqueta no definida: {n.label}", line=n.line, file=filename))
                break
            out.append((addr, JumpAddr(n.op, u16(target + INSTR_SIZE), line=n.line)))
            continue
        out.extend(expand(addr, n))

    log.debug("pasada 2: %d instrucciones codificables", len(out))
    return ResolveResult(instrs=out, diagnostics=diags)
