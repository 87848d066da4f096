# src/mif16_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .ast import Instruction, RInstr, JumpAddr, IInstr, Byte, Word, Asciiz
from .isa import opcode_of, IMM_BITS, ADDR_BITS
from .utils import u8, u16, fits_nbit, is_unsigned_nbit, to_hex
from .diagnostics import Diagnostic, warning

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    addr: int
    data: Tuple[int, ...]   # una palabra u16, o un byte por carácter en .asciiz
    text: str               # instrucción legible para el comentario del listado
    line: Optional[int] = None

    @property
    def word(self) -> int:
        return self.data[0]

    def listing(self) -> str:
        values = " ".join(to_hex(d) for d in self.data)
        return f"{to_hex(self.addr)} : {values}; -- {self.text}"

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

# ---------------- Helpers de empaquetado de bits ----------------

def _pack_R(opc: int, r1: int, r2: int, r3: int) -> int:
    return u16((r1 & 0x7) << 9 |
               (r2 & 0x7) << 6 |
               (r3 & 0x7) << 3 |
               (opc & 0x7))

def _pack_J(opc: int, addr: int) -> int:
    return u16((opc & 0xF) << 12 |
               (addr & 0xFFF))

def _pack_I(opc: int, r1: int, r2: int, imm: int) -> int:
    # el inmediato se pasa a byte sin signo y sólo quedan sus 6 bits bajos
    return u16((opc & 0xF) << 12 |
               (r1 & 0x7) << 9  |
               (r2 & 0x7) << 6  |
               (u8(imm) & 0x3F))

# ---------------- Codificador ----------------

def encode_data(node: Instruction) -> Tuple[int, ...]:
    """Datos de un nodo ya resuelto. Lanza TypeError si la forma no es codificable."""
    if isinstance(node, RInstr):
        return (_pack_R(opcode_of(node.op), node.reg1.num, node.reg2.num, node.reg3.num),)
    if isinstance(node, JumpAddr):
        return (_pack_J(opcode_of(node.op), node.addr),)
    if isinstance(node, IInstr):
        return (_pack_I(opcode_of(node.op), node.reg1.num, node.reg2.num, node.imm),)
    if isinstance(node, (Byte, Word)):
        return (u16(node.value),)
    if isinstance(node, Asciiz):
        return tuple(node.text.encode("utf-8"))
    raise TypeError(f"Forma no codificable: {type(node).__name__} ({node})")

def encode_word(node: Instruction) -> int:
    """Palabra de 16 bits de una instrucción o de .byte/.word."""
    if isinstance(node, Asciiz):
        raise TypeError(".asciiz no se codifica como una sola palabra")
    return encode_data(node)[0]

def encode_line(addr: int, node: Instruction) -> str:
    """Línea de listado MIF: '<ADDR> : <DATA>; -- <instrucción>'."""
    return Encoded(addr, encode_data(node), str(node)).listing()

def encode(instrs: List[Tuple[int, Instruction]], *, filename: Optional[str] = None) -> EncodeResult:
    diags: List[Diagnostic] = []
    words: List[Encoded] = []

    for addr, node in instrs:
        if isinstance(node, IInstr) and not fits_nbit(node.imm, IMM_BITS):
            diags.append(warning(
                f"Inmediato {node.imm} no cabe en {IMM_BITS} bits; se conservan los bits bajos",
                line=node.line, file=filename))
        if isinstance(node, JumpAddr) and not is_unsigned_nbit(node.addr, ADDR_BITS):
            diags.append(warning(
                f"Dirección de salto 0x{node.addr:X} excede {ADDR_BITS} bits",
                line=node.line, file=filename))
        words.append(Encoded(addr, encode_data(node), str(node), node.line))

    return EncodeResult(words=words, diagnostics=diags)
