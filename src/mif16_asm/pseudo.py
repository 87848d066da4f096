from __future__ import annotations
from typing import List, Tuple

from .ast import Instruction, IInstr, IType, LoadImm, Register
from .isa import INSTR_SIZE
from .utils import to_s8, u16

def split_imm16(value: int) -> Tuple[int, int]:
    """(byte bajo, byte alto) de un valor de 16 bits, ambos como s8."""
    v = u16(value)
    return to_s8(v & 0xFF), to_s8(v >> 8)

def _li_expand(ins: LoadImm, addr: int) -> List[Tuple[int, IInstr]]:
    low, high = split_imm16(ins.value)
    return [
        (addr, IInstr(IType.LLI, ins.reg, Register.NONE, low, line=ins.line)),
        (u16(addr + INSTR_SIZE), IInstr(IType.LUI, ins.reg, Register.NONE, high, line=ins.line)),
    ]

def expand(addr: int, node: Instruction) -> List[Tuple[int, Instruction]]:
    """Expande una pseudo-instrucción a instrucciones reales (byte bajo primero).

    Cualquier otro nodo se devuelve tal cual en una lista de un elemento.
    """
    if isinstance(node, LoadImm):
        return list(_li_expand(node, addr))
    return [(addr, node)]
