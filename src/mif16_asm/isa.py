'''
tabla formal del ISA de 16 bits (opcodes, formas de operandos)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .ast import RType, JType, IType

@dataclass(frozen=True)
class ISpec:
    """Especificación de una instrucción.

    - itype: 'R','J','I' o 'P' (pseudo)
    - opcode: campo de 3 bits (R) o 4 bits (J/I); None en pseudo
    - form: forma de operandos a nivel mnemónico
        'reg,reg,reg' | 'target' | 'reg,mem' | 'reg,reg,imm' | 'mem' | 'reg,imm' | 'reg,imm16'
    - op: miembro del enum correspondiente (None en pseudo)
    """
    itype: str
    opcode: Optional[int]
    form: str
    op: Union[RType, JType, IType, None] = None

INSTR_SIZE = 1  # unidades de dirección por instrucción

# Anchos de campo de la palabra de 16 bits
IMM_BITS = 6
ADDR_BITS = 12

SPEC: Dict[str, ISpec] = {}

def _add(op: Union[RType, JType, IType], itype: str, opcode: int, form: str):
    SPEC[op.value] = ISpec(itype, opcode, form, op)

# Tipo R: [reg1:3][reg2:3][reg3:3][opcode:3]
_add(RType.ADD, "R", 0, "reg,reg,reg")
_add(RType.SUB, "R", 1, "reg,reg,reg")
_add(RType.AND, "R", 2, "reg,reg,reg")
_add(RType.OR,  "R", 3, "reg,reg,reg")
_add(RType.NOR, "R", 4, "reg,reg,reg")
_add(RType.SLL, "R", 5, "reg,reg,reg")
_add(RType.SRL, "R", 6, "reg,reg,reg")
_add(RType.SRA, "R", 7, "reg,reg,reg")

# Tipo J: [jtype:4][addr:12]
_add(JType.JMP, "J", 1, "target")
_add(JType.JAL, "J", 2, "target")

# Tipo I: [itype:4][reg1:3][reg2:3][imm:6]
_add(IType.LW,   "I", 3,  "reg,mem")
_add(IType.SW,   "I", 4,  "reg,mem")
_add(IType.BEQ,  "I", 5,  "reg,reg,imm")
_add(IType.BNE,  "I", 6,  "reg,reg,imm")
_add(IType.ADDI, "I", 7,  "reg,reg,imm")
_add(IType.JMPI, "I", 8,  "mem")
_add(IType.JALI, "I", 9,  "mem")
_add(IType.LLI,  "I", 10, "reg,imm")
_add(IType.LUI,  "I", 11, "reg,imm")

# Pseudo
SPEC["li"] = ISpec("P", None, "reg,imm16")

def spec(mnemonic: str) -> ISpec:
    """Devuelve la especificación de una instrucción por mnemónico."""
    m = mnemonic.lower()
    if m not in SPEC:
        raise KeyError(f"Instrucción desconocida: {mnemonic}")
    return SPEC[m]

def opcode_of(op: Union[RType, JType, IType]) -> int:
    """Opcode numérico de un miembro RType/JType/IType."""
    s = SPEC[op.value]
    if s.opcode is None:
        raise TypeError(f"Sin opcode: {op.value}")
    return s.opcode
