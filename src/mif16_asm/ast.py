'''
dataclases de IR (registros, directivas, instrucciones tipadas, pseudo, etiquetas)
'''

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

# ---- Registros y tipos de operación ----

class Register(Enum):
    """Los 8 registros de la máquina más el centinela NONE (operando sin usar)."""
    ZERO = "$0"
    AT = "$at"
    V0 = "$v0"
    V1 = "$v1"
    A0 = "$a0"
    A1 = "$a1"
    SP = "$sp"
    RA = "$ra"
    NONE = "None"

    @property
    def num(self) -> int:
        return _REG_NUM[self]

    def __str__(self) -> str:
        return self.value

_REG_NUM: Dict[Register, int] = {
    Register.ZERO: 0, Register.AT: 1, Register.V0: 2, Register.V1: 3,
    Register.A0: 4, Register.A1: 5, Register.SP: 6, Register.RA: 7,
    Register.NONE: 0,
}

class RType(Enum):
    """Operaciones de tres registros."""
    ADD = "add"
    SUB = "sub"
    AND = "and"
    OR = "or"
    NOR = "nor"
    SLL = "sll"
    SRL = "srl"
    SRA = "sra"

    def __str__(self) -> str:
        return self.value

class JType(Enum):
    """Saltos absolutos a dirección/etiqueta."""
    JMP = "jmp"
    JAL = "jal"

    def __str__(self) -> str:
        return self.value

class IType(Enum):
    """Operaciones con dos registros e inmediato de 8 bits."""
    LW = "lw"
    SW = "sw"
    BEQ = "beq"
    BNE = "bne"
    ADDI = "addi"
    JMPI = "jmpi"
    JALI = "jali"
    LLI = "lli"
    LUI = "lui"

    def __str__(self) -> str:
        return self.value

# ---- Directivas ----

@dataclass(frozen=True)
class Org:
    """Fija el contador de direcciones."""
    addr: int
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f".org {self.addr}"

@dataclass(frozen=True)
class Space:
    """Reserva N palabras sin emitir datos."""
    size: int
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f".space {self.size}"

@dataclass(frozen=True)
class Byte:
    value: int    # u8
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f".byte {self.value}"

@dataclass(frozen=True)
class Word:
    value: int    # u16
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f".word {self.value}"

@dataclass(frozen=True)
class Asciiz:
    """Cadena sin comillas; cada carácter ocupa una dirección."""
    text: str
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f'.asciiz "{self.text}"'

Directive = Union[Org, Space, Byte, Word, Asciiz]

# ---- Instrucciones ----

@dataclass(frozen=True)
class RInstr:
    """Tipo R: op reg1, reg2, reg3."""
    op: RType
    reg1: Register
    reg2: Register
    reg3: Register
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.op} {self.reg1}, {self.reg2}, {self.reg3}"

@dataclass(frozen=True)
class JumpLabel:
    """Tipo J con etiqueta todavía sin resolver."""
    op: JType
    label: str
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.op} {self.label}"

@dataclass(frozen=True)
class JumpAddr:
    """Tipo J con dirección absoluta."""
    op: JType
    addr: int
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.op} {self.addr}"

@dataclass(frozen=True)
class IInstr:
    """Tipo I: op reg1, reg2, imm (imm con signo de 8 bits)."""
    op: IType
    reg1: Register
    reg2: Register
    imm: int
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        if self.op in (IType.LW, IType.SW):
            return f"{self.op} {self.reg1}, {self.imm}({self.reg2})"
        if self.op in (IType.JMPI, IType.JALI):
            return f"{self.op} {self.imm}({self.reg1})"
        if self.op in (IType.LLI, IType.LUI):
            return f"{self.op} {self.reg1}, {self.imm}"
        return f"{self.op} {self.reg1}, {self.reg2}, {self.imm}"

@dataclass(frozen=True)
class LoadImm:
    """Pseudo 'li reg, imm16'; se expande a lli + lui en la pasada 2."""
    reg: Register
    value: int    # s16
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"li {self.reg}, {self.value}"

@dataclass(frozen=True)
class Label:
    """Etiqueta en el código fuente (p.ej., 'loop:')."""
    name: str
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.name}:"

@dataclass(frozen=True)
class BlankLine:
    """Línea vacía o sólo comentario."""
    line: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return ""

Instruction = Union[Org, Space, Byte, Word, Asciiz,
                    RInstr, JumpLabel, JumpAddr, IInstr, LoadImm,
                    Label, BlankLine]

# Formas que el codificador acepta tras la pasada 2
Encodable = Union[RInstr, JumpAddr, IInstr, Byte, Word, Asciiz]
