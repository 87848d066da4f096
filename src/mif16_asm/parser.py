# src/mif16_asm/parser.py
from __future__ import annotations
import re
from typing import List, Optional, Tuple

from .lexer import (
    strip_comment,
    tokenize,
    split_label,
    split_directive,
    split_operands,
    split_mem,
)
from .ast import (
    Register, Instruction, BlankLine, Label,
    Org, Space, Byte, Word, Asciiz,
    RInstr, JumpLabel, JumpAddr, IInstr, LoadImm,
)
from .isa import spec as isa_spec
from .regs import normalize_reg
from .utils import to_s8, to_s16, u8, fits_nbit, is_unsigned_nbit
from .diagnostics import AsmError, Diagnostic, error, warning

HEX_RE    = re.compile(r"^0x(?P<digits>[0-9a-fA-F]+)$")
DEC_RE    = re.compile(r"^[0-9]+$")
SIGNED_RE = re.compile(r"^(?P<sign>[+-]?)(?P<body>0x[0-9a-fA-F]+|[0-9]+)$")

# ---------- Literales numéricos ----------

def parse_unsigned(token: str, bits: int = 16) -> int:
    """Literal sin signo: '0x..' hexadecimal o decimal; debe caber en 'bits' bits."""
    t = token.strip()
    m = HEX_RE.match(t)
    if m:
        value = int(m.group("digits"), 16)
    elif DEC_RE.match(t):
        value = int(t, 10)
    else:
        raise ValueError(f"Número inválido: {token}")
    if not is_unsigned_nbit(value, bits):
        raise ValueError(f"Número fuera de rango ({bits} bits sin signo): {token}")
    return value

def _parse_int(token: str) -> int:
    t = token.strip()
    m = SIGNED_RE.match(t)
    if not m:
        raise ValueError(f"Número inválido: {token}")
    body = m.group("body")
    value = int(body[2:], 16) if body.startswith("0x") else int(body, 10)
    if m.group("sign") == "-":
        value = -value
    if not fits_nbit(value, 16):
        raise ValueError(f"Número fuera de rango (16 bits): {token}")
    return value

def parse_signed(token: str) -> int:
    """Literal con signo de 16 bits; '0x8000'..'0xFFFF' se leen en complemento a dos."""
    return to_s16(_parse_int(token))

# ---------- Parser de línea ----------

class _LineParser:
    """Estado de una sola línea: ubicación y destino de advertencias."""

    def __init__(self, lineno: Optional[int], filename: Optional[str],
                 diags: Optional[List[Diagnostic]]):
        self.lineno = lineno
        self.filename = filename
        self.diags = diags

    def warn(self, message: str, hint: Optional[str] = None) -> None:
        if self.diags is not None:
            self.diags.append(warning(message, line=self.lineno, file=self.filename, hint=hint))

    def imm8(self, token: str) -> int:
        value = _parse_int(token)
        if not fits_nbit(value, 8):
            self.warn(f"Inmediato truncado a 8 bits: {token}", hint="use un valor en -128..255")
        return to_s8(value)

    def directive(self, keyword: str, args: List[str]):
        if keyword == "asciiz":
            s = " ".join(args)
            if len(s) < 2 or s[0] != '"' or s[-1] != '"':
                raise ValueError("Cadena sin comillas en directiva .asciiz")
            return Asciiz(s[1:-1], line=self.lineno)
        if keyword not in ("org", "space", "word", "byte"):
            raise ValueError(f"Directiva desconocida: .{keyword}")
        if len(args) != 1:
            raise ValueError(f".{keyword} requiere exactamente un argumento")
        value = parse_unsigned(args[0])
        if keyword == "org":
            return Org(value, line=self.lineno)
        if keyword == "space":
            return Space(value, line=self.lineno)
        if keyword == "word":
            return Word(value, line=self.lineno)
        if not fits_nbit(value, 8):
            self.warn(f"Valor de .byte truncado a 8 bits: {args[0]}")
        return Byte(u8(value), line=self.lineno)

    def instruction(self, mnemonic: str, args: List[str]) -> Instruction:
        try:
            s = isa_spec(mnemonic)
        except KeyError:
            raise ValueError(f"Instrucción desconocida: {mnemonic}") from None

        # los saltos toman el token crudo (dirección o etiqueta)
        if s.form == "target":
            if len(args) != 1:
                raise ValueError(f"'{mnemonic}' espera 1 operando, recibió {len(args)}")
            tok = args[0].rstrip(",")
            if tok.startswith("0x") or DEC_RE.match(tok):
                return JumpAddr(s.op, parse_unsigned(tok), line=self.lineno)
            return JumpLabel(s.op, tok, line=self.lineno)

        ops = split_operands(args)
        expected = len(s.form.split(","))
        if len(ops) != expected:
            raise ValueError(f"'{mnemonic}' espera {expected} operandos ({s.form}), recibió {len(ops)}")

        if s.form == "reg,reg,reg":
            return RInstr(s.op, normalize_reg(ops[0]), normalize_reg(ops[1]),
                          normalize_reg(ops[2]), line=self.lineno)
        if s.form == "reg,mem":
            off, base = split_mem(ops[1])
            return IInstr(s.op, normalize_reg(ops[0]), normalize_reg(base),
                          self.imm8(off), line=self.lineno)
        if s.form == "reg,reg,imm":
            return IInstr(s.op, normalize_reg(ops[0]), normalize_reg(ops[1]),
                          self.imm8(ops[2]), line=self.lineno)
        if s.form == "mem":
            off, base = split_mem(ops[0])
            return IInstr(s.op, normalize_reg(base), Register.NONE,
                          self.imm8(off), line=self.lineno)
        if s.form == "reg,imm":
            return IInstr(s.op, normalize_reg(ops[0]), Register.NONE,
                          self.imm8(ops[1]), line=self.lineno)
        if s.form == "reg,imm16":
            return LoadImm(normalize_reg(ops[0]), parse_signed(ops[1]), line=self.lineno)
        raise ValueError(f"Forma de operandos no soportada: {s.form}")

def parse_line(raw: str, *, lineno: Optional[int] = None, filename: Optional[str] = None,
               diags: Optional[List[Diagnostic]] = None) -> Instruction:
    """
    Convierte una línea de fuente en exactamente un valor de IR.

    Reglas:
      - Comentarios: '#' hasta fin de línea.
      - Línea vacía o sólo comentario -> BlankLine.
      - Primer token con ':' -> Label (se ignora el resto de la línea).
      - Primer token con '.' -> directiva (.org .space .byte .word .asciiz).
      - Resto: mnemónico + operandos según la tabla de formas de isa.py.

    Las advertencias (truncados) se añaden a 'diags' si se pasa; los errores
    lanzan AsmError.
    """
    tokens = tokenize(strip_comment(raw))
    if not tokens:
        return BlankLine(line=lineno)

    label = split_label(tokens)
    if label is not None:
        return Label(label, line=lineno)

    lp = _LineParser(lineno, filename, diags)
    try:
        keyword = split_directive(tokens)
        if keyword is not None:
            return lp.directive(keyword, tokens[1:])
        return lp.instruction(tokens[0].lower(), tokens[1:])
    except ValueError as ex:
        raise AsmError(error(str(ex), line=lineno, file=filename)) from ex

def parse(text: str, *, filename: Optional[str] = None) -> Tuple[List[Instruction], List[Diagnostic]]:
    """
    Devuelve (nodes, diagnostics): un nodo por línea de 'text'.

    El primer error detiene el análisis (no hay recuperación); en ese caso
    'nodes' contiene sólo las líneas previas y el último diagnóstico es el error.
    """
    nodes: List[Instruction] = []
    diags: List[Diagnostic] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        try:
            nodes.append(parse_line(raw, lineno=lineno, filename=filename, diags=diags))
        except AsmError as ex:
            diags.append(ex.diagnostic.at(line=lineno, file=filename))
            break
    return nodes, diags
