'''
mapeo nombre ensamblador ↔ Register y validación
'''

from __future__ import annotations
from typing import Dict

from .ast import Register

# Nombres aceptados en el fuente
NAME_TO_REG: Dict[str, Register] = {
    "$0": Register.ZERO,
    "$at": Register.AT,
    "$v0": Register.V0, "$v1": Register.V1,
    "$a0": Register.A0, "$a1": Register.A1,
    "$sp": Register.SP, "$ra": Register.RA,
}

def normalize_reg(token: str) -> Register:
    """Devuelve el Register correspondiente o lanza ValueError.

    Tolera comas finales ('$v0,') como en el listado de operandos.
    """
    t = token.strip().rstrip(",").strip().lower()
    if t in NAME_TO_REG:
        return NAME_TO_REG[t]
    raise ValueError(f"Registro inválido: {token}")

