'''
clase Diagnostic, AsmError y helpers (ubicación, tipos de error)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores y advertencias, con ubicación opcional (archivo y línea)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def at(self, *, line: int | None = None, file: str | None = None) -> "Diagnostic":
        """Copia del diagnóstico con la ubicación completada (no pisa la existente)."""
        return Diagnostic(
            self.severity, self.message,
            self.line if self.line is not None else line,
            self.hint,
            self.file if self.file is not None else file,
        )

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

class AsmError(Exception):
    """Error fatal de ensamblado; transporta el Diagnostic que lo describe."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic

def error(message: str, *, line: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, hint, file)

def warning(message: str, *, line: int | None = None,
            file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, hint, file)

def has_errors(diags: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diags)
