'''
diagnósticos del análisis de pistas: mov mal formado, x8 ilegible, syscall desconocida
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Literal

Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Problema encontrado en una línea del documento.

    'line' y 'col' van en base 1 para mostrarse al usuario. 'span' guarda el
    tramo [inicio, fin) del token implicado en base 0, tal como lo da el lexer,
    para que la capa del editor pueda subrayarlo sin volver a tokenizar.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    span: Optional[tuple[int, int]] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        core = f"{_SEV_TO_LABEL.get(self.severity, self.severity.upper())}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def at_token(severity: Severity, message: str, lineno: int, start: int, end: int, *,
             hint: str | None = None) -> Diagnostic:
    """Diagnóstico anclado a un tramo de tokens; lineno/start/end en base 0."""
    return Diagnostic(severity, message, lineno + 1, start + 1, hint, None, (start, end))

def error(message: str, lineno: int, start: int, end: int, *, hint: str | None = None) -> Diagnostic:
    return at_token("error", message, lineno, start, end, hint=hint)

def warning(message: str, lineno: int, start: int, end: int, *, hint: str | None = None) -> Diagnostic:
    return at_token("advertencia", message, lineno, start, end, hint=hint)

def note(message: str, lineno: int, start: int, end: int, *, hint: str | None = None) -> Diagnostic:
    return at_token("nota", message, lineno, start, end, hint=hint)

def has_errors(diags: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diags)
