'''
posición de las pistas en el editor: al final del código de cada línea
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping

from .lexer import LINE_SPLIT_RE
from .analyzer import Hint

COMMENT_MARKERS = ("//", "@")
ARROW = " ⟵ "

@dataclass(frozen=True)
class InlayHint:
    line: int        # base 0
    character: int   # columna donde termina el código
    label: str

def code_end_column(line: str) -> int:
    """Columna donde empieza el comentario ('//' o '@'), o la longitud de la línea si no hay."""
    cut = len(line)
    for marker in COMMENT_MARKERS:
        pos = line.find(marker)
        if pos != -1:
            cut = min(cut, pos)
    return cut

def inlay_hints(text: str, hints: Mapping[int, List[Hint]]) -> List[InlayHint]:
    """Una InlayHint por pista, ordenadas por línea; las pistas fuera del documento se descartan."""
    lines = LINE_SPLIT_RE.split(text)
    out: List[InlayHint] = []
    for lineno in sorted(hints):
        if not 0 <= lineno < len(lines):
            continue
        end = code_end_column(lines[lineno])
        for h in hints[lineno]:
            out.append(InlayHint(lineno, end, ARROW + h.inline))
    return out
