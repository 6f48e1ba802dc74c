# src/aarch64_hints/lexer.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

log = logging.getLogger("aarch64_hints.lexer")

# 'comment' queda reservado: el lexer todavía no lo emite
TokenKind = Literal["ident", "comma", "string", "comment"]

WHITESPACE = frozenset(" \t\r\n")
QUOTES = frozenset("'\"")
LINE_SPLIT_RE = re.compile(r"\r?\n")

@dataclass(frozen=True)
class Token:
    """Unidad léxica con su posición [start_col, end_col) dentro de la línea (base 0)."""
    kind: TokenKind
    text: str
    start_col: int
    end_col: int

def tokenize_line(text: str) -> List[Token]:
    """Tokeniza una línea en una sola pasada de izquierda a derecha.

    - Espacios, tabuladores, CR y LF separan tokens y nunca se emiten.
    - La coma siempre es un token propio de un carácter.
    - Una comilla (' o ") abre una cadena que termina con la misma comilla;
      dentro de la cadena espacios y comas no parten el token.
    - Una cadena sin cerrar se emite como 'string' hasta el fin de línea.
    """
    out: List[Token] = []
    buf: List[str] = []
    start = 0
    quote: Optional[str] = None  # terminador de la cadena activa

    def flush(end: int) -> None:
        if not buf:
            return
        kind: TokenKind = "string" if quote is not None else "ident"
        out.append(Token(kind, "".join(buf), start, end))
        buf.clear()

    for i, ch in enumerate(text):
        if quote is not None:
            buf.append(ch)
            if ch == quote:
                flush(i + 1)
                quote = None
            continue
        if ch in WHITESPACE:
            flush(i)
        elif ch == ",":
            flush(i)
            out.append(Token("comma", ",", i, i + 1))
        elif ch in QUOTES:
            flush(i)
            quote = ch
            start = i
            buf.append(ch)
        else:
            if not buf:
                start = i
            buf.append(ch)

    flush(len(text))
    return out

def tokenize_document(text: str) -> Dict[int, List[Token]]:
    """Devuelve {línea (base 0): tokens}; las líneas vacías o solo con espacios no aparecen."""
    table: Dict[int, List[Token]] = {}
    for lineno, raw in enumerate(LINE_SPLIT_RE.split(text)):
        if not raw.strip():
            continue
        table[lineno] = tokenize_line(raw)
    log.debug("tokenizadas %d líneas con contenido", len(table))
    return table

def token_at(tokens: List[Token], col: int) -> Optional[Token]:
    """Token bajo el cursor; si el cursor queda justo tras un token, se ajusta a la izquierda."""
    for tok in tokens:
        if tok.start_col <= col < tok.end_col:
            return tok
    for tok in tokens:
        if tok.end_col == col and tok.kind != "comma":
            return tok
    return None

