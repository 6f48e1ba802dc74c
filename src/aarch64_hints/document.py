'''
estado explícito por documento abierto (uri, versión, texto y tabla de tokens)
'''

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from .lexer import Token, tokenize_document
from .analyzer import HintTable, analyze
from .diagnostics import Diagnostic
from .syscalls import SYSCALLS, SyscallTable

log = logging.getLogger("aarch64_hints.document")

@dataclass(frozen=True)
class Document:
    """Documento abierto. Cada cambio de texto produce un Document nuevo con su tabla recalculada.

    El dueño del objeto es quien lo llama (p.ej. la capa del editor); aquí no hay caché global.
    """
    uri: str
    version: int
    text: str
    tokens: Dict[int, List[Token]]

def open_document(uri: str, text: str, version: int = 0) -> Document:
    return Document(uri, version, text, tokenize_document(text))

def update_document(doc: Document, text: str, version: Optional[int] = None) -> Document:
    """Sustituye el texto completo y vuelve a tokenizar (sin actualización incremental)."""
    new_version = doc.version + 1 if version is None else version
    log.debug("%s: versión %d -> %d", doc.uri, doc.version, new_version)
    return replace(doc, version=new_version, text=text, tokens=tokenize_document(text))

def document_hints(doc: Document, *, syscalls: SyscallTable = SYSCALLS,
                   diags: Optional[List[Diagnostic]] = None) -> HintTable:
    return analyze(doc.tokens, syscalls=syscalls, diags=diags)
