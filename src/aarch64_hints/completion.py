'''
candidatos de autocompletado para 'mov': registros o números de syscall
'''

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Literal, Optional

from .lexer import tokenize_line, token_at
from .regs import SYSCALL_NUMBER_REG, register_names, tracked_name
from .syscalls import SYSCALLS, SyscallTable

ItemKind = Literal["register", "syscall"]

OPERAND_SPLIT_RE = re.compile(r"[\s,]+")

@dataclass(frozen=True)
class CompletionItem:
    label: str
    kind: ItemKind
    detail: str
    documentation: Optional[str] = None

def register_items() -> List[CompletionItem]:
    return [CompletionItem(name, "register", detail) for name, detail in register_names()]

def syscall_items(table: SyscallTable = SYSCALLS) -> List[CompletionItem]:
    items = []
    for number in sorted(table):
        spec = table[number]
        args = ", ".join(f"{a.name} ({a.reg})" for a in spec.args)
        items.append(CompletionItem(f"#{number}", "syscall", spec.name, args or None))
    return items

def complete(line_text: str, col: int, *, syscalls: SyscallTable = SYSCALLS) -> List[CompletionItem]:
    """Candidatos para el cursor en 'col'. Solo se ofrecen dentro de un 'mov'."""
    before = [t.lower() for t in OPERAND_SPLIT_RE.split(line_text[:col]) if t]
    if not before or before[0] != "mov":
        return []
    current = token_at(tokenize_line(line_text), col)
    dst = before[1] if len(before) > 1 else ""
    if tracked_name(dst) == SYSCALL_NUMBER_REG or (
            current is not None and tracked_name(current.text) == SYSCALL_NUMBER_REG):
        return syscall_items(syscalls)
    return register_items()
