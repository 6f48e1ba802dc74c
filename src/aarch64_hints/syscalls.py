'''
tabla de syscalls Linux AArch64 (número en x8, argumentos en x0..x5, retorno en x0)
'''

from __future__ import annotations
import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .regs import TRACKED_SET

@dataclass(frozen=True)
class ArgSpec:
    """Argumento de una syscall: registro que lo lleva y su papel ('fd', 'buf'...)."""
    reg: str
    name: str
    notes: Optional[str] = None

@dataclass(frozen=True)
class SyscallSpec:
    """Especificación de una syscall.

    - name: nombre en la tabla genérica de Linux
    - args: argumentos en orden (x0, x1, ...)
    - returns: qué deja en x0
    """
    name: str
    args: Tuple[ArgSpec, ...]
    returns: str

    def signature(self) -> str:
        return f"{self.name}({', '.join(a.name for a in self.args)})"

SyscallTable = Mapping[int, SyscallSpec]

FD_NOTES = "0=stdin, 1=stdout, 2=stderr (conventional)"

_SYSCALLS: Dict[int, SyscallSpec] = {}

def _add(number: int, name: str, args: list, returns: str):
    _SYSCALLS[number] = SyscallSpec(
        name,
        tuple(ArgSpec(f"x{i}", *a) if isinstance(a, tuple) else ArgSpec(f"x{i}", a)
              for i, a in enumerate(args)),
        returns,
    )

# Ficheros
_add(56, "openat", [("dirfd", "often AT_FDCWD = -100"), "pathname", "flags", "mode"], "fd (>=0) or -errno")
_add(57, "close", [("fd", FD_NOTES)], "0 or -errno")
_add(62, "lseek", [("fd", FD_NOTES), "offset", "whence"], "new offset (>=0) or -errno")
_add(63, "read", [("fd", FD_NOTES), "buf", "count"], "bytes_read (>=0) or -errno")
_add(64, "write", [("fd", FD_NOTES), "buf", "count"], "bytes_written (>=0) or -errno")

# Procesos
_add(93, "exit", ["status"], "(does not return)")
_add(94, "exit_group", ["status"], "(does not return)")
_add(101, "nanosleep", ["req", "rem"], "0 or -errno")
_add(129, "kill", ["pid", "sig"], "0 or -errno")
_add(172, "getpid", [], "pid of the caller")
_add(221, "execve", ["filename", "argv", "envp"], "(does not return on success) or -errno")

# Memoria
_add(214, "brk", ["addr"], "new program break")
_add(215, "munmap", ["addr", "length"], "0 or -errno")
_add(222, "mmap", ["addr", "length", "prot", "flags", "fd", "offset"], "mapped address or -errno")

SYSCALLS: SyscallTable = MappingProxyType(_SYSCALLS)

FD_NAMES: Mapping[int, str] = MappingProxyType({
    0: "stdin",
    1: "stdout",
    2: "stderr",
})

def lookup(number: Optional[int], table: SyscallTable = SYSCALLS) -> Optional[SyscallSpec]:
    """Devuelve la syscall con ese número, o None si no está en la tabla."""
    if number is None:
        return None
    return table.get(number)

def _reg_order(reg: str) -> int:
    return int(reg[1:]) if reg[1:].isdigit() else -1

def _spec_from_json(key: str, entry: object) -> Tuple[int, SyscallSpec]:
    try:
        number = int(key, 0)
    except ValueError:
        raise ValueError(f"Número de syscall inválido: {key!r}")
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise ValueError(f"Syscall {number}: se esperaba un objeto con 'name'")
    raw_args = entry.get("args") or {}
    if not isinstance(raw_args, dict):
        raise ValueError(f"Syscall {number}: 'args' debe ser un objeto {{registro: argumento}}")
    args = []
    for reg, arg in sorted(raw_args.items(), key=lambda kv: _reg_order(kv[0])):
        if reg not in TRACKED_SET or reg == "x8":
            raise ValueError(f"Syscall {number}: registro de argumento inválido {reg!r}")
        if isinstance(arg, str):
            arg = {"name": arg}
        if not isinstance(arg, dict) or not isinstance(arg.get("name"), str):
            raise ValueError(f"Syscall {number}: argumento {reg} sin 'name'")
        args.append(ArgSpec(reg, arg["name"], arg.get("notes")))
    returns = entry.get("returns", "")
    if isinstance(returns, dict):
        # formato {"x0": "..."}
        returns = returns.get("x0", "")
    return number, SyscallSpec(entry["name"], tuple(args), str(returns))

def load_table(path: str) -> SyscallTable:
    """Carga una tabla alternativa desde JSON: {"64": {"name": "write", "args": {...}, "returns": "..."}}.

    Lanza ValueError si el fichero no tiene el formato esperado.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as ex:
            raise ValueError(f"JSON inválido en {path}: {ex}")
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: se esperaba un objeto en la raíz")
    table: Dict[int, SyscallSpec] = {}
    for key, entry in raw.items():
        number, spec = _spec_from_json(key, entry)
        table[number] = spec
    return MappingProxyType(table)
