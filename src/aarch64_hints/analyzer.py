# src/aarch64_hints/analyzer.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .lexer import Token
from .regs import SYSCALL_NUMBER_REG, is_tracked, tracked_name
from .syscalls import FD_NAMES, SYSCALLS, SyscallSpec, SyscallTable, lookup
from .utils import parse_immediate
from .diagnostics import Diagnostic, error, note, warning

log = logging.getLogger("aarch64_hints.analyzer")

MOV = "mov"
SVC = "svc"
LINUX_TRAP_IMM = "#0"

# ---------- Resultados ----------

@dataclass(frozen=True)
class Hint:
    """Anotación de una línea: etiqueta corta ('inline') y texto extendido opcional ('hover')."""
    inline: str
    hover: str = ""

@dataclass(frozen=True)
class RegisterState:
    """Último valor escrito en un registro seguido y dónde se escribió (línea y columnas, base 0)."""
    value: str
    set_line: int
    start_col: int
    end_col: int

HintTable = Dict[int, List[Hint]]

# ---------- Helpers internos ----------

def _push(hints: HintTable, line: int, hint: Hint) -> None:
    hints.setdefault(line, []).append(hint)

def _mnemonic(tokens: List[Token]) -> str:
    return tokens[0].text.lower() if tokens else ""

def _mov_value(tokens: List[Token], lineno: int, diags: Optional[List[Diagnostic]]) -> Optional[Token]:
    """Valida 'mov <reg>, <valor>' y devuelve el token del valor.

    Si la forma no encaja se registra un error y se devuelve None; la línea se ignora.
    """
    comma = tokens[2] if len(tokens) > 2 else None
    value = tokens[3] if len(tokens) > 3 else None
    problem = None
    culprit = tokens[1]
    if comma is None or comma.kind != "comma":
        problem = "se esperaba ',' tras el registro destino"
        culprit = comma or culprit
    elif value is None:
        problem = "falta el valor a asignar"
        culprit = comma
    elif value.kind != "ident":
        problem = f"valor de mov inválido: {value.text}"
        culprit = value
    if problem is None:
        return value
    log.debug("línea %d: mov mal formado (%s)", lineno, problem)
    if diags is not None:
        diags.append(error(f"Asignación mal formada: {problem}", lineno,
                           culprit.start_col, culprit.end_col,
                           hint="forma esperada: mov <registro>, <valor>"))
    return None

def _arg_value(role: str, state: RegisterState, fd_names: Mapping[int, str]) -> str:
    if role == "fd":
        n = parse_immediate(state.value)
        if n is not None and n in fd_names:
            return fd_names[n]
    return state.value

def _emit_syscall(hints: HintTable, lineno: int, number: int, spec: SyscallSpec,
                  regs: Dict[str, RegisterState], fd_names: Mapping[int, str]) -> None:
    x8 = regs[SYSCALL_NUMBER_REG]
    _push(hints, x8.set_line, Hint(f"syscall: {spec.name} ({number})", spec.signature()))
    for arg in spec.args:
        if not is_tracked(arg.reg):
            continue
        state = regs.get(arg.reg)
        if state is None:
            continue
        _push(hints, state.set_line, Hint(f"{arg.name}: {_arg_value(arg.name, state, fd_names)}",
                                          arg.notes or ""))
    _push(hints, lineno, Hint(f"{spec.signature()} → {spec.returns}", f"x0 = {spec.returns}"))

# ---------- Pasada única ----------

def analyze(tokens: Mapping[int, List[Token]], *,
            syscalls: SyscallTable = SYSCALLS,
            fd_names: Mapping[int, str] = FD_NAMES,
            diags: Optional[List[Diagnostic]] = None) -> HintTable:
    """Recorre la tabla de tokens una vez, en orden ascendente de línea, y devuelve {línea: pistas}.

    Reglas:
      - 'mov xN, <valor>' con xN seguido: guarda el valor y la línea donde se asignó.
      - 'svc #0' con x8 conocido y presente en la tabla: pista en la línea de x8,
        en la línea de cada argumento conocido y en la propia línea del svc.
      - 'svc' con otro inmediato y x8 conocido: pista 'expects #0'.
    El estado nunca se limpia y solo es visible para líneas posteriores. Los errores
    (mov mal formado) se añaden a 'diags' si se pasa una lista; nunca se lanzan.
    """
    regs: Dict[str, RegisterState] = {}
    hints: HintTable = {}

    for lineno in sorted(tokens):
        line = tokens[lineno]
        mnemonic = _mnemonic(line)

        if mnemonic == MOV:
            reg = tracked_name(line[1].text) if len(line) > 1 else None
            if reg is None:
                continue
            value = _mov_value(line, lineno, diags)
            if value is None:
                continue
            regs[reg] = RegisterState(value.text, lineno, value.start_col, value.end_col)
            log.debug("línea %d: %s <- %s", lineno, reg, value.text)

        elif mnemonic == SVC:
            x8 = regs.get(SYSCALL_NUMBER_REG)
            trap = line[1].text if len(line) > 1 else None
            if trap != LINUX_TRAP_IMM:
                if x8 is not None:
                    _push(hints, lineno, Hint(f"expects {LINUX_TRAP_IMM}",
                                              "Linux AArch64 system calls are issued with svc #0"))
                continue
            if x8 is None:
                continue
            number = parse_immediate(x8.value)
            if number is None:
                log.debug("línea %d: x8 = %s no es un número", lineno, x8.value)
                if diags is not None:
                    diags.append(warning(f"No se puede decodificar el número de syscall '{x8.value}'",
                                         x8.set_line, x8.start_col, x8.end_col,
                                         hint="use un inmediato numérico, p.ej. #64"))
                continue
            spec = lookup(number, syscalls)
            if spec is None:
                log.debug("línea %d: syscall %d desconocida", lineno, number)
                if diags is not None:
                    diags.append(note(f"Syscall {number} no está en la tabla; sin pistas",
                                      x8.set_line, x8.start_col, x8.end_col))
                continue
            _emit_syscall(hints, lineno, number, spec, regs, fd_names)

    return hints
