'''
registros AArch64: conjunto seguido por el analizador, alias y validaciones
'''

from __future__ import annotations
from typing import Dict, FrozenSet, List, Optional, Tuple

# Registros cuyo último inmediato sigue el analizador:
# x8 = número de syscall, x0..x5 = argumentos
TRACKED: Tuple[str, ...] = ("x0", "x1", "x2", "x3", "x4", "x5", "x8")
TRACKED_SET: FrozenSet[str] = frozenset(TRACKED)
SYSCALL_NUMBER_REG = "x8"

# Alias con nombre propio -> nombre canónico
ALIASES: Dict[str, str] = {
    "fp": "x29",
    "lr": "x30",
}

SPECIAL: Dict[str, str] = {
    "sp": "stack pointer",
    "wsp": "stack pointer (32-bit view)",
    "fp": "frame pointer (x29)",
    "lr": "link register (x30)",
    "xzr": "zero register (64-bit)",
    "wzr": "zero register (32-bit)",
}

def normalize_reg(token: str) -> str:
    """Devuelve el nombre canónico ('x29', 'w3', 'sp'...) o lanza ValueError."""
    t = token.strip().lower()
    if t in ALIASES:
        return ALIASES[t]
    if t in SPECIAL:
        return t
    if t[:1] in ("x", "w") and t[1:].isdigit():
        n = int(t[1:])
        if 0 <= n <= 30:
            return f"{t[0]}{n}"
    raise ValueError(f"Registro inválido: {token}")

def tracked_name(token: str) -> Optional[str]:
    """Registro seguido al que escribe el token, o None.

    Escribir 'wN' pone a cero la mitad alta de 'xN', así que 'w8' cuenta como 'x8'.
    """
    try:
        name = normalize_reg(token)
    except ValueError:
        return None
    if name.startswith("w"):
        name = "x" + name[1:]
    return name if name in TRACKED_SET else None

def is_tracked(token: str) -> bool:
    """True si el token es uno de los registros seguidos (x0..x5, x8 o su vista 'w')."""
    return tracked_name(token) is not None

def register_names() -> List[Tuple[str, str]]:
    """Lista (nombre, descripción) de todos los registros, en el orden en que se ofrecen."""
    out: List[Tuple[str, str]] = []
    for n in range(31):
        out.append((f"x{n}", "64-bit general-purpose"))
        out.append((f"w{n}", "32-bit low half"))
    out.extend(SPECIAL.items())
    return out
