'''
 inmediatos ('#64', '#0x40', '#-100') y utilidades numéricas pequeñas
'''

from __future__ import annotations
import re
from typing import Optional

IMM_PREFIX = "#"
DEC_IMM_RE = re.compile(r"^[+-]?\d+$")
HEX_IMM_RE = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")

def parse_immediate(text: str) -> Optional[int]:
    """Valor numérico del texto que sigue a '#', o None si falta o no es un número.

    Acepta decimal y hexadecimal con signo opcional ('#64', '#0x40', '#-100').
    Un símbolo ('#SYS_write') o un '#' sin cifras devuelven None.
    """
    _, sep, tail = text.partition(IMM_PREFIX)
    if not sep:
        return None
    tail = tail.strip()
    if DEC_IMM_RE.match(tail):
        return int(tail, 10)
    if HEX_IMM_RE.match(tail):
        return int(tail, 16)
    return None
