from __future__ import annotations
import argparse, logging, re, sys
from dataclasses import replace
from typing import List, Optional, Tuple

from .lexer import tokenize_document
from .analyzer import HintTable, analyze
from .diagnostics import Diagnostic, has_errors
from .syscalls import SYSCALLS, SyscallTable, load_table

log = logging.getLogger("aarch64_hints")

HINT_COMMENT = "// "
HINT_SEP = "; "
LINE_BREAK_RE = re.compile(r"(\r?\n)")

def render(text: str, hints: HintTable) -> str:
    """Devuelve el texto con las pistas de cada línea añadidas como comentario al final."""
    parts = LINE_BREAK_RE.split(text)
    out = []
    # parts alterna línea y salto: [l0, eol0, l1, eol1, ..., ln]
    for lineno, line in enumerate(parts[0::2]):
        eol = parts[2 * lineno + 1] if 2 * lineno + 1 < len(parts) else ""
        line_hints = hints.get(lineno)
        if line_hints:
            line = f"{line}  {HINT_COMMENT}{HINT_SEP.join(h.inline for h in line_hints)}"
        out.append(line + eol)
    return "".join(out)

def annotate_text(text: str, *, filename: str | None = None,
                  syscalls: SyscallTable = SYSCALLS) -> Tuple[str, HintTable, List[Diagnostic]]:
    """Tokeniza, analiza y renderiza. Devuelve (texto_anotado, pistas, diagnostics)."""
    diags: List[Diagnostic] = []
    tokens = tokenize_document(text)
    hints = analyze(tokens, syscalls=syscalls, diags=diags)
    if filename is not None:
        diags = [replace(d, file=filename) for d in diags]
    log.info("%s: %d líneas con pistas, %d diagnósticos",
             filename or "<stdin>", len(hints), len(diags))
    return render(text, hints), hints, diags

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Anota código AArch64 con pistas de syscalls")
    ap.add_argument("source", help="archivo .s/.asm de entrada ('-' para stdin)")
    ap.add_argument("-o", "--output", help="archivo de salida (por defecto stdout)")
    ap.add_argument("--syscalls", help="tabla de syscalls alternativa en JSON")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="[%(asctime)s] %(levelname)s: %(message)s",
        force=True,
    )

    table = SYSCALLS
    if args.syscalls:
        try:
            table = load_table(args.syscalls)
        except (OSError, ValueError) as ex:
            print(f"ERROR: tabla de syscalls inválida {args.syscalls}: {ex}", file=sys.stderr)
            return 2

    try:
        if args.source == "-":
            text = sys.stdin.read()
        else:
            with open(args.source, "r", encoding="utf-8", newline="") as f:
                text = f.read()
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    filename = None if args.source == "-" else args.source
    annotated, _, diags = annotate_text(text, filename=filename, syscalls=table)

    for d in diags:
        print(d, file=sys.stderr)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8", newline="") as f:
                f.write(annotated)
        except OSError as ex:
            print(f"ERROR al escribir {args.output}: {ex}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(annotated)

    return 1 if has_errors(diags) else 0

if __name__ == "__main__":
    raise SystemExit(main())
