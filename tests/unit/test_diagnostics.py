from src.aarch64_hints.diagnostics import Diagnostic, error, warning, note, has_errors

def test_error_str():
    d = Diagnostic("error", "asignación mal formada", line=12, col=8, file="prog.s",
                   hint="mov <registro>, <valor>")
    s = str(d)
    assert "prog.s:12:8:" in s
    assert "ERROR: asignación mal formada" in s
    assert "(pista: mov <registro>, <valor>)" in s

def test_token_anchored_helpers():
    d = error("e", 2, 4, 6)
    # posición para el usuario en base 1, tramo del token en base 0
    assert (d.line, d.col, d.span) == (3, 5, (4, 6))
    assert warning("w", 0, 0, 1).severity == "advertencia"
    assert str(note("n", 0, 8, 11)) == "1:9: NOTA: n"

def test_has_errors():
    assert not has_errors([warning("w", 0, 0, 1), note("n", 0, 0, 1)])
    assert has_errors([note("n", 0, 0, 1), error("e", 1, 0, 1)])
