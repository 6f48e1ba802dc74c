import json
from src.aarch64_hints.annotate import annotate_text, render, main

SRC = """_start:
    mov x8, #64
    mov x0, #1
    ldr x1, =msg
    mov x2, #13
    svc #0
"""

def test_annotate_text_e2e():
    out, hints, diags = annotate_text(SRC, filename="hello.s")
    assert not diags
    lines = out.split("\n")
    assert lines[1] == "    mov x8, #64  // syscall: write (64)"
    assert lines[2] == "    mov x0, #1  // fd: stdout"
    assert lines[3] == "    ldr x1, =msg"
    assert lines[4] == "    mov x2, #13  // count: #13"
    assert lines[5].startswith("    svc #0  // write(fd, buf, count)")
    assert out.endswith("\n")

def test_render_joins_multiple_hints():
    from src.aarch64_hints.analyzer import Hint
    assert render("a\nb", {1: [Hint("x"), Hint("y")]}) == "a\nb  // x; y"

def test_diagnostics_carry_filename():
    _, _, diags = annotate_text("mov x0,\n", filename="bad.s")
    assert diags[0].file == "bad.s"
    assert str(diags[0]).startswith("bad.s:1:")

def test_main_writes_output(tmp_path, capsys):
    src = tmp_path / "prog.s"
    src.write_text(SRC, encoding="utf-8")
    dst = tmp_path / "out.s"
    assert main([str(src), "-o", str(dst)]) == 0
    assert "syscall: write (64)" in dst.read_text(encoding="utf-8")

def test_main_stdout_and_error_code(tmp_path, capsys):
    src = tmp_path / "bad.s"
    src.write_text("mov x0,\n", encoding="utf-8")
    assert main([str(src)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "mov x0,\n"
    assert "ERROR" in captured.err

def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.s")]) == 2
    assert "no pude leer" in capsys.readouterr().err

def test_main_custom_table(tmp_path, capsys):
    table = tmp_path / "t.json"
    table.write_text(json.dumps({"64": {"name": "put", "args": {"x0": "fd"}, "returns": "n"}}),
                     encoding="utf-8")
    src = tmp_path / "p.s"
    src.write_text("mov x8, #64\nsvc #0\n", encoding="utf-8")
    assert main([str(src), "--syscalls", str(table)]) == 0
    assert "syscall: put (64)" in capsys.readouterr().out

def test_main_bad_table(tmp_path, capsys):
    table = tmp_path / "t.json"
    table.write_text("[]", encoding="utf-8")
    src = tmp_path / "p.s"
    src.write_text("svc #0\n", encoding="utf-8")
    assert main([str(src), "--syscalls", str(table)]) == 2

def test_render_keeps_crlf():
    from src.aarch64_hints.analyzer import Hint
    assert render("a\r\nb\r\n", {0: [Hint("x")]}) == "a  // x\r\nb\r\n"

def test_main_keeps_crlf_line_endings(tmp_path):
    src = tmp_path / "win.s"
    src.write_bytes(b"mov x8, #93\r\nsvc #0\r\n")
    dst = tmp_path / "out.s"
    assert main([str(src), "-o", str(dst)]) == 0
    data = dst.read_bytes()
    assert data.startswith(b"mov x8, #93  // syscall: exit (93)\r\n")
    assert data.count(b"\r\n") == 2

def test_main_rejects_non_utf8_source(tmp_path, capsys):
    src = tmp_path / "bin.s"
    src.write_bytes(b"mov x8, #64\n\xff\xfe\n")
    assert main([str(src)]) == 2
    assert "no pude leer" in capsys.readouterr().err

def test_main_bad_args_shape_in_table(tmp_path, capsys):
    table = tmp_path / "t.json"
    table.write_text(json.dumps({"64": {"name": "write", "args": ["fd"]}}), encoding="utf-8")
    src = tmp_path / "p.s"
    src.write_text("svc #0\n", encoding="utf-8")
    assert main([str(src), "--syscalls", str(table)]) == 2
    assert "tabla de syscalls" in capsys.readouterr().err
