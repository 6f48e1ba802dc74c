from src.aarch64_hints.completion import complete

def test_syscall_numbers_after_mov_x8():
    items = complete("mov x8, ", 8)
    labels = [i.label for i in items]
    assert labels[:4] == ["#56", "#57", "#62", "#63"]
    write = next(i for i in items if i.label == "#64")
    assert write.detail == "write"
    assert write.documentation == "fd (x0), buf (x1), count (x2)"
    assert all(i.kind == "syscall" for i in items)

def test_w8_also_offers_syscalls():
    assert complete("mov w8, ", 8)[0].kind == "syscall"

def test_registers_for_other_destinations():
    items = complete("mov x0, ", 8)
    assert items[0].label == "x0" and items[0].kind == "register"
    assert any(i.label == "sp" for i in items)

def test_only_inside_mov():
    assert complete("svc ", 4) == []
    assert complete("", 0) == []
    assert complete("  ", 2) == []
