from __future__ import annotations

from pathlib import Path


def test_check_digits_config_accepts_shipped_defaults(capsys) -> None:
    from tools.check_digits_config import main

    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ok (default_int_type=i64, overflow=checked, pointer_width=64)" in out


def test_check_digits_config_reports_invalid_file(tmp_path: Path, capsys) -> None:
    from tools.check_digits_config import main

    good = tmp_path / "good.yaml"
    good.write_text("default_int_type: u128\noverflow: wrapping\n", encoding="utf-8")
    bad = tmp_path / "bad.yaml"
    bad.write_text("default_int_type: u256\n", encoding="utf-8")

    assert main([str(good), str(bad)]) == 1
    captured = capsys.readouterr()
    assert "default_int_type=u128, overflow=wrapping" in captured.out
    assert "bad.yaml: invalid" in captured.err


def test_check_digits_config_missing_file(tmp_path: Path) -> None:
    from tools.check_digits_config import main

    assert main([str(tmp_path / "absent.yaml")]) == 2


def test_check_digits_config_rejects_float_pointer_width(tmp_path: Path, capsys) -> None:
    from tools.check_digits_config import main

    cfg = tmp_path / "float_width.yaml"
    cfg.write_text("default_int_type: usize\npointer_width: 32.0\n", encoding="utf-8")

    assert main([str(cfg)]) == 1
    captured = capsys.readouterr()
    assert "float_width.yaml: invalid" in captured.err
    assert "pointer_width" in captured.err
    assert "ok" not in captured.out
