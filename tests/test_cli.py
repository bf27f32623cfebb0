from __future__ import annotations

import json
import sys
import types
from pathlib import Path

import pytest

from denscan.cli import main


GOOD = "// @den::m!\nstruct In;\n// ```@den```\n// ```@den```end:m!\n"


def _tree(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "lib.rs").write_text(GOOD, encoding="utf-8")
    (tmp_path / "den").mkdir()
    (tmp_path / "den" / "lib.rs").write_text("// @den::x!\nstruct Broken;\n", encoding="utf-8")
    return tmp_path


def test_cli_text_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main([str(_tree(tmp_path))])
    out = capsys.readouterr().out
    assert rc == 0
    assert "region 'm'" in out
    assert out.strip().endswith("1 file(s), 1 region(s), 0 warning(s), 0 failed")


def test_cli_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main([str(_tree(tmp_path)), "--json", "-j", "2"])
    payload = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert payload["summary"] == {"files": 1, "regions": 1, "warnings": 0, "failed": 0}
    (region,) = payload["files"][0]["outcome"]["regions"]
    assert region == {
        "name": "m",
        "call": 0,
        "attributes": None,
        "items": 1,
        "start": 2,
        "output": None,
        "end": 3,
    }


def test_cli_failure_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _tree(tmp_path)
    rc = main([str(tmp_path), "--exclude", "target"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "missing its start marker" in out


def test_cli_fail_fast(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _tree(tmp_path)
    rc = main([str(tmp_path / "den"), "--fail-fast"])
    assert rc == 1
    assert capsys.readouterr().out.startswith("error: ")


def test_cli_write_requires_backend(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as e:
        main([str(tmp_path), "--write"])
    assert e.value.code == 2


def test_cli_backend_write(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    mod = types.ModuleType("cli_test_backend")
    mod.den = lambda name, inputs: f"// generated by {name}"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "cli_test_backend", mod)
    _tree(tmp_path)

    rc = main([str(tmp_path / "src"), "--backend", "cli_test_backend", "--write"])
    assert rc == 0
    assert (tmp_path / "src" / "lib.rs").read_text(encoding="utf-8") == (
        "// @den::m!\nstruct In;\n// ```@den```\n// generated by m\n// ```@den```end:m!\n"
    )
    capsys.readouterr()


def test_cli_backend_preview(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    mod = types.ModuleType("cli_preview_backend")
    mod.gen = lambda name, inputs: "struct Out;"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "cli_preview_backend", mod)
    _tree(tmp_path)

    rc = main([str(tmp_path / "src"), "--backend", "cli_preview_backend:gen"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "// ```@den```\nstruct Out;\n// ```@den```end:m!\n" in out
    assert (tmp_path / "src" / "lib.rs").read_text(encoding="utf-8") == GOOD


def test_cli_fail_fast_on_undecodable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "c.rs").write_bytes(b"\xff\xfe\xfa")
    rc = main([str(tmp_path), "--fail-fast"])
    out = capsys.readouterr().out
    assert rc == 1
    assert out.startswith("error: ")
    assert "c.rs: cannot read file" in out


def test_cli_json_rejects_backend_preview(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as e:
        main([str(_tree(tmp_path)), "--json", "--backend", "some_backend"])
    assert e.value.code == 2
    assert "--json" in capsys.readouterr().err


def test_cli_json_with_backend_write_stays_json(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    mod = types.ModuleType("cli_json_backend")
    mod.den = lambda name, inputs: "struct Out;"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "cli_json_backend", mod)
    _tree(tmp_path)

    rc = main([str(tmp_path / "src"), "--json", "--backend", "cli_json_backend", "--write"])
    payload = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert payload["summary"]["regions"] == 1


def test_cli_bad_jobs_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("DENSCAN_JOBS", "many")
    with pytest.raises(SystemExit) as e:
        main([str(_tree(tmp_path))])
    assert e.value.code == 2
    assert "DENSCAN_JOBS='many'" in capsys.readouterr().err
