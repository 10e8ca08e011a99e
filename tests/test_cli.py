import pandas as pd
import pytest

import cli
from core.intake import CONTEXT_HEADER


@pytest.fixture(autouse=True)
def _log_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("INTAKE_MAX_FILES", raising=False)


def test_cli_folder(tmp_path, capsys, text_pdf_bytes, phrase):
    inbox = tmp_path / "inbox"
    inbox.mkdir()
    (inbox / "a.pdf").write_bytes(text_pdf_bytes)
    (inbox / "b.txt").write_text("notas")
    (inbox / "c.exe").write_bytes(b"MZ")
    summary = tmp_path / "summary.csv"

    assert cli.main([str(inbox), "--csv", str(summary), "--sniff"]) == 0

    out = capsys.readouterr().out
    assert CONTEXT_HEADER in out
    assert phrase in out
    assert "notas" in out
    assert "Descartado c.exe" in out
    assert "[SNIFF] a.pdf: firma=True" in out
    assert len(pd.read_csv(summary)) == 2


def test_cli_limits(tmp_path, capsys):
    files = []
    for i in range(3):
        p = tmp_path / f"{i}.md"
        p.write_text(f"doc {i}")
        files.append(str(p))
    cli.main(files + ["--max-files", "2"])
    out = capsys.readouterr().out
    assert "doc 1" in out
    assert "doc 2" not in out


def test_cli_nothing_to_do(tmp_path):
    p = tmp_path / "x.exe"
    p.write_bytes(b"MZ")
    with pytest.raises(SystemExit):
        cli.main([str(p)])
