from __future__ import annotations

import io
import json

import grader_cli


def test_grades_file_and_prints_report(tmp_path, capsys):
    path = tmp_path / "essay.txt"
    path.write_text("A short essay.", encoding="utf-8")

    code = grader_cli.main(["--file", str(path), "--title", "Essay", "--no-delay"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Title: Essay\nScore: ")
    assert "Rubric:\n- Structure & Organization:" in out


def test_reads_stdin_until_dot_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Line one.\nLine two.\n.\nignored\n"))

    code = grader_cli.main(["--no-delay", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["title"] == "Untitled Submission"
    assert payload["payload"]["text"] == "Line one.\nLine two."


def test_empty_submission_exits_with_notice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))

    code = grader_cli.main(["--no-delay"])

    captured = capsys.readouterr()
    assert code == 1
    assert "Please paste a student submission" in captured.err


def test_missing_file_exits_with_message(tmp_path, capsys):
    code = grader_cli.main(["--file", str(tmp_path / "missing.txt"), "--no-delay"])

    assert code == 1
    assert "missing.txt" in capsys.readouterr().err


def test_bad_config_exits_with_message(tmp_path, capsys):
    config = tmp_path / "grader.yaml"
    config.write_text("grade_delay_seconds: soon\n", encoding="utf-8")
    essay = tmp_path / "essay.txt"
    essay.write_text("Text.", encoding="utf-8")

    code = grader_cli.main(["--file", str(essay), "--config", str(config)])

    assert code == 1
    assert "grade_delay_seconds" in capsys.readouterr().err
