from pathlib import Path

import pytest
from typer.testing import CliRunner

from file_seeker import __version__
from file_seeker import main

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda verbose=False: None)


def test_version():
    result = runner.invoke(main.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_dir(target_dir):
    result = runner.invoke(main.app, ["check-dir", str(target_dir)])
    assert result.exit_code == 0
    assert result.output.strip() == str(target_dir.resolve())


def test_check_dir_on_file(non_target_dir):
    result = runner.invoke(main.app, ["check-dir", str(non_target_dir / "file1.txt")])
    assert result.exit_code == 1
    assert "is not a directory" in result.output


def test_check_file(target_dir):
    result = runner.invoke(main.app, ["check-file", str(target_dir / "file1.pdf")])
    assert result.exit_code == 0
    assert result.output.strip() == str((target_dir / "file1.pdf").resolve())


def test_check_file_missing(tmp_path):
    result = runner.invoke(main.app, ["check-file", str(tmp_path / "missing.pdf")])
    assert result.exit_code == 1
    assert "Cannot resolve" in result.output


def test_seek_prints_sorted_matches(target_dir):
    result = runner.invoke(main.app, ["seek", str(target_dir), "pdf"])
    assert result.exit_code == 0
    names = [Path(line).name for line in result.output.splitlines()]
    assert names == ["file1.pdf", "file2.pdf", "file3.pdf"]


def test_seek_empty_extension(target_dir):
    result = runner.invoke(main.app, ["seek", str(target_dir), ""])
    assert result.exit_code == 1
    assert "Extension is not specified" in result.output


def test_seek_writes_output_file(target_dir, tmp_path):
    output = tmp_path / "out" / "pdfs.txt"
    result = runner.invoke(main.app, ["seek", str(target_dir), "pdf", "--output", str(output)])
    assert result.exit_code == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert [Path(line).name for line in lines] == ["file1.pdf", "file2.pdf", "file3.pdf"]


def test_batch(target_dir, non_target_dir, tmp_path):
    jobs_path = tmp_path / "fseek.yaml"
    jobs_path.write_text(
        "jobs:\n"
        f"  - directory: '{target_dir}'\n"
        "    extension: pdf\n"
        f"  - directory: '{non_target_dir}'\n"
        "    extension: txt\n",
        encoding="utf-8",
    )
    result = runner.invoke(main.app, ["batch", str(jobs_path)])
    assert result.exit_code == 0
    assert "file3.pdf" in result.output
    assert "file1.txt" in result.output


def test_batch_reports_failed_jobs(target_dir, tmp_path):
    jobs_path = tmp_path / "fseek.yaml"
    jobs_path.write_text(
        "jobs:\n"
        f"  - directory: '{tmp_path / 'missing'}'\n"
        "    extension: pdf\n"
        f"  - directory: '{target_dir}'\n"
        "    extension: pdf\n",
        encoding="utf-8",
    )
    result = runner.invoke(main.app, ["batch", str(jobs_path)])
    assert result.exit_code == 1
    assert "file1.pdf" in result.output
    assert "1 of 2 job(s) failed" in result.output


def test_batch_missing_jobs_file(tmp_path):
    result = runner.invoke(main.app, ["batch", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_check_file_on_directory(target_dir):
    result = runner.invoke(main.app, ["check-file", str(target_dir)])
    assert result.exit_code == 1
    assert f"{target_dir.resolve()} is not a file" in result.output


def test_check_dir_through_regular_file(non_target_dir):
    result = runner.invoke(main.app, ["check-dir", str(non_target_dir / "file1.txt" / "child")])
    assert result.exit_code == 1
    assert "Cannot resolve" in result.output
    assert "is not a directory" not in result.output


def test_seek_unreadable_directory(target_dir, monkeypatch):
    def deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", deny)
    result = runner.invoke(main.app, ["seek", str(target_dir), "pdf"])
    assert result.exit_code == 1
    assert "Cannot read" in result.output
