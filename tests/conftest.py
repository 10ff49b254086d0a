import pytest


@pytest.fixture
def target_dir(tmp_path):
    """Directory with three pdfs, one txt and a subdirectory."""
    d = tmp_path / "dummy_target_files_dir"
    d.mkdir()
    for name in ("file1.pdf", "file2.pdf", "file3.pdf", "notes.txt"):
        (d / name).write_text("x", encoding="utf-8")
    (d / "sub").mkdir()
    (d / "sub" / "nested.pdf").write_text("x", encoding="utf-8")
    return d


@pytest.fixture
def non_target_dir(tmp_path):
    d = tmp_path / "dummy_not_target_files_dir"
    d.mkdir()
    (d / "file1.txt").write_text("x", encoding="utf-8")
    return d
