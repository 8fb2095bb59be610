import pytest

from clockspeed.utils.filesystem import FileSystem


def test_safe_write_bytes(tmp_path):
    out = tmp_path / "nested" / "a.sbp"
    FileSystem.safe_write(out, b"abc")
    assert out.read_bytes() == b"abc"
    assert not (tmp_path / "nested" / "a.sbp.tmp").exists()


def test_safe_write_chunks(tmp_path):
    out = tmp_path / "a.sbp"
    FileSystem.safe_write(out, [b"HDR", b"C1", b"C2"])
    assert out.read_bytes() == b"HDRC1C2"


def test_safe_write_failure_leaves_nothing(tmp_path):
    out = tmp_path / "a.sbp"

    def chunks():
        yield b"partial"
        raise OSError("disk full")

    with pytest.raises(OSError):
        FileSystem.safe_write(out, chunks())

    assert list(tmp_path.iterdir()) == []


def test_file_exists_and_remove(tmp_path):
    p = tmp_path / "x.bin"
    assert not FileSystem.file_exists(p)
    p.write_bytes(b"1")
    assert FileSystem.file_exists(p)
    assert FileSystem.read_bytes(p) == b"1"
    FileSystem.remove(p)
    FileSystem.remove(p)
    assert not p.exists()
    assert not FileSystem.file_exists(tmp_path)
