#!filepath: clockspeed/utils/filesystem.py
from pathlib import Path
from typing import Iterable

from clockspeed import logs


class FileSystem:
    """
    File system helpers
    - create directories on demand
    - atomic writes (tmp file -> rename)
    - remove leftovers on failure
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] created dir: {p}")
        return p

    @staticmethod
    def file_exists(path: str | Path) -> bool:
        return Path(path).is_file()

    @staticmethod
    def read_bytes(path: str | Path) -> bytes:
        p = Path(path)
        data = p.read_bytes()
        logs.debug(f"[FS] read {len(data)} bytes: {p}")
        return data

    @staticmethod
    def safe_write(path: str | Path, data: bytes | Iterable[bytes]) -> Path:
        """
        Atomic write:
            1) write to <path>.tmp
            2) rename -> <path>

        `data` may be a single buffer or a sequence of chunks written in order.
        """
        path = Path(path)
        FileSystem.ensure_dir(path.parent)

        tmp_path = path.with_name(path.name + ".tmp")
        chunks = [data] if isinstance(data, (bytes, bytearray, memoryview)) else data

        try:
            with open(tmp_path, "wb") as f:
                for chunk in chunks:
                    f.write(chunk)
            logs.debug(f"[FS] wrote tmp file: {tmp_path}")
            tmp_path.replace(path)
        except Exception:
            FileSystem.remove(tmp_path)
            raise

        logs.debug(f"[FS] atomic write done: {path}")
        return path

    @staticmethod
    def remove(path: str | Path) -> None:
        p = Path(path)

        if not p.exists():
            return

        p.unlink()
        logs.debug(f"[FS] removed file: {p}")
