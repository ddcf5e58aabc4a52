import logging

import pytest

from voxcubes.voxfile import MainChunk, VoxFile


def vox_bytes(*children, version=150) -> bytes:
    """Encode a whole .vox file whose MAIN chunk holds the given chunks."""
    return bytes(VoxFile(version, MainChunk(list(children))))


@pytest.fixture
def write_vox(tmp_path):
    """Write chunks to a .vox file under tmp_path and return its path."""

    def write(*children, name="model.vox", version=150):
        path = tmp_path / name
        path.write_bytes(vox_bytes(*children, version=version))
        return path

    return write


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
