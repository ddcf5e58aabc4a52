from voxcubes.cursor import UInt32
from voxcubes.model import GridSize, Voxel
from voxcubes.voxfile import (
    ChunkHeader,
    MainChunk,
    MaterialChunk,
    PaletteChunk,
    RawChunk,
    SizeChunk,
    VoxFile,
    XYZIChunk,
)


def test_create_basic():
    voxfile = VoxFile(
        150,
        MainChunk(
            [
                SizeChunk(GridSize(10, 10, 10)),
                XYZIChunk([Voxel(1, 1, 1, 2)]),
            ]
        ),
    )

    data = bytes(voxfile)

    size = b"SIZE" + UInt32.write(12) + UInt32.write(0) + UInt32.write(10) * 3
    xyzi = b"XYZI" + UInt32.write(8) + UInt32.write(0)
    xyzi += UInt32.write(1) + b"\x01\x01\x01\x02"
    main = b"MAIN" + UInt32.write(0) + UInt32.write(len(size) + len(xyzi))
    assert data == b"VOX " + UInt32.write(150) + main + size + xyzi


def test_create_palette():
    data = bytes(PaletteChunk([0xFF0000FF] * 256))

    assert data[:12] == b"RGBA" + UInt32.write(1024) + UInt32.write(0)
    assert data[12:16] == b"\xff\x00\x00\xff"
    assert len(data) == 12 + 1024


def test_create_material():
    data = bytes(MaterialChunk(5, {"_type": "_metal"}))

    content = (
        UInt32.write(5)
        + UInt32.write(1)
        + UInt32.write(5)
        + b"_type"
        + UInt32.write(6)
        + b"_metal"
    )
    assert data == b"MATL" + UInt32.write(len(content)) + UInt32.write(0) + content


def test_create_nested():
    inner = RawChunk("nSHP", b"\x00" * 4)
    outer = RawChunk("nGRP", b"\x01\x02", [inner, inner])

    data = bytes(outer)

    assert ChunkHeader("nGRP", 2, 32) == (
        data[:4].decode("ascii"),
        int.from_bytes(data[4:8], "little"),
        int.from_bytes(data[8:12], "little"),
    )
    assert len(data) == 12 + 2 + 2 * 16
