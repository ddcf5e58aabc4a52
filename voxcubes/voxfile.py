"""VoxFile structure and related functions.

The goal of this module is to decode MagicaVoxel .vox files into a
voxcubes.model.Model. A .vox file is the magic tag 'VOX ', a version number,
and then a tree of chunks:

-------------------------------------------------------------------------------
# Bytes  | Type       | Value
-------------------------------------------------------------------------------
1x4      | char       | chunk id
4        | int        | num bytes of chunk content (N)
4        | int        | num bytes of children chunks (M)

N        |            | chunk content

M        |            | children chunks
-------------------------------------------------------------------------------

Chunks whose id is listed in DECODERS have their content decoded into the
model. Every other chunk is framed by its two lengths and skipped, so files
from newer MagicaVoxel versions still load.
"""

import logging
from pathlib import Path
from typing import NamedTuple, Optional, Union

from voxcubes.cursor import ByteCursor, Dict, Int32, UInt32
from voxcubes.errors import InvalidMagic, MalformedChunk, UnexpectedEndOfData
from voxcubes.model import GridSize, Material, Model, Voxel

logger = logging.getLogger(__name__)

MAGIC = b"VOX "

# MagicaVoxel writes at most a handful of nesting levels.
MAX_DEPTH = 64


class ChunkHeader(NamedTuple):
    """Chunk id and the two lengths that frame a chunk."""

    id: str
    content_bytes: int
    children_bytes: int

    @staticmethod
    def read(cursor: ByteCursor) -> "ChunkHeader":
        id = cursor.read_tag()
        content_bytes = cursor.read_uint32()
        children_bytes = cursor.read_uint32()
        return ChunkHeader(id, content_bytes, children_bytes)

    def __bytes__(self):
        return (
            self.id.encode("ascii")
            + UInt32.write(self.content_bytes)
            + UInt32.write(self.children_bytes)
        )


class FramedChunk(NamedTuple):
    """A chunk header, its content, and where its children stop."""

    header: ChunkHeader
    content: bytes
    children_end: int


class Chunk:
    """Chunk class."""

    id = ""

    @staticmethod
    def frame(cursor: ByteCursor) -> FramedChunk:
        """Read one chunk header and its content.

        On return the cursor sits at the first child chunk, if any; the
        children section ends at the returned children_end offset.
        """
        header = ChunkHeader.read(cursor)
        content = cursor.read_bytes(header.content_bytes)
        return FramedChunk(header, content, cursor.offset + header.children_bytes)

    @classmethod
    def decode(cls, content: bytes) -> "Chunk":
        """Decode a chunk's content bytes."""
        cursor = ByteCursor(content)
        try:
            return cls.read_content(cursor)
        except UnexpectedEndOfData as e:
            raise MalformedChunk(
                cls.id, f"content too short ({len(content)} bytes): {e}"
            ) from e

    @classmethod
    def read_content(cls, cursor: ByteCursor) -> "Chunk":
        raise NotImplementedError(f"Chunk {cls.id!r} has no content decoder")

    def apply(self, model: Model):
        """Add what this chunk holds to the model."""
        raise NotImplementedError(f"Chunk {self.id!r} does not update models")

    def content_bytes(self) -> bytes:
        return b""

    def children(self) -> list["Chunk"]:
        return []

    def __bytes__(self):
        content = self.content_bytes()
        child_content = b"".join(bytes(child) for child in self.children())
        header = ChunkHeader(self.id, len(content), len(child_content))
        return bytes(header) + content + child_content


class RawChunk(Chunk):
    """Chunk with undecoded content, used for every id voxcubes skips."""

    def __init__(
        self, id: str, content: bytes = b"", children: Optional[list[Chunk]] = None
    ):
        self.id = id
        self.content = content
        self.child_chunks = children or []

    def content_bytes(self) -> bytes:
        return self.content

    def children(self) -> list[Chunk]:
        return self.child_chunks


class MainChunk(RawChunk):
    """Main chunk class.

    Chunk 'MAIN'
    {
        // models
        Chunk 'SIZE'
        Chunk 'XYZI'

        ...

        // palette
        Chunk 'RGBA'    : optional

        // scene graph, materials, layers, ...
    }
    """

    def __init__(self, children: list[Chunk]):
        super().__init__("MAIN", b"", children)


class SizeChunk(Chunk):
    """Size chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | size x
    4        | int        | size y
    4        | int        | size z : gravity direction
    -------------------------------------------------------------------------------
    """

    id = "SIZE"

    def __init__(self, size: GridSize):
        self.size = size

    @classmethod
    def read_content(cls, cursor: ByteCursor) -> "SizeChunk":
        x = cursor.read_uint32()
        y = cursor.read_uint32()
        z = cursor.read_uint32()

        return SizeChunk(GridSize(x, y, z))

    def apply(self, model: Model):
        model.record_grid_size(self.size)

    def content_bytes(self) -> bytes:
        return b"".join(UInt32.write(value) for value in self.size)


class XYZIChunk(Chunk):
    """XYZI chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | numVoxels (N)
    4 x N    | int        | (x, y, z, colorIndex) : 1 byte for each component
    -------------------------------------------------------------------------------
    """

    id = "XYZI"

    def __init__(self, voxels: list[Voxel]):
        self.voxels = voxels

    @classmethod
    def read_content(cls, cursor: ByteCursor) -> "XYZIChunk":
        num_voxels = cursor.read_uint32()
        if num_voxels * 4 > cursor.remaining:
            raise MalformedChunk(
                cls.id,
                f"{num_voxels} voxels need {num_voxels * 4} bytes, "
                f"{cursor.remaining} available",
            )

        voxels = []
        for _ in range(num_voxels):
            x, y, z, color_index = cursor.read_bytes(4)
            voxels += [Voxel(x, y, z, color_index)]

        return XYZIChunk(voxels)

    def apply(self, model: Model):
        for voxel in self.voxels:
            model.append_voxel(voxel)

    def content_bytes(self) -> bytes:
        content = UInt32.write(len(self.voxels))

        for voxel in self.voxels:
            content += bytes(voxel)

        return content


class PaletteChunk(Chunk):
    """Palette chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type     | Value
    -------------------------------------------------------------------------------
    4 x 256  | int      | (R, G, B, A) : 1 byte for each component
    -------------------------------------------------------------------------------

    Entry i is the color of palette index i. Content past the 256th entry is
    ignored.
    """

    id = "RGBA"

    def __init__(self, palette: Union[tuple[int, ...], list[int]]):
        self.palette = tuple(palette)

    @classmethod
    def read_content(cls, cursor: ByteCursor) -> "PaletteChunk":
        return PaletteChunk([cursor.read_uint32() for _ in range(256)])

    def apply(self, model: Model):
        model.set_palette(self.palette)

    def content_bytes(self) -> bytes:
        return b"".join(UInt32.write(color) for color in self.palette)


class MaterialChunk(Chunk):
    """Material chunk class.

    int32	: material id
    int32	: num of properties (not trusted, see below)
    // until the content is exhausted
    {
    STRING	: property key
    STRING	: property value
    }
          (_type : str) _diffuse, _metal, _glass, _emit
          (_weight : float) range 0 ~ 1
          (_rough : float)
          (_spec : float)
          (_ior : float)
          (_att : float)
          (_flux : float)
          (_plastic)

    The property count is skipped; pairs are read until the chunk content
    runs out. Values are stored as the raw strings found in the file.
    """

    id = "MATL"

    def __init__(self, material_id: int, properties: dict[str, str]):
        self.material_id = material_id
        self.properties = properties

    @classmethod
    def read_content(cls, cursor: ByteCursor) -> "MaterialChunk":
        material_id = cursor.read_int32()
        cursor.read_uint32()  # property count

        properties = {}
        while not cursor.at_end:
            key = cursor.read_string(cursor.read_uint32())
            value = cursor.read_string(cursor.read_uint32())
            properties[key] = value

        return MaterialChunk(material_id, properties)

    def apply(self, model: Model):
        model.add_material(Material(self.material_id, self.properties))

    def content_bytes(self) -> bytes:
        return Int32.write(self.material_id) + Dict.write(self.properties)


DECODERS: dict[str, type[Chunk]] = {
    chunk.id: chunk for chunk in (SizeChunk, XYZIChunk, PaletteChunk, MaterialChunk)
}

# Chunks MagicaVoxel writes that carry nothing a cube model needs. They are
# counted on the model but not decoded.
KNOWN_CHUNK_IDS = frozenset(
    ["PACK", "rCAM", "rOBJ", "nTRN", "nGRP", "nSHP", "MATT", "LAYR", "IMAP", "NOTE"]
)


class VoxFile:
    """VoxFile class.

    Holds a version and a main chunk for encoding; reading goes straight to a
    Model through the static read methods.
    """

    def __init__(self, version: int, main: MainChunk):
        """VoxFile constructor."""
        self.version = version
        self.main = main

    def __bytes__(self):
        return MAGIC + UInt32.write(self.version) + bytes(self.main)

    @staticmethod
    def read(path: Union[str, Path]) -> Model:
        """Read a .vox file from the given path."""
        with open(path, "rb") as f:
            data = f.read()

        logger.debug(f"Read {len(data)} bytes from {path}")
        return VoxFile.read_bytes(data)

    @staticmethod
    def read_bytes(data: bytes) -> Model:
        """Decode a whole .vox file held in memory."""
        if data[:4] != MAGIC:
            raise InvalidMagic(bytes(data[:4]))

        cursor = ByteCursor(data, 4)
        model = Model(cursor.read_uint32())
        logger.debug(f"VOX version: {model.version}")

        while not cursor.at_end:
            VoxFile.read_chunk(cursor, model)

        logger.info(
            f"Decoded {len(model.voxels)} voxels, {len(model.materials)} materials, "
            f"{'file' if model.explicit_palette_seen else 'default'} palette"
        )
        return model

    @staticmethod
    def read_chunk(cursor: ByteCursor, model: Model, depth: int = 0):
        """Read one chunk and, recursively, all of its children.

        The chunk's framing is checked before its content reaches the model.
        """
        chunk_start = cursor.offset
        header, content, children_end = Chunk.frame(cursor)

        if children_end > len(cursor):
            raise UnexpectedEndOfData(
                cursor.offset, header.children_bytes, cursor.remaining
            )
        if header.children_bytes and depth >= MAX_DEPTH:
            raise MalformedChunk(
                header.id, f"children nested deeper than {MAX_DEPTH} levels"
            )

        decoder = DECODERS.get(header.id)
        if decoder is not None:
            decoder.decode(content).apply(model)
            logger.debug(f"{header.id} chunk at {chunk_start} decoded")
        elif header.id in KNOWN_CHUNK_IDS:
            model.count_chunk(header.id)
            logger.debug(f"{header.id} chunk at {chunk_start} skipped")
        else:
            logger.debug(f"Unrecognized chunk {header.id!r} at {chunk_start} skipped")

        children = cursor.limit(children_end)
        try:
            while children.offset < children_end:
                VoxFile.read_chunk(children, model, depth + 1)
        except UnexpectedEndOfData as e:
            raise MalformedChunk(
                header.id, f"child chunk overruns section ending at {children_end}: {e}"
            ) from e
        cursor.offset = children.offset
