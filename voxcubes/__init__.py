"""VoxCubes: decode MagicaVoxel .vox files into models of colored cubes."""

__version__ = "0.1.0"

from voxcubes.errors import InvalidMagic, MalformedChunk, UnexpectedEndOfData, VoxError
from voxcubes.model import Extent, GridSize, Material, Model, Voxel
from voxcubes.palette import DEFAULT_PALETTE, Color
from voxcubes.voxfile import VoxFile
