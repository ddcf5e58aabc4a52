"""Model class for VoxCubes.

The goal of this module is to collect what the chunk walker decodes from a
.vox file into a single neutral model: the voxels in file order, the palette,
the materials, the grid size and the extent of all voxel coordinates. A
scene-building backend consumes the finished model; nothing here knows about
renderers.
"""

import math
from typing import NamedTuple, Optional

from voxcubes.palette import DEFAULT_PALETTE, Color, color_at


class Voxel(NamedTuple):
    """One colored cube at an integer grid position."""

    x: int
    y: int
    z: int
    color_index: int


class GridSize(NamedTuple):
    """Model dimensions from a SIZE chunk."""

    x: int
    y: int
    z: int


class Material:
    """Material class.

    Properties are kept exactly as the file stores them, raw string keys to
    raw string values. See voxcubes.properties for typed access.
    """

    def __init__(self, material_id: int, properties: dict[str, str]):
        self.material_id = material_id
        self.properties = properties

    def __eq__(self, other):
        if not isinstance(other, Material):
            return False
        return (
            self.material_id == other.material_id
            and self.properties == other.properties
        )

    def __repr__(self):
        return f"Material({self.material_id}, {self.properties!r})"


class Extent:
    """Axis-aligned bounds of every voxel coordinate seen so far."""

    def __init__(self):
        self.seen = False
        self.min: Optional[tuple[int, int, int]] = None
        self.max: Optional[tuple[int, int, int]] = None

    @property
    def is_empty(self) -> bool:
        return not self.seen

    def add(self, x: int, y: int, z: int):
        """Grow the bounds to cover (x, y, z)."""
        if not self.seen:
            self.seen = True
            self.min = (x, y, z)
            self.max = (x, y, z)
            return

        lo = self.min
        hi = self.max
        self.min = (min(lo[0], x), min(lo[1], y), min(lo[2], z))
        self.max = (max(hi[0], x), max(hi[1], y), max(hi[2], z))

    def center(self) -> Optional[tuple[float, float, float]]:
        """Midpoint of the bounds, or None if no voxel was seen."""
        if not self.seen:
            return None
        return tuple((lo + hi) / 2.0 for lo, hi in zip(self.min, self.max))

    def radius(self) -> Optional[float]:
        """Radius of the sphere through the bounds' corners."""
        if not self.seen:
            return None
        return math.dist(self.min, self.max) / 2.0

    def __repr__(self):
        if not self.seen:
            return "Extent(empty)"
        return f"Extent(min={self.min}, max={self.max})"


class Model:
    """Everything decoded from one .vox file."""

    def __init__(self, version: int = 0):
        self.version = version
        self.voxels: list[Voxel] = []
        self.materials: list[Material] = []
        self.grid_size: Optional[GridSize] = None
        self.extent = Extent()
        self.explicit_palette_seen = False
        self.chunk_counts: dict[str, int] = {}
        self._palette: Optional[tuple[int, ...]] = None

    def append_voxel(self, voxel: Voxel):
        self.voxels.append(voxel)
        self.extent.add(voxel.x, voxel.y, voxel.z)

    def set_palette(self, palette: tuple[int, ...]):
        """Replace the default palette with one read from the file."""
        self._palette = tuple(palette)
        self.explicit_palette_seen = True

    def add_material(self, material: Material):
        self.materials.append(material)

    def record_grid_size(self, grid_size: GridSize):
        self.grid_size = grid_size

    def count_chunk(self, tag: str):
        """Note the presence of a chunk that is not decoded further."""
        self.chunk_counts[tag] = self.chunk_counts.get(tag, 0) + 1

    @property
    def palette(self) -> tuple[int, ...]:
        """The file's palette if it had one, else the default palette."""
        if self._palette is not None:
            return self._palette
        return DEFAULT_PALETTE

    def color(self, index: int) -> Color:
        return color_at(self.palette, index)

    def used_color_indices(self) -> list[int]:
        """Distinct palette indices referenced by voxels, ascending."""
        return sorted({voxel.color_index for voxel in self.voxels})
