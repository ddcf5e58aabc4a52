#!/usr/bin/env python3
"""Decode a MagicaVoxel .vox file and summarize its cube model.

Usage:
    vox2cubes -vi <input.vox> [-v]
    vox2cubes --licenseinfo
    vox2cubes --thirdparty
"""
import argparse
import logging
import os
import sys

from voxcubes import __version__
from voxcubes.errors import VoxError
from voxcubes.log import setup_logging
from voxcubes.model import Model
from voxcubes.voxfile import VoxFile

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that fails with exit code 1, like every other error."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


LICENSE = """\
voxcubes

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE."""

THIRD_PARTY = """\
voxcubes has no third-party runtime dependencies.
The default palette is the one shipped with MagicaVoxel."""


def summarize(model: Model) -> str:
    """Human-readable description of a decoded model."""
    lines = [f"VOX version: {model.version}"]

    if model.grid_size is not None:
        lines += ["Size: {}x{}x{}".format(*model.grid_size)]

    lines += [f"Number of voxels: {len(model.voxels)}"]
    lines += [
        f"Palette: {'from file' if model.explicit_palette_seen else 'default'}, "
        f"{len(model.used_color_indices())} colors used"
    ]

    for material in model.materials:
        lines += [f"Material {material.material_id}: {material.properties}"]

    for tag, count in sorted(model.chunk_counts.items()):
        lines += [f"{tag}: {count}"]

    if model.extent.is_empty:
        lines += ["Extent: empty"]
    else:
        center = ", ".join(f"{value:g}" for value in model.extent.center())
        lines += [
            f"Extent: min={model.extent.min} max={model.extent.max}",
            f"Bounding sphere: center=({center}) radius={model.extent.radius():g}",
        ]

    return "\n".join(lines)


def main(argv=None):
    parser = ArgumentParser(
        prog="vox2cubes",
        description="Decode a MagicaVoxel .vox file into a model of colored cubes",
    )
    parser.add_argument(
        "-vi", "--voxin",
        help="Input .vox file",
    )
    parser.add_argument(
        "-li", "--licenseinfo",
        action="store_true",
        help="Print license info",
    )
    parser.add_argument(
        "-tp", "--thirdparty",
        action="store_true",
        help="Print third party licenses",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.licenseinfo:
        print(LICENSE)
        return 0

    if args.thirdparty:
        print(THIRD_PARTY)
        return 0

    if not args.voxin:
        print("Mandatory -vi .vox input missing", file=sys.stderr)
        return 1

    file_path = args.voxin
    if len(file_path) < 5 or not file_path.endswith(".vox"):
        print(
            f"Error: Input file must have a .vox extension: {file_path}",
            file=sys.stderr,
        )
        return 1

    if not os.path.exists(file_path):
        print(f"Error: Input file does not exist: {file_path}", file=sys.stderr)
        return 1

    logger.info(f"Loading {file_path}")
    try:
        model = VoxFile.read(file_path)
    except OSError as e:
        print(f"Error opening file: {e}", file=sys.stderr)
        return 1
    except VoxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(summarize(model))
    return 0


if __name__ == "__main__":
    sys.exit(main())
