"""
Read SVG icons from a directory.

Each icon is expected to hold a single top-level <path> element; its "d"
attribute is the only geometry kept.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, NamedTuple, Optional

import defusedxml.ElementTree

SVG_PATTERN = "*.svg"


class IconEntry(NamedTuple):
    name: str
    path_data: str


class MissingPathData(LookupError):
    pass


class Extraction(NamedTuple):
    path_data: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, path_data: str) -> "Extraction":
        return cls(path_data=path_data)

    @classmethod
    def failure(cls, error: Exception) -> "Extraction":
        return cls(error=error)


def _local_name(name: str) -> str:
    # "{http://www.w3.org/2000/svg}path" -> "path"
    return name.rpartition("}")[2]


def scan_svg_files(icon_dir: Path) -> List[Path]:
    """Return the SVG files directly inside icon_dir, sorted by name."""
    return sorted(p for p in Path(icon_dir).glob(SVG_PATTERN) if p.is_file())


def build_icon_name(file_name: str) -> str:
    """Derive the icon key: text before ".svg", letters only, lowercased."""
    stem = Path(file_name).name.split(".svg")[0]
    return "".join(ch for ch in stem if ch.isalpha()).lower()


def _find_path_data(root) -> str:
    for child in root:
        if not isinstance(child.tag, str) or _local_name(child.tag) != "path":
            continue
        for key, value in child.attrib.items():
            if _local_name(key) == "d":
                if not value:
                    raise MissingPathData("<path> has an empty 'd' attribute")
                return value
        raise MissingPathData("<path> has no 'd' attribute")
    raise MissingPathData("no top-level <path> element")


def extract_path_data(svg_file: Path) -> Extraction:
    try:
        tree = defusedxml.ElementTree.parse(str(svg_file))
        return Extraction.success(_find_path_data(tree.getroot()))
    # LookupError covers MissingPathData and unknown declared encodings,
    # ValueError covers defusedxml's security exceptions
    except (defusedxml.ElementTree.ParseError,
            LookupError,
            ValueError,
            OSError) as e:
        return Extraction.failure(e)
