"""Persist the accumulated professor list as JSON."""

import json
from pathlib import Path

from rmp_lite.schema import TeacherEdge


def write_professors(edges: list[TeacherEdge], path: str | Path) -> Path:
    """Overwrite ``path`` with the edges, as received, in a 2-space indented JSON array."""
    path = Path(path)
    text = json.dumps([edge.raw for edge in edges], indent=2, ensure_ascii=False)
    path.write_text(text, encoding="utf-8")
    return path
