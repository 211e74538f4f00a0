"""Round-trip verification between JsonML documents and markup trees."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any, List, Tuple

from .decode import decode
from .encode import encode
from .io_utils import read_json, stable_json_dumps
from .tree_model import Element


def roundtrip(element: Element) -> Element:
    return decode(encode(element))


def _pretty_json(obj: Any) -> List[str]:
    return stable_json_dumps(obj).splitlines(keepends=True)


def verify_roundtrip_all(documents_dir: Path) -> Tuple[bool, List[str]]:
    errors: List[str] = []
    for path in sorted(documents_dir.glob("*.json")):
        try:
            element = decode(read_json(path))
        except (OSError, ValueError) as exc:
            errors.append(f"{path.name}: {exc}\n")
            continue
        # Wire forms are compared, not trees: NaN never equals itself.
        before = _pretty_json(encode(element))
        after = _pretty_json(encode(roundtrip(element)))
        if before != after:
            diff = difflib.unified_diff(
                before,
                after,
                fromfile=f"decoded/{path.name}",
                tofile=f"roundtrip/{path.name}",
            )
            errors.append("".join(diff))
    return not errors, errors
