"""Read and write .gltf JSON documents."""

import json
import logging
from pathlib import Path
from typing import Optional

from .document import GltfDocument

logger = logging.getLogger(__name__)


def load_document(gltf_path: Path) -> GltfDocument:
    """Load a .gltf file, failing fast if it does not exist."""
    gltf_path = Path(gltf_path)
    if not gltf_path.exists():
        raise FileNotFoundError(f"Input glTF not found: {gltf_path}")

    with open(gltf_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    document = GltfDocument.from_dict(data)
    logger.info(
        f"Loaded {gltf_path.name}: "
        f"{len(document.materials or [])} materials, "
        f"{len(document.textures or [])} textures, "
        f"{len(document.images or [])} images"
    )
    return document


def output_path_for(gltf_path: Path, output_dir: Path) -> Path:
    """The patched file keeps the input's filename, only the directory changes."""
    return Path(output_dir) / Path(gltf_path).name


def write_document(
    document: GltfDocument,
    gltf_path: Path,
    output_dir: Path,
    indent: Optional[int] = None,
) -> Path:
    """
    Write ``document`` to ``output_dir`` under the input's filename.

    Any existing file at that path is overwritten.

    Returns:
        Path of the written file.
    """
    out_path = output_path_for(gltf_path, output_dir)
    # Serialize before opening so a failure never truncates an existing file
    text = json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info(f"Patched glTF saved to {out_path}")
    return out_path
