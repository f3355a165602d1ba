"""
End-to-end unlit variant generation for a single .gltf file.

Workflow:
1) Load the document (fails before anything runs if the input is missing).
2) Run the external generator to bake unlit textures.
3) Patch materials/textures/images in memory and verify the new links.
4) Write the document once to <output_dir>/<input filename>.
"""

import logging
from pathlib import Path
from typing import Optional

from .gltf_io import load_document, write_document
from .inspect_gltf import verify_unlit_links
from .patcher import patch

logger = logging.getLogger(__name__)


def generate_unlit_variants(
    gltf_path: Path,
    output_dir: Path,
    generator,
    lighten: Optional[float] = None,
    dedupe_extensions: bool = False,
    indent: Optional[int] = None,
) -> Optional[Path]:
    """
    Generate unlit textures for ``gltf_path`` and write the patched document.

    Args:
        gltf_path: Input .gltf file.
        output_dir: Directory for generated images and the patched document.
        generator: Object with ``invoke(gltf_path, output_dir, lighten)``
            returning one path or None per material.
        lighten: Lighten scalar forwarded to the generator.
        dedupe_extensions: Do not re-add extension names already present.
        indent: JSON indent for the written document.

    Returns:
        Path of the written document, or None if it has no materials.
    """
    gltf_path = Path(gltf_path)
    output_dir = Path(output_dir)

    document = load_document(gltf_path)

    if document.materials is None:
        logger.warning(f"{gltf_path.name} has no materials; skipping generation")
        return None

    generated = generator.invoke(gltf_path, output_dir, lighten)
    logger.info(
        f"Generator produced {sum(p is not None for p in generated)} "
        f"of {len(generated)} unlit textures"
    )

    patch(document, generated, dedupe_extensions=dedupe_extensions)
    # Links already present in the input are left as they are
    patched = [i for i, path in enumerate(generated) if path is not None]
    links = verify_unlit_links(document, patched)
    logger.info(f"Verified {len(links)} unlit material link(s)")

    return write_document(document, gltf_path, output_dir, indent=indent)
