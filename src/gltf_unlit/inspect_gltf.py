"""
Inspect the unlit material links in a patched glTF document.

Usage:
    python -m gltf_unlit.inspect_gltf <path_to_gltf>
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .document import GltfDocument
from .patcher import ALT_MATERIALS_EXTENSION, UNLIT_EXTENSION


@dataclass
class UnlitLink:
    material: int
    unlit_material: int
    texture: Optional[int]
    image: Optional[int]
    uri: Optional[str]
    resolved: bool = False


def _unlit_index(extensions) -> Optional[int]:
    if not extensions:
        return None
    alt = extensions.get(ALT_MATERIALS_EXTENSION)
    if not isinstance(alt, dict):
        return None
    return alt.get(UNLIT_EXTENSION)


def find_unlit_links(document: GltfDocument) -> List[UnlitLink]:
    """
    Follow every material -> unlit material -> texture -> image chain.

    A link is resolved once its image index points into ``images``. Images
    embedded through a bufferView resolve with ``uri`` left as None.
    """
    materials = document.materials or []
    textures = document.textures or []
    images = document.images or []

    links = []
    for mat_idx, material in enumerate(materials):
        unlit_idx = _unlit_index(material.extensions)
        if unlit_idx is None:
            continue

        texture_idx = image_idx = uri = None
        resolved = False
        if isinstance(unlit_idx, int) and 0 <= unlit_idx < len(materials):
            pbr = materials[unlit_idx].pbr_metallic_roughness
            if pbr is not None and pbr.base_color_texture is not None:
                texture_idx = pbr.base_color_texture.index
        if isinstance(texture_idx, int) and 0 <= texture_idx < len(textures):
            image_idx = textures[texture_idx].source
        if isinstance(image_idx, int) and 0 <= image_idx < len(images):
            uri = images[image_idx].uri
            resolved = True

        links.append(UnlitLink(mat_idx, unlit_idx, texture_idx, image_idx, uri, resolved))
    return links


def verify_unlit_links(
    document: GltfDocument, materials: Optional[Iterable[int]] = None
) -> List[UnlitLink]:
    """
    Check that unlit links resolve to an image index.

    Args:
        document: glTF document to check.
        materials: Only check links starting at these material indices;
            every link in the document when None.

    Returns:
        The checked links.

    Raises:
        ValueError: Listing every material whose chain is broken.
    """
    links = find_unlit_links(document)
    if materials is not None:
        wanted = set(materials)
        links = [link for link in links if link.material in wanted]

    broken = [link for link in links if not link.resolved]
    if broken:
        details = ", ".join(
            f"material {b.material} (unlit={b.unlit_material}, texture={b.texture}, image={b.image})"
            for b in broken
        )
        raise ValueError(f"Unresolved unlit material links: {details}")
    return links


def summarize(document: GltfDocument) -> str:
    """Render a short report of the document's unlit variants."""
    materials = document.materials or []
    links = find_unlit_links(document)

    lines = [
        f"Materials: {len(materials)}",
        f"Textures:  {len(document.textures or [])}",
        f"Images:    {len(document.images or [])}",
        f"extensionsUsed: {document.extensions_used or []}",
        f"Unlit variants ({len(links)}):",
    ]
    for link in links:
        name = materials[link.material].extra.get("name", "unnamed")
        if not link.resolved:
            status = "BROKEN LINK"
        elif link.uri is not None:
            status = link.uri
        else:
            status = f"embedded image {link.image}"
        lines.append(f"   Material {link.material} ({name}) -> {link.unlit_material}: {status}")
    return "\n".join(lines)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python -m gltf_unlit.inspect_gltf <gltf_file>")
        sys.exit(1)

    from .gltf_io import load_document

    gltf_file = Path(sys.argv[1])
    if not gltf_file.exists():
        print(f"ERROR: File not found: {gltf_file}")
        sys.exit(1)

    print(summarize(load_document(gltf_file)))
