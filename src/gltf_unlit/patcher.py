#!/usr/bin/env python3
"""
Splice generated unlit textures into a glTF document.

Workflow:
1) Tag the document with MOZ_alt_materials / KHR_materials_unlit when at least
   one unlit texture was generated.
2) For every original material with a generated texture, append one image, one
   texture and one unlit material, and link the original to the new material.

Originals are never reordered or removed; everything new is appended.
"""

import logging
import os
from typing import List, Optional, Sequence

from .document import (
    GltfDocument,
    Image,
    Material,
    PbrMetallicRoughness,
    Texture,
    TextureInfo,
)

logger = logging.getLogger(__name__)

ALT_MATERIALS_EXTENSION = "MOZ_alt_materials"
UNLIT_EXTENSION = "KHR_materials_unlit"

# Fallback shading for viewers that ignore KHR_materials_unlit
UNLIT_ROUGHNESS_FACTOR = 0.9
UNLIT_METALLIC_FACTOR = 0.0


def validate_generated_textures(
    generated_textures: Sequence[Optional[str]], material_count: int
) -> List[Optional[str]]:
    """
    Check the generator output against the document it was produced for.

    Args:
        generated_textures: One entry per original material, a path or None.
        material_count: Number of materials in the document.

    Returns:
        The entries as a list.

    Raises:
        ValueError: If the output is not a list of the right length or holds
            anything other than strings and None.
    """
    if not isinstance(generated_textures, (list, tuple)):
        raise ValueError(
            f"Generated textures must be a list, got {type(generated_textures).__name__}"
        )
    if len(generated_textures) != material_count:
        raise ValueError(
            f"Generator returned {len(generated_textures)} entries "
            f"for {material_count} materials"
        )
    for i, entry in enumerate(generated_textures):
        if entry is not None and not isinstance(entry, str):
            raise ValueError(
                f"Generated texture entry {i} must be a path string or null, "
                f"got {type(entry).__name__}"
            )
    return list(generated_textures)


def _unlit_material(texture_index: int) -> Material:
    return Material(
        pbr_metallic_roughness=PbrMetallicRoughness(
            base_color_texture=TextureInfo(index=texture_index),
            roughness_factor=UNLIT_ROUGHNESS_FACTOR,
            metallic_factor=UNLIT_METALLIC_FACTOR,
        ),
        extensions={UNLIT_EXTENSION: {}},
    )


def _add_extensions_used(document: GltfDocument, dedupe: bool) -> None:
    if document.extensions_used is None:
        document.extensions_used = []
    for name in (ALT_MATERIALS_EXTENSION, UNLIT_EXTENSION):
        if dedupe and name in document.extensions_used:
            continue
        document.extensions_used.append(name)


def patch(
    document: GltfDocument,
    generated_textures: Sequence[Optional[str]],
    dedupe_extensions: bool = False,
) -> GltfDocument:
    """
    Add unlit material variants to ``document`` in place.

    Args:
        document: Loaded glTF document.
        generated_textures: Generator output, one path (or None) per material.
        dedupe_extensions: Skip extension names already in ``extensionsUsed``
            instead of appending them again.

    Returns:
        The same document, mutated.

    Raises:
        ValueError: On malformed generator output, or when a texture was
            generated but the document has no ``images`` / ``textures``.
    """
    if document.materials is None:
        logger.info("Document has no materials; nothing to patch")
        return document

    original_material_count = len(document.materials)
    generated = validate_generated_textures(generated_textures, original_material_count)
    generated_count = sum(1 for path in generated if path is not None)

    if generated_count == 0:
        logger.info("No unlit textures were generated; document left unchanged")
        return document

    # Checked up front so a failure never leaves a half-patched document
    if document.images is None:
        raise ValueError("Document has no 'images' array but unlit textures were generated")
    if document.textures is None:
        raise ValueError("Document has no 'textures' array but unlit textures were generated")

    _add_extensions_used(document, dedupe_extensions)

    next_unlit_material = original_material_count

    for i in range(original_material_count):
        texture_path = generated[i]
        if texture_path is None:
            continue

        original = document.materials[i]
        if original.extensions is None:
            original.extensions = {}
        original.extensions[ALT_MATERIALS_EXTENSION] = {UNLIT_EXTENSION: next_unlit_material}
        next_unlit_material += 1

        document.images.append(Image(uri=os.path.basename(texture_path)))
        document.textures.append(Texture(source=len(document.images) - 1))
        document.materials.append(_unlit_material(len(document.textures) - 1))

        logger.debug(
            f"Material {i} -> unlit material {len(document.materials) - 1} "
            f"({document.images[-1].uri})"
        )

    logger.info(
        f"Added {generated_count} unlit material(s) "
        f"to {original_material_count} original material(s)"
    )
    return document
