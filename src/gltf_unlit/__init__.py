"""
Unlit material variants for glTF scenes.

Runs an external texture baker and links each baked texture back to its
source material through the MOZ_alt_materials extension.
"""

from .document import GltfDocument
from .generator import UnlitTextureGenerator
from .patcher import patch
from .pipeline import generate_unlit_variants

__version__ = "0.1.0"
__all__ = ["GltfDocument", "UnlitTextureGenerator", "patch", "generate_unlit_variants"]
