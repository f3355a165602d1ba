import json
from pathlib import Path

import pytest


def two_material_gltf():
    return {
        "asset": {"version": "2.0", "generator": "test"},
        "scene": 0,
        "scenes": [{"nodes": [0]}],
        "nodes": [{"mesh": 0}],
        "meshes": [{"primitives": [{"attributes": {"POSITION": 0}, "material": 0}]}],
        "materials": [
            {
                "name": "Wood",
                "pbrMetallicRoughness": {
                    "baseColorTexture": {"index": 0, "texCoord": 0},
                    "metallicFactor": 0.0,
                },
                "alphaMode": "OPAQUE",
            },
            {
                "name": "Paint",
                "pbrMetallicRoughness": {"baseColorFactor": [1.0, 0.0, 0.0, 1.0]},
                "extensions": {"KHR_materials_emissive_strength": {"emissiveStrength": 2.0}},
            },
        ],
        "textures": [{"source": 0, "sampler": 0}],
        "samplers": [{"magFilter": 9729}],
        "images": [{"uri": "wood.png"}],
    }


class FakeGenerator:
    """Stands in for the external binary: returns a canned output and records calls."""

    def __init__(self, output):
        self.output = output
        self.calls = []

    def invoke(self, gltf_path, output_dir=None, lighten=None):
        self.calls.append((gltf_path, output_dir, lighten))
        return self.output


@pytest.fixture
def gltf_dict():
    return two_material_gltf()


@pytest.fixture
def gltf_file(tmp_path: Path, gltf_dict) -> Path:
    path = tmp_path / "in" / "scene.gltf"
    path.parent.mkdir()
    path.write_text(json.dumps(gltf_dict))
    return path
