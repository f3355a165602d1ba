import pytest

from gltf_unlit.document import GltfDocument, Material, PbrMetallicRoughness

from conftest import two_material_gltf


def test_round_trip_preserves_unknown_fields():
    data = two_material_gltf()
    assert GltfDocument.from_dict(data).to_dict() == data


def test_absent_sequences_stay_absent():
    doc = GltfDocument.from_dict({"asset": {"version": "2.0"}})
    assert doc.materials is None
    assert doc.images is None
    assert doc.textures is None
    assert doc.extensions_used is None
    assert doc.to_dict() == {"asset": {"version": "2.0"}}


def test_empty_materials_differs_from_missing():
    doc = GltfDocument.from_dict({"materials": []})
    assert doc.materials == []
    assert doc.to_dict() == {"materials": []}


def test_typed_material_fields():
    doc = GltfDocument.from_dict(two_material_gltf())
    wood = doc.materials[0]
    assert wood.pbr_metallic_roughness.base_color_texture.index == 0
    assert wood.pbr_metallic_roughness.base_color_texture.extra == {"texCoord": 0}
    assert wood.pbr_metallic_roughness.metallic_factor == 0.0
    assert wood.extensions is None
    assert wood.extra["name"] == "Wood"
    assert doc.textures[0].source == 0
    assert doc.images[0].uri == "wood.png"


def test_zero_factor_is_serialized():
    pbr = PbrMetallicRoughness(metallic_factor=0.0)
    assert pbr.to_dict() == {"metallicFactor": 0.0}


def test_to_dict_does_not_alias_extra():
    material = Material(extra={"name": "a", "extras": {"tags": ["x"]}})
    out = material.to_dict()
    out["extras"]["tags"].append("y")
    assert material.extra["extras"]["tags"] == ["x"]


@pytest.mark.parametrize("data", [
    [],
    {"materials": {"0": {}}},
    {"materials": ["not an object"]},
    {"extensionsUsed": "KHR_materials_unlit"},
    {"materials": [{"pbrMetallicRoughness": {"baseColorTexture": {"texCoord": 1}}}]},
])
def test_malformed_documents_are_rejected(data):
    with pytest.raises(ValueError):
        GltfDocument.from_dict(data)


def test_explicit_nulls_survive_round_trip():
    data = {
        "extensionsUsed": None,
        "materials": [{"name": "m", "extensions": None, "pbrMetallicRoughness": None}],
        "textures": [{"source": None, "sampler": 0}],
        "images": [{"uri": None, "bufferView": 0}],
    }
    assert GltfDocument.from_dict(data).to_dict() == data
    assert GltfDocument.from_dict({"materials": None}).to_dict() == {"materials": None}


def test_set_field_replaces_explicit_null():
    doc = GltfDocument.from_dict({"materials": [{"extensions": None}]})
    doc.materials[0].extensions = {"KHR_materials_unlit": {}}
    assert doc.to_dict() == {"materials": [{"extensions": {"KHR_materials_unlit": {}}}]}
