"""
Typed view over the parts of a glTF JSON document touched by the unlit patcher.

Only materials, textures, images and ``extensionsUsed`` are modelled. Every
record keeps the keys it does not model in ``extra`` so a document survives a
``from_dict`` / ``to_dict`` round trip unchanged.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _require_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object for {what}, got {type(value).__name__}")
    return value


def _split(data: Dict[str, Any], known: tuple) -> Dict[str, Any]:
    """
    Return a deep copy of the keys in ``data`` that are not in ``known``.

    Known keys holding an explicit null are kept too, so they are written back
    as null unless the typed field has been set since.
    """
    return {
        k: copy.deepcopy(v) for k, v in data.items()
        if k not in known or v is None
    }


@dataclass
class Image:
    uri: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        data = _require_object(data, "image")
        return cls(uri=data.get("uri"), extra=_split(data, ("uri",)))

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.extra)
        if self.uri is not None:
            out["uri"] = self.uri
        return out


@dataclass
class Texture:
    source: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Texture":
        data = _require_object(data, "texture")
        return cls(source=data.get("source"), extra=_split(data, ("source",)))

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.extra)
        if self.source is not None:
            out["source"] = self.source
        return out


@dataclass
class TextureInfo:
    index: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextureInfo":
        data = _require_object(data, "textureInfo")
        if "index" not in data:
            raise ValueError("textureInfo is missing the required 'index' property")
        return cls(index=data["index"], extra=_split(data, ("index",)))

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.extra)
        out["index"] = self.index
        return out


@dataclass
class PbrMetallicRoughness:
    base_color_texture: Optional[TextureInfo] = None
    roughness_factor: Optional[float] = None
    metallic_factor: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _KEYS = ("baseColorTexture", "roughnessFactor", "metallicFactor")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PbrMetallicRoughness":
        data = _require_object(data, "pbrMetallicRoughness")
        base_color = data.get("baseColorTexture")
        return cls(
            base_color_texture=TextureInfo.from_dict(base_color) if base_color is not None else None,
            roughness_factor=data.get("roughnessFactor"),
            metallic_factor=data.get("metallicFactor"),
            extra=_split(data, cls._KEYS),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.extra)
        if self.base_color_texture is not None:
            out["baseColorTexture"] = self.base_color_texture.to_dict()
        # 0.0 is a real value here, only None means "absent"
        if self.roughness_factor is not None:
            out["roughnessFactor"] = self.roughness_factor
        if self.metallic_factor is not None:
            out["metallicFactor"] = self.metallic_factor
        return out


@dataclass
class Material:
    pbr_metallic_roughness: Optional[PbrMetallicRoughness] = None
    extensions: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _KEYS = ("pbrMetallicRoughness", "extensions")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Material":
        data = _require_object(data, "material")
        pbr = data.get("pbrMetallicRoughness")
        extensions = data.get("extensions")
        return cls(
            pbr_metallic_roughness=PbrMetallicRoughness.from_dict(pbr) if pbr is not None else None,
            extensions=copy.deepcopy(_require_object(extensions, "material extensions"))
            if extensions is not None else None,
            extra=_split(data, cls._KEYS),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.extra)
        if self.pbr_metallic_roughness is not None:
            out["pbrMetallicRoughness"] = self.pbr_metallic_roughness.to_dict()
        if self.extensions is not None:
            out["extensions"] = copy.deepcopy(self.extensions)
        return out


@dataclass
class GltfDocument:
    """
    A glTF document with typed materials, textures and images.

    ``None`` for a sequence means the property is absent from the JSON, which
    is distinct from an empty list.
    """

    materials: Optional[List[Material]] = None
    textures: Optional[List[Texture]] = None
    images: Optional[List[Image]] = None
    extensions_used: Optional[List[str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _KEYS = ("materials", "textures", "images", "extensionsUsed")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GltfDocument":
        data = _require_object(data, "glTF document")

        def _records(key, record_cls):
            values = data.get(key)
            if values is None:
                return None
            if not isinstance(values, list):
                raise ValueError(f"glTF property '{key}' must be an array")
            return [record_cls.from_dict(v) for v in values]

        extensions_used = data.get("extensionsUsed")
        if extensions_used is not None and not isinstance(extensions_used, list):
            raise ValueError("glTF property 'extensionsUsed' must be an array")

        return cls(
            materials=_records("materials", Material),
            textures=_records("textures", Texture),
            images=_records("images", Image),
            extensions_used=list(extensions_used) if extensions_used is not None else None,
            extra=_split(data, cls._KEYS),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.extra)
        if self.extensions_used is not None:
            out["extensionsUsed"] = list(self.extensions_used)
        if self.materials is not None:
            out["materials"] = [m.to_dict() for m in self.materials]
        if self.textures is not None:
            out["textures"] = [t.to_dict() for t in self.textures]
        if self.images is not None:
            out["images"] = [i.to_dict() for i in self.images]
        return out
