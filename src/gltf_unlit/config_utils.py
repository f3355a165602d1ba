from dataclasses import dataclass
from pathlib import Path
from typing import Optional

try:
    import yaml  # type: ignore
except ImportError as exc:
    raise ImportError(
        "PyYAML is required to read the generator configuration. "
        "Install with `pip install pyyaml`."
    ) from exc

from .generator import DEFAULT_GENERATOR

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config/unlit.yml"


def check_lighten(value: Optional[float]) -> Optional[float]:
    """Validate the lighten scalar forwarded to the generator."""
    if value is None:
        return None
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"lighten must be between 0.0 and 1.0, got {value}")
    return value


@dataclass
class UnlitConfig:
    generator_binary: str = DEFAULT_GENERATOR
    lighten: Optional[float] = None
    indent: Optional[int] = None
    dedupe_extensions: bool = False


def load_config(config_path: Path = CONFIG_PATH) -> UnlitConfig:
    """Load generator/output settings, falling back to defaults if the file is missing."""
    config_path = Path(config_path)
    if not config_path.exists():
        return UnlitConfig()

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"{config_path} must contain a mapping at the top level.")

    generator_cfg = config.get("generator") or {}
    output_cfg = config.get("output") or {}

    indent = output_cfg.get("indent")
    return UnlitConfig(
        generator_binary=generator_cfg.get("binary") or DEFAULT_GENERATOR,
        lighten=check_lighten(generator_cfg.get("lighten")),
        indent=int(indent) if indent is not None else None,
        dedupe_extensions=bool(output_cfg.get("dedupe_extensions", False)),
    )
