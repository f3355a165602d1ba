"""
Wrapper around the external ``gltf_unlit_generator`` binary.

The binary bakes one unlit texture per material and prints a JSON array on
stdout: one entry per material, the written image path or null.
"""

import json
import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_GENERATOR = "gltf_unlit_generator"


def build_generator_command(
    binary: str,
    gltf_path: Path,
    output_dir: Optional[Path] = None,
    lighten: Optional[float] = None,
) -> List[str]:
    """Build the generator command line."""
    cmd = [binary, str(gltf_path)]
    if output_dir is not None:
        cmd += ["-o", str(output_dir)]
    if lighten is not None:
        cmd += ["-l", str(lighten)]
    return cmd


def parse_generator_output(stdout: str) -> List[Optional[str]]:
    """
    Parse the generator's stdout into a list of texture paths.

    Raises:
        ValueError: If stdout is not a JSON array of strings and nulls.
    """
    text = stdout.strip()
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Generator output is not valid JSON: {text[:200]!r}") from exc

    if not isinstance(parsed, list):
        raise ValueError(f"Generator output must be a JSON array, got {type(parsed).__name__}")
    for i, entry in enumerate(parsed):
        if entry is not None and not isinstance(entry, str):
            raise ValueError(f"Generator output entry {i} is neither a path nor null: {entry!r}")
    return parsed


class UnlitTextureGenerator:
    """Runs the external generator binary synchronously, without timeout or retry."""

    def __init__(self, binary: str = DEFAULT_GENERATOR):
        self.binary = binary

    def is_available(self) -> bool:
        """Check if the generator binary can be found on PATH."""
        return shutil.which(self.binary) is not None

    def invoke(
        self,
        gltf_path: Path,
        output_dir: Optional[Path] = None,
        lighten: Optional[float] = None,
    ) -> List[Optional[str]]:
        """
        Run the generator on ``gltf_path`` and return its parsed output.

        Args:
            gltf_path: glTF file to bake unlit textures for.
            output_dir: Directory the generator writes images to.
            lighten: Lighten scalar (0-1), passed through untouched.

        Returns:
            One entry per material: generated image path or None.

        Raises:
            subprocess.CalledProcessError: If the generator exits non-zero.
            ValueError: If its output cannot be parsed.
        """
        cmd = build_generator_command(self.binary, gltf_path, output_dir, lighten)
        logger.info("[cmd] %s", " ".join(cmd))

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as e:
            logger.error(f"Generator failed with exit code {e.returncode}: {' '.join(cmd)}")
            logger.error(f"STDOUT: {e.stdout}")
            logger.error(f"STDERR: {e.stderr}")
            raise

        if result.stderr:
            logger.debug(f"Generator stderr: {result.stderr.strip()}")

        try:
            return parse_generator_output(result.stdout)
        except ValueError:
            logger.error(f"STDOUT: {result.stdout}")
            logger.error(f"STDERR: {result.stderr}")
            raise
