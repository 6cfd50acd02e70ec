"""Load prompt templates from TOML files shipped with the package."""

from __future__ import annotations

from pathlib import Path
from string import Template
from typing import Any, Dict

import tomli as toml

PROMPTS_DIR = (Path(__file__).resolve().parent.parent / "prompts").resolve()


class PromptLoader:
    """Resolve, cache and render ``<name>_prompt.toml`` files.

    Templates use ``$placeholder`` substitution so literal JSON braces in the
    prompts need no escaping; a literal dollar sign is written ``$$``.
    """

    def __init__(self, base_dir: Path = PROMPTS_DIR) -> None:
        self.base: Path = Path(base_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def _path_for(self, prompt_name: str) -> Path:
        return self.base / f"{prompt_name}_prompt.toml"

    def load(self, prompt_name: str) -> Dict[str, Any]:
        """Read and parse the TOML file for a prompt, once."""
        if prompt_name not in self._cache:
            path = self._path_for(prompt_name)
            if not path.exists():
                raise FileNotFoundError(f"Prompt file not found: {path}")
            with path.open("rb") as f:
                self._cache[prompt_name] = toml.load(f)
        return self._cache[prompt_name]

    def get(self, prompt_name: str, key: str, **values: str) -> str:
        """Return one entry of a prompt file with ``values`` substituted."""
        data = self.load(prompt_name)
        if key not in data:
            raise KeyError(f"Prompt '{prompt_name}' has no '{key}' entry")
        return Template(str(data[key])).substitute(**values).strip()


prompt_loader = PromptLoader()
