"""Configuration loading: .seo-meta.toml, environment, and model detection."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from seo_meta_cli.core.errors import ConfigurationError
from seo_meta_cli.core.models import OutputFormat

CONFIG_FILENAME = ".seo-meta.toml"
DEFAULT_MODEL = "gemini/gemini-2.5-flash"

# (env var, litellm model) — first key present wins.
PROVIDER_DEFAULTS: list[tuple[str, str]] = [
    ("GEMINI_API_KEY", DEFAULT_MODEL),
    ("GOOGLE_API_KEY", DEFAULT_MODEL),
    ("OPENAI_API_KEY", "gpt-4o-mini"),
    ("ANTHROPIC_API_KEY", "anthropic/claude-3-5-haiku-latest"),
]


class GeneratorConfig(BaseModel):
    """Defaults for the generate command. CLI flags override these."""

    model: str | None = Field(default=None, description="litellm model identifier")
    timeout: float | None = Field(
        default=None, gt=0, description="Per-request timeout in seconds"
    )
    format: OutputFormat = Field(default=OutputFormat.table)
    verbose: bool = False


def detect_model() -> str:
    """Pick a model from whichever provider API key is set."""
    for env_var, model in PROVIDER_DEFAULTS:
        if os.environ.get(env_var):
            return model
    return DEFAULT_MODEL


def _find_config_file(start: Path | None = None) -> Path | None:
    candidates = [(start or Path.cwd()) / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME]
    for path in candidates:
        if path.is_file():
            return path
    return None


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load config from *path* (or the first .seo-meta.toml found).

    Environment variables SEO_META_MODEL and SEO_META_TIMEOUT override
    values from the file.
    """
    data: dict[str, object] = {}
    config_path = path or _find_config_file()
    if config_path is not None:
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    if model := os.environ.get("SEO_META_MODEL"):
        data["model"] = model
    if timeout := os.environ.get("SEO_META_TIMEOUT"):
        data["timeout"] = timeout

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        source = config_path or "environment"
        raise ConfigurationError(f"Invalid configuration in {source}: {e}") from e
