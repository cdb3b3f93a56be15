# src/texmeta/rendering/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class RenderConfig(BaseModel):
    """Knobs for citation and record rendering.

    Defaults reproduce the standard output; a YAML file may override any
    of them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Plain-text abstracts longer than `description_limit` bytes are cut to
    # `description_keep` bytes and suffixed with `ellipsis`
    description_limit: int = Field(default=143, ge=0)
    description_keep: int = Field(default=140, ge=0)
    ellipsis: str = "..."

    missing_year: str = "s.d."
    # More surnames than this collapse to "<first>, et al."
    et_al_threshold: int = Field(default=3, ge=1)
    et_al: str = "et al."
    author_separator: str = Field(default=" AND ", min_length=1)
    surname_joiner: str = "; "

    abstract_label: str = "**Resumo:** "
    keywords_label: str = "**Palavras-chave:** "

    @model_validator(mode="after")
    def _check_description_bounds(self) -> "RenderConfig":
        if self.description_keep > self.description_limit:
            raise ValueError("description_keep must be <= description_limit")
        return self


def load_render_config(path: str | Path) -> RenderConfig:
    """Read a RenderConfig from YAML.

    Raises:
        ValueError: If the file is not valid YAML or not a mapping.
        pydantic.ValidationError: If an option is unknown or out of range.
    """
    logger.info("Loading render config from: %s", path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in render config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Render config {path} must be a mapping, got {type(data).__name__}"
        )
    return RenderConfig(**data)
