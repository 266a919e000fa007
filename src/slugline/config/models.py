"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, slugline.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from slugline.domain.resources import PROJECT_PREFIX, WORKSHEET_PREFIX, NamePrefixes

# --- slugline.toml sections ---


class NamesConfig(BaseModel):
    """[names] section — resource-name prefixes."""

    model_config = {"frozen": True}

    project_prefix: str = PROJECT_PREFIX
    worksheet_prefix: str = WORKSHEET_PREFIX

    def to_prefixes(self) -> NamePrefixes:
        return NamePrefixes(
            project_prefix=self.project_prefix,
            worksheet_prefix=self.worksheet_prefix,
        )


class NormalizeConfig(BaseModel):
    """[normalize] section — options for the default name normalizer."""

    model_config = {"frozen": True}

    max_length: int = Field(default=0, ge=0)
    lowercase: bool = True
