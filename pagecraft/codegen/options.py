"""Options records accepted by the generation and export operations."""

from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import Field

from pagecraft.tree import GlobalCustomCode
from pagecraft.tree.models import TreeModel

Platform = Literal["vercel", "netlify", "static"]


class GenerationOptions(TreeModel):
    """Inputs of a pure generation call besides the tree itself."""

    include_theme: bool = Field(False, alias="includeTheme")
    theme_variables: Optional[Dict[str, str]] = Field(None, alias="themeVariables")
    global_custom_code: Optional[GlobalCustomCode] = Field(None, alias="globalCustomCode")


class ExportOptions(GenerationOptions):
    """Generation options plus archive scaffolding settings."""

    include_config: bool = Field(False, alias="includeConfig")
    platform: Optional[Platform] = None
