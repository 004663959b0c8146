"""Editor state as seen by the exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pagecraft.tree import GlobalCustomCode


@dataclass
class EditorState:
    """Holds the page-wide custom code edited alongside the tree."""

    global_custom_code: GlobalCustomCode = field(default_factory=GlobalCustomCode)

    def update_global_code(
        self,
        *,
        css: Optional[str] = None,
        javascript: Optional[str] = None,
        head_html: Optional[str] = None,
    ) -> GlobalCustomCode:
        changes = {
            key: value
            for key, value in (("css", css), ("javascript", javascript), ("head_html", head_html))
            if value is not None
        }
        self.global_custom_code = self.global_custom_code.model_copy(update=changes)
        return self.global_custom_code
