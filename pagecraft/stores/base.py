"""Read-only provider interfaces consumed by the exporter."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from pagecraft.tree import GlobalCustomCode


@runtime_checkable
class ThemeProvider(Protocol):
    """Anything exposing the active theme as CSS custom properties."""

    @property
    def css_variables(self) -> Mapping[str, str]:
        ...


@runtime_checkable
class EditorStateProvider(Protocol):
    """Anything exposing the page-wide custom code bundle."""

    @property
    def global_custom_code(self) -> Optional[GlobalCustomCode]:
        ...
