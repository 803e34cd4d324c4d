"""A shader together with named properties for it."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from softy.shader import Shader


class Material:
    """Binds a shader to the property values it reads."""

    def __init__(self, shader: Shader) -> None:
        self._shader = shader
        self._properties: dict[str, Any] = {}

    @property
    def shader(self) -> Shader:
        return self._shader

    @property
    def properties(self) -> Mapping[str, Any]:
        """Read-only live view of the properties."""
        return MappingProxyType(self._properties)

    def set_property(self, name: str, value: Any) -> None:
        self._properties[name] = value