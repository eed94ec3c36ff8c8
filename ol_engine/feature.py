# ============================================================================
# CLAUDE CONTEXT - NATIVE ENGINE FEATURE
# ============================================================================
# STATUS: Data model - vector feature
# PURPOSE: Attribute map plus geometry passed to style functions
# EXPORTS: Feature
# DEPENDENCIES: shapely
# ============================================================================
"""
Native engine feature.

A feature is an attribute map plus an optional shapely geometry. Style
functions receive the feature and read attributes through ``get``; compiled
filter predicates receive the read-only mapping from ``get_properties``.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from shapely.geometry.base import BaseGeometry

from exceptions import ContractViolationError


class Feature:
    """Vector feature with attributes and geometry."""

    def __init__(self, properties: Optional[Dict[str, Any]] = None,
                 geometry: Optional[BaseGeometry] = None, **kwargs):
        if geometry is not None and not isinstance(geometry, BaseGeometry):
            raise ContractViolationError(
                f"Feature geometry must be a shapely geometry, got {type(geometry).__name__}"
            )
        self._properties: Dict[str, Any] = dict(properties or {})
        self._properties.update(kwargs)
        self._geometry = geometry

    def get(self, key: str) -> Any:
        """Attribute value, or None when the feature has no such attribute."""
        return self._properties.get(key)

    def set(self, key: str, value: Any) -> None:
        self._properties[key] = value

    def get_properties(self) -> Mapping[str, Any]:
        """Read-only live view of the attribute map."""
        return MappingProxyType(self._properties)

    def get_geometry(self) -> Optional[BaseGeometry]:
        return self._geometry

    def set_geometry(self, geometry: Optional[BaseGeometry]) -> None:
        if geometry is not None and not isinstance(geometry, BaseGeometry):
            raise ContractViolationError(
                f"Feature geometry must be a shapely geometry, got {type(geometry).__name__}"
            )
        self._geometry = geometry

    def get_geometry_type(self) -> Optional[str]:
        return self._geometry.geom_type if self._geometry is not None else None

    def __repr__(self) -> str:
        return f"Feature(properties={self._properties!r}, geometry={self.get_geometry_type()!r})"
