"""Resource names — prefixed paths used by the entity lookup layer.

Examples: ``projects/shop-db``, ``worksheets/101``.  Prefixes are passed
in explicitly (from ``[names]`` config) rather than read from globals.
"""

from __future__ import annotations

from dataclasses import dataclass

PROJECT_PREFIX = "projects/"
WORKSHEET_PREFIX = "worksheets/"


@dataclass(frozen=True)
class NamePrefixes:
    """Resource-name prefixes for the entities that appear in slugs."""

    project_prefix: str = PROJECT_PREFIX
    worksheet_prefix: str = WORKSHEET_PREFIX


def resource_id(name: str, prefix: str) -> str:
    """Extract the id segment that follows *prefix* in a resource *name*.

    Returns ``""`` when *name* does not start with *prefix*.

    Examples:
        >>> resource_id("projects/shop-db", "projects/")
        'shop-db'
        >>> resource_id("projects/shop-db/worksheets/7", "projects/")
        'shop-db'
        >>> resource_id("instances/prod", "projects/")
        ''
    """
    if not name.startswith(prefix):
        return ""
    return name[len(prefix) :].split("/", 1)[0]
