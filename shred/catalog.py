"""Fixed search queries for researching the SHRED program.

Each focus maps to an ordered list of literal queries. The order matters:
depth selection takes a prefix of the ``general`` list.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from shred.models import QueryFocus, SearchDepth

logger = logging.getLogger(__name__)

#: Focus → ordered search queries.
QUERY_CATALOG: dict[QueryFocus, tuple[str, ...]] = {
    QueryFocus.GENERAL: (
        "Canadian SHRED tax credit 2024 requirements",
        "SHRED scientific research experimental development Canada",
        "SHRED tax credit eligibility criteria Canada",
    ),
    QueryFocus.ELIGIBILITY_CRITERIA: (
        "SHRED tax credit eligibility criteria 2024",
        "what activities qualify for SHRED tax credit",
        "SHRED qualifying activities Canada CRA",
    ),
    QueryFocus.QUALIFYING_ACTIVITIES: (
        "SHRED qualifying R&D activities Canada",
        "experimental development SHRED tax credit",
        "scientific research SHRED eligibility",
    ),
    QueryFocus.DOCUMENTATION: (
        "SHRED tax credit documentation requirements",
        "SHRED claim documentation CRA",
        "SHRED tax credit supporting documents",
    ),
    QueryFocus.RECENT_CHANGES: (
        "SHRED tax credit changes 2024",
        "recent SHRED program updates Canada",
        "SHRED tax credit new requirements 2024",
    ),
}


def _coerce_focus(focus: Union[QueryFocus, str, None]) -> QueryFocus:
    if isinstance(focus, QueryFocus):
        return focus
    try:
        return QueryFocus(focus)
    except ValueError:
        return QueryFocus.GENERAL


def queries_for(focus: Union[QueryFocus, str, None] = QueryFocus.GENERAL) -> list[str]:
    """Return the ordered queries for *focus*.

    Unknown or missing focus values fall back to the ``general`` list.

    Examples:
        >>> queries_for("documentation")[0]
        'SHRED tax credit documentation requirements'
        >>> queries_for("nonsense") == queries_for("general")
        True
    """
    return list(QUERY_CATALOG[_coerce_focus(focus)])


def queries_for_depth(depth: SearchDepth) -> list[str]:
    """Return the prefix of the ``general`` queries that *depth* allows."""
    return queries_for(QueryFocus.GENERAL)[: depth.query_count]


def resolve_depth(depth: Optional[Union[SearchDepth, str]]) -> SearchDepth:
    """Map a caller-supplied depth to a ``SearchDepth``.

    ``None`` means ``comprehensive``. Any other unrecognised value runs the
    full ``detailed`` search rather than failing the request.
    """
    if depth is None:
        return SearchDepth.COMPREHENSIVE
    try:
        return SearchDepth(depth)
    except (ValueError, TypeError):
        logger.warning("Unknown search_depth=%r, using %s", depth, SearchDepth.DETAILED.value)
        return SearchDepth.DETAILED
