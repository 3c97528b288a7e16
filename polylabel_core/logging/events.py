"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the pole search and its configuration layer.

Event Naming Convention:
    <component>.<action>

    component: search, config, error
    action: started, best_updated, completed, degenerate, truncated, loaded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.probes
    | filter event = "search.completed"
    | stats avg(metadata.probes) by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - search.*: Pole of inaccessibility search lifecycle
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Search Events ==========
    SEARCH_STARTED = "search.started"
    """Search seeded (bounding box, grid size, heuristic candidates)."""

    SEARCH_BEST_UPDATED = "search.best_updated"
    """A popped cell improved on the best known distance."""

    SEARCH_COMPLETED = "search.completed"
    """Frontier exhausted, result available."""

    SEARCH_DEGENERATE = "search.degenerate"
    """Zero-area bounding box or polygon; result is a heuristic fallback."""

    SEARCH_TRUNCATED = "search.truncated"
    """Probe cap reached before the frontier was exhausted."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Label job configuration parsed from YAML."""

    # ========== Error Events ==========
    INVALID_POLYGON_ERROR = "error.invalid_polygon"
    """Polygon rejected by validation."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""


SEARCH_EVENTS = {
    LogEvent.SEARCH_STARTED,
    LogEvent.SEARCH_BEST_UPDATED,
    LogEvent.SEARCH_COMPLETED,
    LogEvent.SEARCH_DEGENERATE,
    LogEvent.SEARCH_TRUNCATED,
}

ERROR_EVENTS = {
    LogEvent.INVALID_POLYGON_ERROR,
    LogEvent.CONFIG_ERROR,
}
