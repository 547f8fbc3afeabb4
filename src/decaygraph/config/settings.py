from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Graph construction
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how edge lists are loaded into the graph.
    """

    # Emit the rendered graph on the "decaygraph.build" logger after
    # every build.
    log_build: bool = True


# ---------------------------------------------------------------------
# Expiration queries
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class QueryConfig:
    """
    Controls validation and reporting of packet-decay queries.
    """

    min_expiration: int = 1
    report_template: str = (
        "Can't reach {count} nodes starting at {start} "
        "with expiration of {expiration}"
    )

    def format_report(self, *, count: int, start: str, expiration: int) -> str:
        return self.report_template.format(
            count=count,
            start=start,
            expiration=expiration,
        )


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class DecayGraphConfig:
    """
    Root configuration object for decaygraph.

    Constructed explicitly by the caller and passed down; there is no
    module-level configuration state.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
