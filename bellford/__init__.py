"""bellford - Bellman-Ford shortest paths with negative-cycle detection."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_predecessor_forest,
    assert_relaxation_fixpoint,
    debug_context,
    is_debug_enabled,
    reset_debug_enabled,
    set_debug_enabled,
)

# Errors
from .errors import (
    BellfordError,
    CorruptResult,
    DistanceOverflowError,
    InvalidArgument,
)

# Graphs and shortest paths
from .graphs import (
    INFINITY,
    Distance,
    Edge,
    EngineConfig,
    EngineState,
    Graph,
    NegativeCycleDetected,
    ShortestPathEngine,
    ShortestPaths,
    UnreachableTarget,
    bellman_ford,
    path_weight,
    reconstruct_path,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Rendering
from .viz import (
    graph_summary,
    print_graph_summary,
    print_shortest_paths,
    shortest_paths_summary,
)

__all__ = [
    "__version__",
    # Graphs
    "Edge",
    "Graph",
    "Distance",
    "INFINITY",
    # Engine
    "EngineConfig",
    "EngineState",
    "ShortestPathEngine",
    "ShortestPaths",
    "NegativeCycleDetected",
    "bellman_ford",
    # Paths
    "UnreachableTarget",
    "reconstruct_path",
    "path_weight",
    # Errors
    "BellfordError",
    "InvalidArgument",
    "CorruptResult",
    "DistanceOverflowError",
    # Diagnostics
    "assert_relaxation_fixpoint",
    "assert_predecessor_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Rendering
    "graph_summary",
    "print_graph_summary",
    "shortest_paths_summary",
    "print_shortest_paths",
]
