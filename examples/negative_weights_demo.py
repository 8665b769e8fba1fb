"""Bellman-Ford example: shortest paths with negative weights.

Builds two small graphs: one with a negative edge but no negative cycle,
whose shortest-path table is printed, and one with a negative cycle, which
is reported instead of a table.
"""

from __future__ import annotations

import bellford as bf


def main() -> None:
    """Run Bellman-Ford on both example graphs and print the results."""
    # Negative edge 1 -> 2, no negative cycle; vertex 4 is isolated
    graph = bf.Graph.from_edges(
        5,
        [(0, 1, 4), (0, 2, 5), (1, 2, -3), (2, 3, 2), (1, 3, 6)],
    )
    bf.print_graph_summary(graph)

    result = bf.bellman_ford(graph, 0)
    bf.print_shortest_paths(result)

    path = bf.reconstruct_path(result, 0, 3)
    print(f"\nCost of path {path}: {bf.path_weight(graph, path)}")

    # 0 -> 1 -> 0 has total weight -2
    cyclic = bf.Graph.from_edges(2, [(0, 1, 1), (1, 0, -3)])
    print()
    bf.print_shortest_paths(bf.bellman_ford(cyclic, 0))


if __name__ == "__main__":
    main()
