"""Top-level package for the campus paths project.

The package is built around a generic directed labeled graph and two
algorithms that run on it: a Dijkstra shortest-path search and a
topological sort with cycle detection. The remaining modules load campus
data into a graph, resolve building names for route queries and order
tasks by their dependencies.
"""
