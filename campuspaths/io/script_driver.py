"""Line-oriented script interpreter for exercising the graph and search.

Each script line is a command followed by whitespace-separated
arguments. Blank lines and lines starting with ``#`` are echoed as they
are. Supported commands:

    CreateGraph <graph>
    AddNode <graph> <node>
    AddEdge <graph> <parent> <child> <cost>
    ListNodes <graph>
    ListChildren <graph> <parent>
    FindPath <graph> <from> <to>

A failing command is reported in the output and the script goes on.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, TextIO

from ..domain.errors import ScriptCommandError
from ..graph.dijkstra import dijkstra
from ..graph.path import format_path
from ..graph.store import Graph


class PathfinderScriptDriver:
    """Runs pathfinder scripts against named string-node graphs."""

    def __init__(self, source: TextIO, output: TextIO) -> None:
        self._source = source
        self._output = output
        self._graphs: Dict[str, Graph[str, float]] = {}
        self._logger = logging.getLogger(__name__)
        self._commands: Dict[str, Callable[[List[str]], None]] = {
            "CreateGraph": self._create_graph,
            "AddNode": self._add_node,
            "AddEdge": self._add_edge,
            "ListNodes": self._list_nodes,
            "ListChildren": self._list_children,
            "FindPath": self._find_path,
        }

    def run(self) -> None:
        """Execute every line of the script."""
        for raw_line in self._source:
            line = raw_line.rstrip("\n")
            if not line.strip() or line.startswith("#"):
                self._print(line)
                continue

            command, *arguments = line.split()
            try:
                self._execute(command, arguments)
            except Exception as e:
                self._logger.debug("Script command failed", exc_info=True)
                self._print(f"Exception while running command: {line.strip()}: {e}")

    def _execute(self, command: str, arguments: List[str]) -> None:
        handler = self._commands.get(command)
        if handler is None:
            self._print(f"Unrecognized command: {command}")
            return
        handler(arguments)

    def _print(self, text: str) -> None:
        self._output.write(text + "\n")

    def _graph(self, name: str) -> Graph[str, float]:
        graph = self._graphs.get(name)
        if graph is None:
            raise ScriptCommandError(f"No graph named {name}")
        return graph

    @staticmethod
    def _expect(command: str, arguments: List[str], count: int) -> None:
        if len(arguments) != count:
            raise ScriptCommandError(
                f"Bad arguments to {command}: {arguments}",
                command=command,
            )

    def _create_graph(self, arguments: List[str]) -> None:
        self._expect("CreateGraph", arguments, 1)
        (name,) = arguments
        self._graphs[name] = Graph()
        self._print(f"created graph {name}")

    def _add_node(self, arguments: List[str]) -> None:
        self._expect("AddNode", arguments, 2)
        name, node = arguments
        self._graph(name).add_node(node)
        self._print(f"added node {node} to {name}")

    def _add_edge(self, arguments: List[str]) -> None:
        self._expect("AddEdge", arguments, 4)
        name, parent, child, label = arguments
        cost = float(label)
        self._graph(name).add_edge(parent, child, cost)
        self._print(f"added edge {cost:.3f} from {parent} to {child} in {name}")

    def _list_nodes(self, arguments: List[str]) -> None:
        self._expect("ListNodes", arguments, 1)
        (name,) = arguments
        nodes = sorted(self._graph(name).nodes())
        self._print(" ".join([f"{name} contains:", *nodes]))

    def _list_children(self, arguments: List[str]) -> None:
        self._expect("ListChildren", arguments, 2)
        name, parent = arguments
        edges = sorted(
            self._graph(name).children_of(parent),
            key=lambda edge: (edge.child, edge.label),
        )
        children = [f"{edge.child}({edge.label:.3f})" for edge in edges]
        self._print(" ".join([f"the children of {parent} in {name} are:", *children]))

    def _find_path(self, arguments: List[str]) -> None:
        self._expect("FindPath", arguments, 3)
        name, start, end = arguments
        graph = self._graph(name)

        unknown = [node for node in dict.fromkeys((start, end)) if node not in graph]
        if unknown:
            for node in unknown:
                self._print(f"unknown: {node}")
            return

        path = dijkstra(graph, start, end)
        self._print(f"path from {start} to {end}:")
        if path is None:
            self._print("no path found")
            return
        for line in format_path(path):
            self._print(line)
