"""Command-line entry points.

``campuspaths-tasks`` is an interactive console for the task sorter.
Tasks and dependencies are entered one command per line; underscores in
names, descriptions and teams stand for spaces.

``campuspaths-route <start> <end>`` prints the shortest walking route
between two buildings given by their short names.
"""

from __future__ import annotations

import sys
from typing import Dict, Iterable, List, Optional, TextIO

from .config import configure_logging
from .container import Container
from .domain.errors import CampusPathsError, UnknownIdentifierError
from .domain.models import Dependency, Task
from .graph.topological import CycleDetected

USAGE = """Usage:
To add a task enter: TASK task_name task_description task_team
To add a dependency enter: DEP first_task_name second_task_name
To sort the tasks enter: SORT
To get details on a certain task enter: GET task_name
To get dependencies with a certain prerequisite enter: GET_DEP task_name
To clear all tasks and dependencies enter: CLEAR
(Make sure all whitespace in names, descriptions or teams are replaced by underscores.)
To exit enter: exit"""


def _unescape(word: str) -> str:
    return word.replace("_", " ")


def run(lines: Iterable[str], out: TextIO, container: Optional[Container] = None) -> None:
    """Run the console over ``lines`` until ``exit`` or end of input."""
    tasks: Dict[str, Task] = {}
    container = container or Container()
    sorter = container.task_sorter()

    def say(text: str) -> None:
        out.write(text + "\n")

    say("-- TaskSorter --")
    say(USAGE)
    say("Please enter a command.")

    for raw_line in lines:
        line = raw_line.strip()
        if line == "exit" or line == "EXIT":
            break

        command, *args = line.split() or [""]

        if command == "TASK" and len(args) == 3:
            name, description, team = (_unescape(arg) for arg in args)
            if name in tasks:
                say("A task with the same name was already added!")
            else:
                task = Task(name, description, team)
                tasks[name] = task
                sorter.add_task(task)
                say("Task added successfully.")
        elif command == "DEP" and len(args) == 2:
            before, after = (_unescape(arg) for arg in args)
            if before in tasks and after in tasks:
                sorter.add_dependency(Dependency(tasks[before], tasks[after]))
                say("Dependency added successfully.")
            else:
                say("Tasks haven't been added yet!")
        elif command == "SORT" and not args:
            result = sorter.sort_tasks()
            if isinstance(result, CycleDetected):
                say("Cycle in dependencies, cannot be sorted!")
            else:
                for task in result:
                    say(str(task))
        elif command == "GET" and len(args) == 1:
            name = _unescape(args[0])
            if name in tasks:
                say(str(tasks[name]))
            else:
                say(f"Task {name} not added yet!")
        elif command == "GET_DEP" and len(args) == 1:
            name = _unescape(args[0])
            if name in tasks:
                dependencies = sorter.outgoing_dependencies(tasks[name])
                for dependency in sorted(dependencies, key=lambda dep: dep.after.name):
                    say(str(dependency))
            else:
                say(f"Task {name} not added yet!")
        elif command == "CLEAR" and not args:
            sorter = container.task_sorter()
            tasks.clear()
            say("TaskSorter cleared successfully.")
        else:
            say("Unknown command!")
            say(USAGE)

        say("Please enter a command.")

    say("Closing...")


def main() -> int:
    """Entry point of the ``campuspaths-tasks`` console script."""
    configure_logging()
    run(sys.stdin, sys.stdout)
    return 0


def route(start: str, end: str, out: TextIO, container: Optional[Container] = None) -> int:
    """Print the route between two buildings and return an exit status.

    Every unknown short name is reported as ``unknown: <name>`` and the
    status is 1.
    """
    container = container or Container()
    try:
        text = container.campus_map().describe_route(start, end)
    except UnknownIdentifierError as e:
        for name in e.names:
            out.write(f"unknown: {name}\n")
        return 1
    out.write(text + "\n")
    return 0


def route_main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``campuspaths-route`` console script."""
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        sys.stderr.write("Usage: campuspaths-route <start> <end>\n")
        return 2
    try:
        return route(args[0], args[1], sys.stdout)
    except CampusPathsError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
