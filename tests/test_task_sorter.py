import pytest

from campuspaths.domain.errors import NodeNotFoundError
from campuspaths.domain.models import Dependency, Task
from campuspaths.graph.topological import CycleDetected, Ordered
from campuspaths.services import TaskSorter

# Example from the Wikipedia article on topological sort.
t2 = Task("2", "two", "A")
t3 = Task("3", "three", "A")
t5 = Task("5", "five", "B")
t7 = Task("7", "seven", "B")
t8 = Task("8", "eight", "B")
t9 = Task("9", "nine", "A")
t10 = Task("10", "ten", "A")
t11 = Task("11", "eleven", "A")
ALL_TASKS = [t2, t3, t5, t7, t8, t9, t10, t11]

dep_11_2 = Dependency(t11, t2)
dep_11_9 = Dependency(t11, t9)
dep_11_10 = Dependency(t11, t10)
dep_5_11 = Dependency(t5, t11)
dep_7_11 = Dependency(t7, t11)
dep_7_8 = Dependency(t7, t8)
dep_8_9 = Dependency(t8, t9)
dep_3_8 = Dependency(t3, t8)
dep_3_10 = Dependency(t3, t10)
ALL_DEPENDENCIES = [
    dep_11_2,
    dep_11_9,
    dep_11_10,
    dep_5_11,
    dep_7_11,
    dep_7_8,
    dep_8_9,
    dep_3_8,
    dep_3_10,
]


@pytest.fixture
def sorter() -> TaskSorter:
    return TaskSorter()


def add_all(sorter: TaskSorter) -> None:
    for task in ALL_TASKS:
        sorter.add_task(task)
    for dependency in ALL_DEPENDENCIES:
        sorter.add_dependency(dependency)


def test_new_sorter_has_no_tasks(sorter):
    assert sorter.tasks() == frozenset()


def test_adding_tasks_is_idempotent(sorter):
    sorter.add_task(t2)
    sorter.add_task(t3)
    sorter.add_task(t3)

    assert sorter.tasks() == {t2, t3}


def test_outgoing_dependencies(sorter):
    add_all(sorter)

    assert sorter.outgoing_dependencies(t2) == frozenset()
    assert sorter.outgoing_dependencies(t3) == {dep_3_8, dep_3_10}
    assert sorter.outgoing_dependencies(t7) == {dep_7_11, dep_7_8}
    assert sorter.outgoing_dependencies(t11) == {dep_11_2, dep_11_9, dep_11_10}


def test_adding_dependency_twice_is_a_no_op(sorter):
    add_all(sorter)
    sorter.add_dependency(Dependency(t3, t8))

    assert sorter.outgoing_dependencies(t3) == {dep_3_8, dep_3_10}


def test_dependency_on_unknown_task_raises(sorter):
    sorter.add_task(t2)

    with pytest.raises(NodeNotFoundError):
        sorter.add_dependency(Dependency(t2, t3))


def test_outgoing_dependencies_of_unknown_task_raises(sorter):
    with pytest.raises(NodeNotFoundError):
        sorter.outgoing_dependencies(t2)


def test_sort_tasks_step_by_step(sorter):
    assert sorter.sort_tasks() == Ordered(())

    sorter.add_task(t2)
    assert list(sorter.sort_tasks()) == [t2]

    sorter.add_task(t11)
    sorter.add_dependency(dep_11_2)
    assert list(sorter.sort_tasks()) == [t11, t2]

    sorter.add_task(t5)
    sorter.add_dependency(dep_5_11)
    assert list(sorter.sort_tasks()) == [t5, t11, t2]

    sorter.add_task(t7)
    sorter.add_dependency(dep_7_11)
    assert list(sorter.sort_tasks()) == [t5, t7, t11, t2]

    # Names compare as text, so "10" sorts before "3".
    for task in ALL_TASKS:
        sorter.add_task(task)
    assert list(sorter.sort_tasks()) == [t10, t3, t5, t7, t11, t2, t8, t9]

    for dependency in ALL_DEPENDENCIES:
        sorter.add_dependency(dependency)
    assert list(sorter.sort_tasks()) == [t3, t5, t7, t11, t10, t2, t8, t9]


def test_cycle_cannot_be_sorted(sorter):
    add_all(sorter)
    sorter.add_dependency(Dependency(t9, t7))

    result = sorter.sort_tasks()

    assert isinstance(result, CycleDetected)
    assert result.cycle == (t9, t7, t8, t9)


def test_task_and_dependency_text():
    assert str(t2) == 'Task "2":\nDescription: two\nTeam: A'
    assert str(dep_11_2) == "Dependency: 11 -> 2"
