"""Medical equipment allocation planned as a minimum spanning tree over facilities."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_DATA_FILE = "medical_equipment_allocation_data.txt"
SEPARATOR = "-" * 50

MENU = (
    "\nMedical Equipment Allocation System\n"
    "1. Add Transportation Route\n"
    "2. Optimize Equipment Allocation (Find MST)\n"
    "3. Display Optimized Allocation Plan\n"
    "4. Reset Data\n"
    "5. Display All Transportation Routes\n"
    "6. Save Data\n"
    "7. Display Stored Data\n"
    "8. Increase Number of Facilities\n"
    "9. Exit\n"
    "Enter your choice: "
)


@dataclass(frozen=True)
class Edge:
    """A transportation route between two facilities with its cost."""

    source: int
    destination: int
    weight: int


def format_edge(edge: Edge) -> str:
    """Render an edge the way reports and the data file show it."""
    return f"Facility {edge.source} - Facility {edge.destination} : Weight = {edge.weight}"


class _DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, x: int, y: int) -> None:
        root_x, root_y = self.find(x), self.find(y)
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1


class MedicalEquipmentAllocation:
    """A facility network whose routes are kept in a data file as they change."""

    def __init__(self, num_facilities: int, data_file: str | Path = DEFAULT_DATA_FILE) -> None:
        if num_facilities <= 0:
            raise ValueError("number of facilities must be a positive integer")
        self._num_facilities = num_facilities
        self._data_file = Path(data_file)
        self._edges: list[Edge] = []
        self._result: list[Edge] = []

    @property
    def num_facilities(self) -> int:
        return self._num_facilities

    @property
    def data_file(self) -> Path:
        return self._data_file

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def result(self) -> tuple[Edge, ...]:
        return tuple(self._result)

    def add_edge(self, source: int, destination: int, weight: int) -> Edge:
        """Add a route and append the new state to the data file."""
        edge = Edge(source, destination, weight)
        self._edges.append(edge)
        self.save(append=True)
        return edge

    def increase_facilities(self, additional: int) -> int:
        """Grow the network by a positive number of facilities; return the new total."""
        if additional <= 0:
            raise ValueError("additional facilities must be a positive integer")
        self._num_facilities += additional
        self.save(append=True)
        return self._num_facilities

    def optimize(self) -> tuple[Edge, ...]:
        """Compute the minimum spanning forest with Kruskal's algorithm."""
        for edge in self._edges:
            for node in (edge.source, edge.destination):
                if not 0 <= node < self._num_facilities:
                    raise ValueError(
                        f"facility {node} is outside the network of {self._num_facilities}"
                    )
        self._result.clear()
        self._edges.sort(key=lambda edge: edge.weight)
        sets = _DisjointSet(self._num_facilities)
        for edge in self._edges:
            x = sets.find(edge.source)
            y = sets.find(edge.destination)
            if x != y:
                self._result.append(edge)
                sets.union(x, y)
        self.save(append=True)
        return tuple(self._result)

    def reset(self) -> None:
        """Drop all routes and the plan, overwriting the data file."""
        self._edges.clear()
        self._result.clear()
        self.save()

    def save(self, append: bool = False) -> None:
        """Write the current state to the data file, appending or overwriting."""
        with self._data_file.open("a" if append else "w", encoding="utf-8") as handle:
            handle.writelines(line + "\n" for line in self._report())

    def stored_data(self) -> str:
        """Return everything written to the data file so far."""
        return self._data_file.read_text(encoding="utf-8")

    def _report(self) -> Iterator[str]:
        yield f"Current Number of Facilities: {self._num_facilities}"
        yield "All Transportation Routes:"
        yield from map(format_edge, self._edges)
        yield "Optimized Allocation Plan (MST):"
        yield from map(format_edge, self._result)
        yield SEPARATOR


class _EndOfInput(Exception):
    pass


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _read_int(tokens: Iterator[str], retry: str) -> int:
    while True:
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return int(token)
        except ValueError:
            _prompt(retry)


def _saved(allocation: MedicalEquipmentAllocation, action) -> bool:
    try:
        action()
    except OSError:
        print("Error opening file for writing!", file=sys.stderr)
        return False
    print(f"Data saved to {allocation.data_file}")
    return True


def _print_edges(edges: Iterable[Edge]) -> None:
    for edge in edges:
        print(format_edge(edge))


def _run_choice(allocation: MedicalEquipmentAllocation, choice: int, tokens: Iterator[str]) -> None:
    if choice == 1:
        _prompt("Enter source facility, destination facility, and transportation cost: ")
        retry = "Invalid input. Please enter integers for source, destination, and cost: "
        source, destination, weight = (_read_int(tokens, retry) for _ in range(3))
        _saved(allocation, lambda: allocation.add_edge(source, destination, weight))
        print("Route added successfully and marked as new data.")
    elif choice == 2:
        try:
            _saved(allocation, allocation.optimize)
        except ValueError as error:
            print(f"Optimization failed: {error}")
        else:
            print("Optimization completed.")
    elif choice == 3:
        if not allocation.result:
            print("No optimized allocation plan available. Please run the optimization first.")
        else:
            print("Minimum Spanning Tree (Optimized Allocation Plan):")
            _print_edges(allocation.result)
    elif choice == 4:
        _saved(allocation, allocation.reset)
        print("Data reset successfully.")
    elif choice == 5:
        if not allocation.edges:
            print("No transportation routes available. Please add some routes first.")
        else:
            print("All Transportation Routes:")
            _print_edges(allocation.edges)
    elif choice == 6:
        _saved(allocation, allocation.save)
    elif choice == 7:
        try:
            print(allocation.stored_data(), end="")
        except OSError:
            print("Error opening file for reading!", file=sys.stderr)
    elif choice == 8:
        _prompt("Enter number of additional facilities to add: ")
        additional = _read_int(tokens, "Invalid input. Please enter a positive integer: ")
        try:
            _saved(allocation, lambda: allocation.increase_facilities(additional))
        except ValueError:
            print("Invalid number of additional facilities. Please enter a positive integer.")
        else:
            print(f"Number of facilities increased. New total: {allocation.num_facilities}")
    elif choice == 9:
        print("Exiting...")
    else:
        print("Invalid choice. Please try again.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive allocation menu on standard input."""
    parser = argparse.ArgumentParser(description="Medical equipment allocation planner.")
    parser.add_argument("--data-file", default=DEFAULT_DATA_FILE, help="where the data is kept")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter the number of healthcare facilities: ")
        retry = "Invalid input. Please enter a positive integer for the number of facilities: "
        count = _read_int(tokens, retry)
        while count <= 0:
            _prompt(retry)
            count = _read_int(tokens, retry)
        allocation = MedicalEquipmentAllocation(count, args.data_file)
        choice = 0
        while choice != 9:
            _prompt(MENU)
            choice = _read_int(tokens, "Invalid input. Please enter an integer between 1 and 9: ")
            _run_choice(allocation, choice, tokens)
    except _EndOfInput:
        pass
    return 0