"""
Randomized Kruskal's algorithm.

Every cell starts in its own set. Edges between adjacent cells are shuffled
and processed one by one; an edge joining two different sets is carved and the
sets are merged. Produces mazes with many short dead ends.

Edges are collected before carving starts, so each one is checked against the
current neighbor relation before being carved (a zeta diagonal can be blocked
by a passage carved after it was collected).
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze

from .base import MazeGenerator


class KruskalGenerator(MazeGenerator):
    name = "Kruskal"

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        cells = maze.cell_list()
        index = {cell: i for i, cell in enumerate(cells)}
        edges = []
        for i, cell in enumerate(cells):
            for neighbor in cell.neighbors():
                j = index[neighbor]
                if i < j:
                    edges.append((i, j))
        rng.shuffle(edges)

        parents = list(range(len(cells)))

        def find(i: int) -> int:
            while parents[i] != i:
                parents[i] = parents[parents[i]]
                i = parents[i]
            return i

        while edges:
            i, j = edges.pop()
            root_i, root_j = find(i), find(j)
            if root_i == root_j:
                continue
            cell, other = cells[i], cells[j]
            if other not in cell.neighbors():
                continue
            cell.connect_with(other)
            parents[root_j] = root_i
