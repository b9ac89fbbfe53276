"""Brain-logo graph: adjacency from SVG geometry and a random walk over it.

The logo is drawn as soma ellipses (``<g transform="matrix(...)">`` inside a
group whose id starts with ``somas``) joined by straight strokes (``<path>``
inside a group whose id starts with ``striche``). Each stroke connects the
somas nearest to its two endpoints.
"""
from __future__ import annotations

import random
import re
from typing import List, Optional, Sequence, Tuple
from xml.etree import ElementTree

# ellipse centre in the soma symbol's local coordinates
SOMA_CENTER = (460.739, 334.883)

MATRIX_PATTERN = re.compile(r"matrix\(([^)]+)\)")
LINE_PATTERN = re.compile(
    r"M\s*([\d.]+)[\s,]+([\d.]+)\s*L\s*([\d.]+)[\s,]+([\d.]+)"
)

Point = Tuple[float, float]
Adjacency = List[List[int]]


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find_group(root: ElementTree.Element, prefix: str) -> Optional[ElementTree.Element]:
    for element in root.iter():
        if _local_name(element.tag) == "g" and (element.get("id") or "").startswith(prefix):
            return element
    return None


def soma_positions(group: ElementTree.Element) -> List[Point]:
    positions: List[Point] = []
    cx, cy = SOMA_CENTER
    for element in group.iter():
        if element is group or _local_name(element.tag) != "g":
            continue
        match = MATRIX_PATTERN.search(element.get("transform") or "")
        if not match:
            continue
        values = [float(v) for v in re.split(r"[\s,]+", match.group(1).strip())]
        if len(values) != 6:
            continue
        a, _b, _c, d, e, f = values
        positions.append((a * cx + e, d * cy + f))
    return positions


def stroke_endpoints(group: ElementTree.Element) -> List[Tuple[Point, Point]]:
    endpoints: List[Tuple[Point, Point]] = []
    for element in group.iter():
        if _local_name(element.tag) != "path":
            continue
        match = LINE_PATTERN.search(element.get("d") or "")
        if match:
            x1, y1, x2, y2 = (float(v) for v in match.groups())
            endpoints.append(((x1, y1), (x2, y2)))
    return endpoints


def nearest(point: Point, positions: Sequence[Point]) -> int:
    """Index of the position closest to ``point``, or -1 when there are none."""
    best, best_dist = -1, float("inf")
    for index, (x, y) in enumerate(positions):
        dist = (point[0] - x) ** 2 + (point[1] - y) ** 2
        if dist < best_dist:
            best, best_dist = index, dist
    return best


def build_adjacency(positions: Sequence[Point], strokes: Sequence[Tuple[Point, Point]]) -> Adjacency:
    size = len(positions)
    matrix = [[0] * size for _ in range(size)]
    for start, end in strokes:
        a, b = nearest(start, positions), nearest(end, positions)
        if a != -1 and b != -1 and a != b:
            matrix[a][b] = matrix[b][a] = 1
    return matrix


def extract_graph(svg_text: str) -> Adjacency:
    """Parse SVG markup and return the symmetric 0/1 soma adjacency matrix."""
    root = ElementTree.fromstring(svg_text)
    somas = _find_group(root, "somas")
    strokes = _find_group(root, "striche")
    if somas is None or strokes is None:
        return []
    return build_adjacency(soma_positions(somas), stroke_endpoints(strokes))


def neighbors(adjacency: Adjacency, node: int) -> List[int]:
    if node < 0 or node >= len(adjacency):
        return []
    return [index for index, linked in enumerate(adjacency[node]) if linked]


class NeuronWalk:
    """Random walk that avoids stepping straight back to the previous node."""

    def __init__(self, adjacency: Adjacency, rng: Optional[random.Random] = None):
        if not adjacency:
            raise ValueError("cannot walk an empty graph")
        self.adjacency = adjacency
        self.rng = rng or random.Random()
        self.current: Optional[int] = None
        self.previous: Optional[int] = None

    def step(self) -> int:
        if self.current is None:
            nxt = self.rng.randrange(len(self.adjacency))
        else:
            linked = neighbors(self.adjacency, self.current)
            forward = [node for node in linked if node != self.previous]
            if forward:
                nxt = self.rng.choice(forward)
            elif linked:
                nxt = self.rng.choice(linked)
            else:
                nxt = self.current
        self.previous, self.current = self.current, nxt
        return nxt

    def walk(self, steps: int) -> List[int]:
        return [self.step() for _ in range(steps)]
