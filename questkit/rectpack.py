"""Skyline bottom-left rectangle packing for texture atlases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

MAX_VALUE = 0x7FFFFFFF
"""Largest supported coordinate; also marks a rectangle that did not fit."""

_SENTINEL_Y = 1 << 30


class Heuristic(IntEnum):
    """Placement heuristic used when choosing a skyline position."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_BF_SORT_HEIGHT = 1
    DEFAULT = 0


@dataclass
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in."""

    w: int
    h: int
    id: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False


@dataclass(slots=True)
class _Node:
    x: int
    y: int


@dataclass
class _FindResult:
    index: Optional[int]
    x: int
    y: int


class RectPacker:
    """Packs rectangles into a fixed-size target using a skyline."""

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        if width < 0 or height < 0:
            raise ValueError("target dimensions must not be negative")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.DEFAULT
        self.align = 1
        self.set_allow_out_of_mem(False)
        # The skyline always ends with a sentinel node at x == width.
        self._active: list[_Node] = [_Node(0, 0), _Node(width, _SENTINEL_Y)]

    def set_allow_out_of_mem(self, allow: bool) -> None:
        """Choose between exact widths (may run out of nodes) and quantized widths."""
        if allow:
            self.align = 1
        else:
            self.align = max(1, (self.width + self.num_nodes - 1) // self.num_nodes)

    def set_heuristic(self, heuristic: int) -> None:
        """Select the placement heuristic; raises ValueError for unknown values."""
        self.heuristic = Heuristic(heuristic)

    @property
    def _free_nodes(self) -> int:
        return self.num_nodes + 2 - len(self._active)

    def _find_min_y(self, first: int, x0: int, width: int) -> tuple[int, int]:
        active = self._active
        x1 = x0 + width
        min_y = 0
        waste_area = 0
        visited_width = 0
        i = first
        while active[i].x < x1:
            node, nxt = active[i], active[i + 1]
            if node.y > min_y:
                waste_area += visited_width * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited_width += nxt.x - x0
                else:
                    visited_width += nxt.x - node.x
            else:
                under_width = nxt.x - node.x
                if under_width + visited_width > width:
                    under_width = width - visited_width
                waste_area += under_width * (min_y - node.y)
                visited_width += under_width
            i += 1
        return min_y, waste_area

    def _find_best_pos(self, width: int, height: int) -> _FindResult:
        width = width + self.align - 1
        width -= width % self.align

        if width > self.width or height > self.height:
            return _FindResult(None, 0, 0)

        active = self._active
        best: Optional[int] = None
        best_y = _SENTINEL_Y
        best_waste = _SENTINEL_Y

        i = 0
        while active[i].x + width <= self.width:
            y, waste = self._find_min_y(i, active[i].x, width)
            if self.heuristic == Heuristic.SKYLINE_BL_SORT_HEIGHT:
                if y < best_y:
                    best_y = y
                    best = i
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y = y
                    best_waste = waste
                    best = i
            i += 1

        best_x = 0 if best is None else active[best].x

        if self.heuristic == Heuristic.SKYLINE_BF_SORT_HEIGHT:
            tail = 0
            while active[tail].x < width:
                tail += 1
            node = 0
            for tail_node in active[tail:]:
                xpos = tail_node.x - width
                while active[node + 1].x <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = node

        return _FindResult(best, best_x, best_y)

    def _pack_rectangle(self, width: int, height: int) -> _FindResult:
        res = self._find_best_pos(width, height)
        if res.index is None or res.y + height > self.height or self._free_nodes == 0:
            return _FindResult(None, res.x, res.y)

        active = self._active
        new_node = _Node(res.x, res.y + height)
        if active[res.index].x < res.x:
            active.insert(res.index + 1, new_node)
            cur = res.index + 2
        else:
            active.insert(res.index, new_node)
            cur = res.index + 1

        right = res.x + width
        while cur + 1 < len(active) and active[cur + 1].x <= right:
            del active[cur]

        if active[cur].x < right:
            active[cur].x = right

        return res

    def pack(self, rects: Iterable[Rect]) -> bool:
        """Place each rectangle in place; return True if every one fitted."""
        rects = list(rects)
        ordered = sorted(rects, key=lambda r: (-r.h, -r.w))

        for rect in ordered:
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            found = self._pack_rectangle(rect.w, rect.h)
            if found.index is not None:
                rect.x, rect.y = found.x, found.y
            else:
                rect.x = rect.y = MAX_VALUE

        for rect in rects:
            rect.was_packed = not (rect.x == MAX_VALUE and rect.y == MAX_VALUE)
        return all(rect.was_packed for rect in rects)