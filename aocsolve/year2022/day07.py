"""No space left on device: rebuild a directory tree from a terminal session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from aocsolve.toolbox import to_int

SMALL_LIMIT = 100000
CAPACITY = 70000000
UPDATE_SIZE = 30000000


@dataclass(eq=False)
class Node:
    """A file or directory; a directory's size is the total of everything below it."""

    name: str
    is_dir: bool
    size: int = 0
    parent: Optional[Node] = field(default=None, repr=False)
    children: dict[str, Node] = field(default_factory=dict, repr=False)


def _directories(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_dir:
            yield node
            stack.extend(node.children.values())


def _require_cwd(cwd: Optional[Node], line: str) -> Node:
    if cwd is None:
        raise ValueError(f"no current directory for: {line!r}")
    return cwd


def build_tree(lines: Sequence[str]) -> Node:
    """Replay ``cd``/``ls`` output and return the root directory."""
    root: Optional[Node] = None
    cwd: Optional[Node] = None
    for line in lines:
        parts = line.split(" ")
        if parts[0] == "$":
            if len(parts) > 1 and parts[1] == "ls":
                continue
            if len(parts) > 2 and parts[1] == "cd":
                target = parts[2]
                if target == "/":
                    if root is None:
                        root = Node("/", is_dir=True)
                    cwd = root
                    continue
                current = _require_cwd(cwd, line)
                if target == "..":
                    if current.parent is None:
                        raise ValueError("cannot move above the root directory")
                    cwd = current.parent
                    continue
                child = current.children.get(target)
                if child is None or not child.is_dir:
                    raise ValueError(f"directory does not exist: {target!r}")
                cwd = child
                continue
            raise ValueError(f"unknown command: {line!r}")

        if len(parts) < 2:
            raise ValueError(f"malformed listing entry: {line!r}")
        current = _require_cwd(cwd, line)
        if parts[0] == "dir":
            current.children.setdefault(parts[1], Node(parts[1], is_dir=True, parent=current))
            continue

        size = to_int(parts[0])
        current.children[parts[1]] = Node(parts[1], is_dir=False, size=size, parent=current)
        ancestor: Optional[Node] = current
        while ancestor is not None:
            ancestor.size += size
            ancestor = ancestor.parent

    if root is None:
        raise ValueError("session never enters the root directory")
    return root


def part_one(lines: Sequence[str]) -> int:
    root = build_tree(lines)
    return sum(d.size for d in _directories(root) if d.size <= SMALL_LIMIT)


def part_two(lines: Sequence[str]) -> int:
    root = build_tree(lines)
    unused = CAPACITY - root.size
    candidates = [
        d.size for d in _directories(root) if d is not root and unused + d.size >= UPDATE_SIZE
    ]
    return min([CAPACITY, *candidates])


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))