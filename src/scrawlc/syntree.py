"""Parse tree container handed from the scanner to the parser."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from scrawlc.tokens import Token


@dataclass(frozen=True, slots=True)
class Node:
    """A tree node anchored on the token that introduced it."""

    token: Token
    children: tuple[Node, ...] = ()


@dataclass(slots=True)
class SynTree:
    """Root of a parsed program; starts empty."""

    nodes: list[Node] = field(default_factory=list)

    def append(self, node: Node) -> None:
        self.nodes.append(node)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)
