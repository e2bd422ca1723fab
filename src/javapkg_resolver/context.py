from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from javapkg_tree_sitter import NodeKind


class ContextStack:
    """Kinds of the nodes enclosing the current traversal position.

    Frames are only pushed through enter(), which pops them again on every
    way out of the with-block, exceptions included.
    """

    def __init__(self):
        self._frames: List[NodeKind] = []

    @contextmanager
    def enter(self, kind: NodeKind) -> Iterator["ContextStack"]:
        self._frames.append(kind)
        try:
            yield self
        finally:
            self._frames.pop()

    def innermost(self, count: int) -> Tuple[NodeKind, ...]:
        """Up to count kinds, innermost first"""
        if count <= 0:
            return ()
        return tuple(reversed(self._frames[-count:]))

    def matches(self, *kinds: NodeKind) -> bool:
        """True if the innermost frames are exactly kinds (innermost first)"""
        return self.innermost(len(kinds)) == kinds

    def enclosing(self) -> Optional[NodeKind]:
        """Kind of the parent of the current node"""
        if len(self._frames) < 2:
            return None
        return self._frames[-2]
