#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Immutable state threaded through the recursive renderer."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RenderContext:
    """State carried from a node to its descendants during rendering.

    Every change produces a new instance, so sibling subtrees rendered one
    after another never observe each other's counters.

    Parameters
    ----------
    list_depth : int, default 0
        Number of list ancestors strictly enclosing the current node.
    ordered_stack : tuple of bool, default ()
        One entry per enclosing list, True for ``<ol>``.
    ordered_index : tuple of int, default ()
        Running item counter for each enclosing list.
    base_url : str or None, default None
        Base URL for resolving relative links and image sources.

    """

    list_depth: int = 0
    ordered_stack: tuple[bool, ...] = ()
    ordered_index: tuple[int, ...] = ()
    base_url: str | None = None

    def enter_list(self, ordered: bool) -> RenderContext:
        """Return the context for the items of a list nested one level deeper."""
        return replace(
            self,
            list_depth=self.list_depth + 1,
            ordered_stack=self.ordered_stack + (ordered,),
            ordered_index=self.ordered_index + (0,),
        )

    def next_item(self) -> RenderContext:
        """Return a copy with the innermost list counter advanced by one."""
        if not self.ordered_index:
            raise ValueError("next_item() called outside of a list")
        return replace(self, ordered_index=self.ordered_index[:-1] + (self.ordered_index[-1] + 1,))

    @property
    def item_number(self) -> int:
        """Current value of the innermost list counter (0 outside a list)."""
        return self.ordered_index[-1] if self.ordered_index else 0

    @property
    def in_ordered_list(self) -> bool:
        return bool(self.ordered_stack) and self.ordered_stack[-1]
