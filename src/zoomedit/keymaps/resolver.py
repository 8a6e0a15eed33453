"""Prefix-tree lookup from typed key tokens to bound actions.

Each mode gets its own tree of key tokens; a node lists the bindings whose
sequence ends there. Trees are rebuilt lazily whenever the registry
revision moves on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Mapping, Optional, Sequence, Tuple

from zoomedit.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class _KeyNode:
    binding_ids: list[str] = field(default_factory=list)
    children: Dict[str, "_KeyNode"] = field(default_factory=dict)

    def insert(self, binding: Binding) -> None:
        node = self
        for token in binding.sequence.tokens:
            node = node.children.setdefault(token, _KeyNode())
        node.binding_ids.append(binding.id)


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    consumed: int = 0
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Resolves token runs against the registry's bindings for one mode.

    A run that ends on an inner node of the tree is ``pending``: the caller
    keeps the tokens and waits for the next key.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._trees: Dict[str, Tuple[int, _KeyNode]] = {}

    def resolve(
        self,
        mode: str,
        tokens: Sequence[str],
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        typed = tuple(tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "length": len(typed)},
        ) as handle:
            result = self._lookup(self._tree(mode), typed, context or {})
            handle.add_metadata("status", result.status)
            if result.match:
                handle.add_metadata("binding_id", result.match.binding.id)
            return result

    def _lookup(
        self, root: _KeyNode, typed: Tuple[str, ...], flags: Mapping[str, bool]
    ) -> ResolutionResult:
        node = root
        for depth, token in enumerate(typed):
            child = node.children.get(token)
            if child is None:
                return ResolutionResult(status="miss", consumed=depth)
            node = child

        consumed = len(typed)
        match = self._best_match(node, flags)
        if match:
            return ResolutionResult(status="match", match=match, consumed=consumed)
        if node.children and consumed:
            return ResolutionResult(
                status="pending",
                consumed=consumed,
                next_expected=tuple(sorted(node.children)),
            )
        return ResolutionResult(status="miss", consumed=consumed)

    def _tree(self, mode: str) -> _KeyNode:
        revision = self._registry.revision()
        cached = self._trees.get(mode)
        if cached is not None and cached[0] == revision:
            return cached[1]

        root = _KeyNode()
        for binding in self._registry.iter_bindings(mode):
            root.insert(binding)
        self._trees[mode] = (revision, root)
        return root

    def _best_match(
        self, node: _KeyNode, flags: Mapping[str, bool]
    ) -> Optional[ResolutionMatch]:
        candidates = [
            self._registry.get_binding(binding_id) for binding_id in node.binding_ids
        ]
        allowed = [binding for binding in candidates if binding.allows(flags)]
        if not allowed:
            return None
        best = min(allowed, key=lambda binding: (-binding.priority, binding.id))
        return ResolutionMatch(
            binding=best, action=self._registry.get_action(best.action_id)
        )


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
