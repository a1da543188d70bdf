from __future__ import annotations
"""Route pattern helpers shared by the route guard and breadcrumb lookup.

A pattern is a literal path in which at most one segment may be a wildcard
written as ``[name]`` (e.g. ``/po/[id]/edit``). A wildcard matches exactly one
non-empty segment.
Usage:
    pattern = compile_pattern('/po/[id]/edit')
    pattern.match('/po/PO-001/edit')   # -> 'PO-001'
    pattern.fill('PO-001')             # -> '/po/PO-001/edit'
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple


def _split(path: str) -> Tuple[str, ...]:
    return tuple(path.strip('/').split('/')) if path.strip('/') else ()


def is_wildcard_segment(segment: str) -> bool:
    return len(segment) > 2 and segment.startswith('[') and segment.endswith(']')


def wildcard_count(path: str) -> int:
    return sum(1 for s in _split(path) if is_wildcard_segment(s))


@dataclass(frozen=True)
class RoutePattern:
    raw: str
    segments: Tuple[str, ...]
    wildcard_index: Optional[int]

    @property
    def is_literal(self) -> bool:
        return self.wildcard_index is None

    def match(self, path: str) -> Optional[str]:
        """Return the wildcard segment value when ``path`` matches, else None.

        Literal patterns only match themselves and return an empty string.
        """
        if self.is_literal:
            return '' if path == self.raw else None
        # No slash trimming: '/po/create/' or '//po/x' must not collapse onto a wildcard
        if not isinstance(path, str) or not path.startswith('/'):
            return None
        parts = tuple(path[1:].split('/'))
        if len(parts) != len(self.segments):
            return None
        for i, (want, got) in enumerate(zip(self.segments, parts)):
            if i == self.wildcard_index:
                if not got:
                    return None
                continue
            if want != got:
                return None
        return parts[self.wildcard_index]

    def fill(self, value: str) -> str:
        if self.is_literal:
            return self.raw
        parts = list(self.segments)
        parts[self.wildcard_index] = value
        return '/' + '/'.join(parts)


@lru_cache(maxsize=None)
def compile_pattern(raw: str) -> RoutePattern:
    segments = _split(raw)
    wildcard_index = None
    for i, seg in enumerate(segments):
        if is_wildcard_segment(seg):
            if wildcard_index is not None:
                raise ValueError(f'Route pattern {raw!r} has more than one wildcard segment')
            wildcard_index = i
    return RoutePattern(raw=raw, segments=segments, wildcard_index=wildcard_index)


def match_pattern(raw: str, path: str) -> Optional[str]:
    return compile_pattern(raw).match(path)


__all__ = ['RoutePattern', 'compile_pattern', 'match_pattern', 'is_wildcard_segment', 'wildcard_count']
