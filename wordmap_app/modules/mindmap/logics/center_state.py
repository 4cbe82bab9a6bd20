"""
Center State - Pure state machine for the mind map center word.

States:
    none      no center chosen yet
    auto      center picked by degree; kept while it stays in the filtered set
    pinned    center chosen by clicking a node
    searched  center forced by a search; also restricts the connections

Transitions:
    search(term)  -> searched
    click(name)   -> pinned (drops an active search)
    reset()       -> none
    resolve(...)  -> re-validates the center against the current inputs
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from ..exceptions import InvalidCenterStateError
from ..schemas import WordConnection
from .layout_engine import VaultFilter, filter_connections, pick_center_by_degree


class CenterMode:
    NONE = 'none'
    AUTO = 'auto'
    PINNED = 'pinned'
    SEARCHED = 'searched'

    ALL = (NONE, AUTO, PINNED, SEARCHED)


@dataclass
class CenterTransition:
    """Outcome of a resolve() call."""
    center: Optional[str]
    previous: Optional[str]
    mode: str

    @property
    def changed(self) -> bool:
        return self.center != self.previous


class CenterState:
    def __init__(self, mode: str = CenterMode.NONE, center: Optional[str] = None):
        if mode not in CenterMode.ALL:
            raise InvalidCenterStateError(mode)
        self.mode = mode
        self.center = center if mode != CenterMode.NONE else None

    @property
    def search_term(self) -> Optional[str]:
        return self.center if self.mode == CenterMode.SEARCHED else None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'CenterState':
        if not data:
            return cls()
        return cls(mode=data.get('mode', CenterMode.NONE), center=data.get('center'))

    def to_dict(self) -> Dict[str, Any]:
        return {'mode': self.mode, 'center': self.center}

    def search(self, term: str) -> None:
        term = (term or '').strip()
        if not term:
            self.reset()
            return
        self.mode = CenterMode.SEARCHED
        self.center = term

    def click(self, name: str) -> None:
        self.mode = CenterMode.PINNED
        self.center = name

    def reset(self) -> None:
        self.mode = CenterMode.NONE
        self.center = None

    def resolve(
        self,
        connections: Sequence[WordConnection],
        vault_filter: VaultFilter,
    ) -> CenterTransition:
        """
        Settle the center for the current connections and vault filter.

        A searched term stays even when nothing matches it. A pinned or
        auto center that vanished from the filtered set falls back to the
        most connected word.
        """
        previous = self.center

        if self.mode == CenterMode.SEARCHED:
            return CenterTransition(center=self.center, previous=previous, mode=self.mode)

        filtered = filter_connections(connections, vault_filter)

        if self.mode in (CenterMode.PINNED, CenterMode.AUTO):
            if any(conn.touches(self.center) for conn in filtered):
                return CenterTransition(center=self.center, previous=previous, mode=self.mode)

        picked = pick_center_by_degree(filtered)
        if picked is None:
            self.reset()
        else:
            self.mode = CenterMode.AUTO
            self.center = picked
        return CenterTransition(center=self.center, previous=previous, mode=self.mode)
