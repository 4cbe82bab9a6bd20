# File: wordmap_app/modules/mindmap/schemas.py
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class WordSnapshot:
    """Read-only copy of a word, detached from the database session."""
    id: int
    name: str
    grammatical_class: str
    vault_id: int
    translations: List[str] = field(default_factory=list)
    confidence: int = 1
    category: Optional[str] = None

    @classmethod
    def from_model(cls, word) -> 'WordSnapshot':
        return cls(
            id=word.word_id,
            name=word.name,
            grammatical_class=word.grammatical_class,
            vault_id=word.vault_id,
            translations=list(word.translations or []),
            confidence=word.confidence,
            category=word.category,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WordSnapshot':
        return cls(
            id=data['id'],
            name=data['name'],
            grammatical_class=data.get('grammatical_class', ''),
            vault_id=data['vault_id'],
            translations=list(data.get('translations') or []),
            confidence=data.get('confidence', 1),
            category=data.get('category'),
        )


@dataclass(frozen=True)
class WordConnection:
    """Undirected link between two words plus their vault display names."""
    word_a: WordSnapshot
    word_b: WordSnapshot
    vault_a: str
    vault_b: str

    def touches(self, name: str) -> bool:
        return self.word_a.name == name or self.word_b.name == name

    def touches_vault(self, vault_id: int) -> bool:
        return self.word_a.vault_id == vault_id or self.word_b.vault_id == vault_id

    def other(self, name: str) -> Optional[str]:
        """Name at the opposite end from `name`, or None if `name` is not an endpoint."""
        if self.word_a.name == name:
            return self.word_b.name
        if self.word_b.name == name:
            return self.word_a.name
        return None

    def endpoint(self, name: str):
        """(word, vault name) for the endpoint called `name`, A side first."""
        if self.word_a.name == name:
            return self.word_a, self.vault_a
        if self.word_b.name == name:
            return self.word_b, self.vault_b
        return None


@dataclass
class MindMapNode:
    id: str
    word: WordSnapshot
    vault_name: str
    x: float
    y: float
    tier: int
    connections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'word': asdict(self.word),
            'vault_name': self.vault_name,
            'x': self.x,
            'y': self.y,
            'tier': self.tier,
            'connections': list(self.connections),
        }


@dataclass
class MindMapEdge:
    source: str
    target: str
    source_x: float
    source_y: float
    target_x: float
    target_y: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MindMapLayout:
    nodes: List[MindMapNode] = field(default_factory=list)
    edges: List[MindMapEdge] = field(default_factory=list)
    center: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node(self, node_id: str) -> Optional[MindMapNode]:
        return next((n for n in self.nodes if n.id == node_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'center': self.center,
            'nodes': [n.to_dict() for n in self.nodes],
            'edges': [e.to_dict() for e in self.edges],
        }
