"""
Mind Map Service - Feeds the layout engine from the database and keeps the
per-user interactive state (center, hovered node) in the Flask session.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from flask import current_app, session

from wordmap_app.core.signals import center_changed, hover_changed
from wordmap_app.modules.vaults.services.link_service import LinkService

from ..config import MindMapDefaultConfig
from ..logics.center_state import CenterState
from ..logics.layout_engine import (
    collect_available_words,
    compute_layout,
    parse_vault_filter,
    suggest_words,
)
from ..schemas import MindMapLayout, WordConnection, WordSnapshot


@dataclass
class MindMapView:
    """Everything the client needs to draw one frame of the mind map."""
    layout: MindMapLayout
    center_mode: str
    search_term: Optional[str]
    vault_filter: object
    hovered_node: Optional[str]
    available_words: List[str] = field(default_factory=list)

    def to_dict(self):
        data = self.layout.to_dict()
        data.update({
            'center_mode': self.center_mode,
            'search_term': self.search_term,
            'vault': self.vault_filter,
            'hovered_node': self.hovered_node,
            'available_words': self.available_words,
        })
        return data


class MindMapSessionManager:
    """
    Interactive mind map state for one user, stored in the Flask session.
    """
    SESSION_KEY = 'mindmap_session'

    def __init__(self, user_id, center_state=None, hovered_node=None):
        self.user_id = user_id
        self.center_state = center_state or CenterState()
        self.hovered_node = hovered_node

    @classmethod
    def from_dict(cls, session_dict):
        return cls(
            user_id=session_dict['user_id'],
            center_state=CenterState.from_dict(session_dict.get('center')),
            hovered_node=session_dict.get('hovered_node'),
        )

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'center': self.center_state.to_dict(),
            'hovered_node': self.hovered_node,
        }

    @classmethod
    def load(cls, user_id):
        """State of `user_id`, or a fresh one if the session holds another user's."""
        stored = session.get(cls.SESSION_KEY)
        if stored and stored.get('user_id') == user_id:
            return cls.from_dict(stored)
        return cls(user_id)

    def save(self):
        session[self.SESSION_KEY] = self.to_dict()

    @classmethod
    def clear(cls):
        session.pop(cls.SESSION_KEY, None)

    def _announce_center(self, previous, center):
        if previous == center:
            return
        current_app.logger.debug(
            "Mind map center for user %s: %r -> %r (%s)",
            self.user_id, previous, center, self.center_state.mode,
        )
        center_changed.send(
            current_app._get_current_object(),
            user_id=self.user_id, center=center, previous=previous, mode=self.center_state.mode,
        )

    def search(self, term):
        previous = self.center_state.center
        self.center_state.search(term)
        self._announce_center(previous, self.center_state.center)
        self.save()

    def click(self, name):
        previous = self.center_state.center
        self.center_state.click(name)
        self._announce_center(previous, self.center_state.center)
        self.save()

    def reset(self):
        previous = self.center_state.center
        self.center_state.reset()
        self._announce_center(previous, None)
        self.save()

    def hover(self, node_id):
        if node_id == self.hovered_node:
            return
        self.hovered_node = node_id
        hover_changed.send(current_app._get_current_object(), user_id=self.user_id, node_id=node_id)
        self.save()

    def render(self, connections, vault_filter):
        """Resolve the center against the inputs and compute the layout."""
        vault_filter = parse_vault_filter(vault_filter)
        transition = self.center_state.resolve(connections, vault_filter)
        self._announce_center(transition.previous, transition.center)

        layout = compute_layout(
            connections,
            vault_filter=vault_filter,
            center=self.center_state.center,
            search_term=self.center_state.search_term,
        )
        if self.hovered_node is not None and layout.node(self.hovered_node) is None:
            self.hovered_node = None
        self.save()

        return MindMapView(
            layout=layout,
            center_mode=self.center_state.mode,
            search_term=self.center_state.search_term,
            vault_filter=vault_filter,
            hovered_node=self.hovered_node,
            available_words=collect_available_words(connections),
        )


class MindMapService:
    """Database-facing helpers for the mind map."""

    @staticmethod
    def load_connections(user_id) -> List[WordConnection]:
        """The user's word links as detached snapshots, in link order."""
        return [
            WordConnection(
                word_a=WordSnapshot.from_model(relation.word_a),
                word_b=WordSnapshot.from_model(relation.word_b),
                vault_a=relation.vault_a,
                vault_b=relation.vault_b,
            )
            for relation in LinkService.get_all_relations(user_id)
        ]

    @staticmethod
    def get_view(user_id, vault_filter=MindMapDefaultConfig.ALL_VAULTS) -> MindMapView:
        connections = MindMapService.load_connections(user_id)
        manager = MindMapSessionManager.load(user_id)
        return manager.render(connections, vault_filter)

    @staticmethod
    def get_suggestions(user_id, query, limit=MindMapDefaultConfig.SUGGESTION_LIMIT):
        words = collect_available_words(MindMapService.load_connections(user_id))
        return suggest_words(words, query, limit)
