"""
Mind Map Layout Engine - Pure logic for the radial connection diagram.

Turns a flat list of word connections into a three-ring layout around one
center word. No database access and no session state: the caller resolves the
center (see center_state.py) and passes it in.

Pipeline:
    filter_connections -> pick_center_by_degree -> assign_tiers
    -> place_tier -> nodes/edges
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..config import MindMapDefaultConfig
from ..exceptions import InvalidVaultFilterError
from ..schemas import MindMapEdge, MindMapLayout, MindMapNode, WordConnection

logger = logging.getLogger(__name__)

VaultFilter = Union[str, int]


def parse_vault_filter(value: Optional[VaultFilter]) -> VaultFilter:
    """
    Normalize a vault filter coming from a query string or a caller.

    Returns 'all' or an int vault id. None and '' mean 'all'.
    """
    if value is None:
        return MindMapDefaultConfig.ALL_VAULTS
    if isinstance(value, bool):
        raise InvalidVaultFilterError(value)
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text == '' or text == MindMapDefaultConfig.ALL_VAULTS:
        return MindMapDefaultConfig.ALL_VAULTS
    try:
        return int(text)
    except ValueError:
        raise InvalidVaultFilterError(value)


def filter_connections(
    connections: Sequence[WordConnection],
    vault_filter: Optional[VaultFilter] = MindMapDefaultConfig.ALL_VAULTS,
    search_term: Optional[str] = None,
) -> List[WordConnection]:
    """
    Apply the vault filter, then the search filter, keeping input order.

    A connection survives the vault filter when either endpoint lives in the
    vault, and the search filter when either endpoint's name equals the
    search term exactly.
    """
    vault_filter = parse_vault_filter(vault_filter)
    filtered = list(connections)

    if vault_filter != MindMapDefaultConfig.ALL_VAULTS:
        filtered = [conn for conn in filtered if conn.touches_vault(vault_filter)]

    if search_term:
        filtered = [conn for conn in filtered if conn.touches(search_term)]

    return filtered


def compute_degrees(connections: Iterable[WordConnection]) -> Dict[str, int]:
    """Edge count per word name, in first-seen order (word A before word B)."""
    degrees: Dict[str, int] = {}
    for conn in connections:
        degrees[conn.word_a.name] = degrees.get(conn.word_a.name, 0) + 1
        degrees[conn.word_b.name] = degrees.get(conn.word_b.name, 0) + 1
    return degrees


def pick_center_by_degree(connections: Sequence[WordConnection]) -> Optional[str]:
    """Most connected word; ties go to the word seen first. None if empty."""
    degrees = compute_degrees(connections)
    if not degrees:
        return None
    # max() keeps the first maximal item, which is the first-seen name
    return max(degrees.items(), key=lambda item: item[1])[0]


def assign_tiers(
    connections: Sequence[WordConnection],
    center: str,
    max_tier: int = MindMapDefaultConfig.MAX_TIER,
) -> List[List[str]]:
    """
    Breadth-first rings around `center`, capped at `max_tier` hops.

    Every word is placed once, in the lowest tier that reaches it, so a word
    linked to both the center and a tier-1 word stays in tier 1.
    """
    tiers: List[List[str]] = [[center]]
    placed = {center}

    for _ in range(max_tier):
        frontier = tiers[-1]
        next_tier: Dict[str, None] = {}
        for name in frontier:
            for conn in connections:
                neighbour = conn.other(name)
                if neighbour is None or neighbour in placed or neighbour in next_tier:
                    continue
                next_tier[neighbour] = None
        placed.update(next_tier)
        tiers.append(list(next_tier))

    return tiers


def ring_radius(tier: int) -> float:
    return MindMapDefaultConfig.BASE_RADIUS + MindMapDefaultConfig.RING_SPACING * tier


def place_tier(names: Sequence[str], tier: int) -> List[Tuple[str, float, float]]:
    """Spread `names` evenly on the tier's circle, starting at angle 0."""
    radius = ring_radius(tier)
    angle_step = (2 * math.pi) / max(len(names), 1)
    positions = []
    for index, name in enumerate(names):
        angle = index * angle_step
        x = math.cos(angle) * radius + MindMapDefaultConfig.CANVAS_CENTER_X
        y = math.sin(angle) * radius + MindMapDefaultConfig.CANVAS_CENTER_Y
        positions.append((name, x, y))
    return positions


def _find_endpoint(connections: Sequence[WordConnection], name: str):
    for conn in connections:
        endpoint = conn.endpoint(name)
        if endpoint is not None:
            return endpoint
    return None


def build_layout(
    connections: Sequence[WordConnection],
    center: Optional[str],
) -> MindMapLayout:
    """
    Lay out already-filtered connections around `center`.

    Nodes are keyed by word name. A center absent from `connections` yields an
    empty layout that still reports the requested center.
    """
    if not connections or center is None:
        return MindMapLayout(center=center)

    nodes: Dict[str, MindMapNode] = {}
    for tier, names in enumerate(assign_tiers(connections, center)):
        for name, x, y in place_tier(names, tier):
            endpoint = _find_endpoint(connections, name)
            if endpoint is None:
                continue
            word, vault_name = endpoint
            nodes[name] = MindMapNode(
                id=name,
                word=word,
                vault_name=vault_name,
                x=x,
                y=y,
                tier=tier,
            )

    edges: List[MindMapEdge] = []
    for conn in connections:
        node_a = nodes.get(conn.word_a.name)
        node_b = nodes.get(conn.word_b.name)
        # same-name words collapse into one node; their link has no visible edge
        if node_a is None or node_b is None or node_a is node_b:
            continue
        edges.append(MindMapEdge(
            source=node_a.id,
            target=node_b.id,
            source_x=node_a.x,
            source_y=node_a.y,
            target_x=node_b.x,
            target_y=node_b.y,
        ))
        if node_b.id not in node_a.connections:
            node_a.connections.append(node_b.id)
            node_b.connections.append(node_a.id)

    return MindMapLayout(nodes=list(nodes.values()), edges=edges, center=center)


def compute_layout(
    connections: Sequence[WordConnection],
    vault_filter: Optional[VaultFilter] = MindMapDefaultConfig.ALL_VAULTS,
    center: Optional[str] = None,
    search_term: Optional[str] = None,
) -> MindMapLayout:
    """
    Full pipeline: filter, resolve the center, lay out.

    `search_term` wins over `center`; with neither, the most connected word of
    the filtered set is used.
    """
    filtered = filter_connections(connections, vault_filter, search_term)

    if search_term:
        resolved = search_term
    elif center is not None:
        resolved = center
    else:
        resolved = pick_center_by_degree(filtered)

    layout = build_layout(filtered, resolved)
    logger.debug(
        "Mind map layout: %d/%d connections, center=%r, %d nodes, %d edges",
        len(filtered), len(connections), resolved, len(layout.nodes), len(layout.edges),
    )
    return layout


def collect_available_words(connections: Iterable[WordConnection]) -> List[str]:
    """Sorted distinct endpoint names of the unfiltered connection list."""
    names = set()
    for conn in connections:
        names.add(conn.word_a.name)
        names.add(conn.word_b.name)
    return sorted(names)


def suggest_words(
    available_words: Sequence[str],
    query: Optional[str],
    limit: int = MindMapDefaultConfig.SUGGESTION_LIMIT,
) -> Tuple[List[str], int]:
    """Case-insensitive substring matches, capped at `limit`, plus the total count."""
    if not query:
        matches = list(available_words)
    else:
        needle = query.lower()
        matches = [word for word in available_words if needle in word.lower()]
    return matches[:limit], len(matches)
