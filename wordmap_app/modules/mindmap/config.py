# File: wordmap_app/modules/mindmap/config.py

class MindMapDefaultConfig:
    # Canvas center the rings are drawn around
    CANVAS_CENTER_X = 400
    CANVAS_CENTER_Y = 300

    # Ring radius for tier t is BASE_RADIUS + t * RING_SPACING
    BASE_RADIUS = 100
    RING_SPACING = 200

    # Tier 0 is the center; nothing farther than MAX_TIER hops is drawn
    MAX_TIER = 2

    ALL_VAULTS = 'all'
    SUGGESTION_LIMIT = 15
