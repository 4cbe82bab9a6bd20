import pytest

from wordmap_app.modules.mindmap.exceptions import InvalidCenterStateError
from wordmap_app.modules.mindmap.logics.center_state import CenterMode, CenterState
from wordmap_app.modules.mindmap.schemas import WordConnection, WordSnapshot


def connect(name_a, name_b, vault_a=1, vault_b=1):
    return WordConnection(
        word_a=WordSnapshot(id=hash(name_a) & 0xFFFF, name=name_a, grammatical_class='noun', vault_id=vault_a),
        word_b=WordSnapshot(id=hash(name_b) & 0xFFFF, name=name_b, grammatical_class='noun', vault_id=vault_b),
        vault_a=f'V{vault_a}',
        vault_b=f'V{vault_b}',
    )


CHAIN = [connect('A', 'B'), connect('B', 'C')]


class TestCenterState:
    def test_starts_empty(self):
        state = CenterState()

        assert state.mode == CenterMode.NONE
        assert state.center is None
        assert state.search_term is None

    def test_first_resolve_picks_by_degree_and_sticks(self):
        state = CenterState()

        transition = state.resolve(CHAIN, 'all')

        assert transition.changed
        assert (state.mode, state.center) == (CenterMode.AUTO, 'B')

        # B keeps the center even when another word becomes more connected
        more = CHAIN + [connect('C', 'D'), connect('C', 'E')]
        assert not state.resolve(more, 'all').changed
        assert state.center == 'B'

    def test_click_pins_center(self):
        state = CenterState()
        state.click('A')

        transition = state.resolve(CHAIN, 'all')

        assert state.mode == CenterMode.PINNED
        assert transition.center == 'A'
        assert not transition.changed

    def test_pinned_center_falls_back_when_filtered_out(self):
        connections = [connect('A', 'B', 1, 1), connect('C', 'D', 2, 2), connect('D', 'E', 2, 2)]
        state = CenterState()
        state.click('A')

        transition = state.resolve(connections, 2)

        assert transition.previous == 'A'
        assert transition.center == 'D'
        assert state.mode == CenterMode.AUTO

    def test_search_stays_even_when_absent(self):
        state = CenterState()
        state.search('nowhere')

        transition = state.resolve(CHAIN, 'all')

        assert state.mode == CenterMode.SEARCHED
        assert transition.center == 'nowhere'
        assert state.search_term == 'nowhere'

    def test_blank_search_resets(self):
        state = CenterState()
        state.search('A')
        state.search('   ')

        assert state.mode == CenterMode.NONE
        assert state.center is None

    def test_click_drops_search(self):
        state = CenterState()
        state.search('A')
        state.click('C')

        assert state.search_term is None
        assert state.center == 'C'

    def test_empty_connections_resolve_to_none(self):
        state = CenterState(CenterMode.AUTO, 'A')

        transition = state.resolve([], 'all')

        assert state.mode == CenterMode.NONE
        assert transition.center is None
        assert transition.changed

    def test_round_trips_through_session_dict(self):
        state = CenterState()
        state.search('casa')

        restored = CenterState.from_dict(state.to_dict())

        assert restored.mode == CenterMode.SEARCHED
        assert restored.search_term == 'casa'
        assert CenterState.from_dict(None).mode == CenterMode.NONE

    def test_rejects_unknown_mode(self):
        with pytest.raises(InvalidCenterStateError):
            CenterState('floating', 'A')
