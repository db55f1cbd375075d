"""
単体テスト: フェイズ進行のテスト
"""

from src.engine import GameCycle, Phase, PHASE_TRANSITIONS


def phase_sequence(steps: int):
    """steps 回進めたときのフェイズ名の列"""
    cycle = GameCycle()
    seq = [cycle.phase.value]
    for _ in range(steps):
        cycle.step()
        seq.append(cycle.phase.value)
    return seq


class TestGameCycle:
    """フェイズ進行のテストクラス"""

    def test_initial_state(self):
        cycle = GameCycle()
        assert cycle.turn_number == 1
        assert cycle.phase.value == "ClockAndCP"

    def test_phase_chain(self):
        """Clock → Marine → Stealer → End → Clock の順に進む"""
        assert phase_sequence(4) == [
            "ClockAndCP",
            "MarineAction",
            "StealerAction",
            "EndPhase",
            "ClockAndCP",
        ]

    def test_turn_increments_only_after_end_phase(self):
        cycle = GameCycle()
        cycle.step()  # Marine
        cycle.step()  # Stealer
        cycle.step()  # End
        assert cycle.turn_number == 1
        cycle.step()  # Clock
        assert cycle.turn_number == 2
        assert cycle.phase == Phase.CLOCK_AND_CP

    def test_two_full_cycles(self):
        seq = phase_sequence(8)
        assert seq[0] == seq[4] == seq[8] == "ClockAndCP"

    def test_no_phase_transitions_to_itself(self):
        for phase in Phase:
            assert phase.next != phase
        assert set(PHASE_TRANSITIONS.values()) == set(Phase)

    def test_custom_initial_phase(self):
        cycle = GameCycle(Phase.END_PHASE)
        assert cycle.step() == Phase.CLOCK_AND_CP
        assert cycle.turn_number == 2

    def test_on_enter_called_once_per_phase(self):
        """フックはフェイズに入るたびに1回呼ばれる"""
        entered = []
        cycle = GameCycle()
        for phase in Phase:
            cycle.add_enter_hook(phase, lambda c, p: entered.append((c.turn_number, p)))
        for _ in range(5):
            cycle.step()
        assert entered == [
            (1, Phase.MARINE_ACTION),
            (1, Phase.STEALER_ACTION),
            (1, Phase.END_PHASE),
            (2, Phase.CLOCK_AND_CP),
            (2, Phase.MARINE_ACTION),
        ]

    def test_to_dict(self):
        cycle = GameCycle()
        cycle.step()
        assert cycle.to_dict() == {"turn_number": 1, "phase": "MarineAction"}

    def test_initial_phase_hook_runs_once_at_construction(self):
        """生成時に渡したフックは初期フェイズでちょうど1回呼ばれる"""
        entered = []
        cycle = GameCycle(
            Phase.MARINE_ACTION,
            enter_hooks={
                Phase.MARINE_ACTION: [lambda c, p: entered.append(p)],
                Phase.STEALER_ACTION: [lambda c, p: entered.append(p)],
            },
        )
        assert entered == [Phase.MARINE_ACTION]
        cycle.step()
        assert entered == [Phase.MARINE_ACTION, Phase.STEALER_ACTION]

    def test_hook_added_later_skips_current_phase(self):
        entered = []
        cycle = GameCycle(Phase.MARINE_ACTION)
        cycle.add_enter_hook(Phase.MARINE_ACTION, lambda c, p: entered.append(p))
        assert entered == []
