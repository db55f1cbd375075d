"""
ターンのフェイズ進行（GameCycle）を管理するモジュール

ClockAndCP → MarineAction → StealerAction → EndPhase → ClockAndCP → ...
EndPhase から ClockAndCP に戻るときだけターン数が1増える。
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class Phase(Enum):
    """ターン内のフェイズ（値はフェイズ名）"""
    CLOCK_AND_CP = "ClockAndCP"
    MARINE_ACTION = "MarineAction"
    STEALER_ACTION = "StealerAction"
    END_PHASE = "EndPhase"

    @property
    def next(self) -> 'Phase':
        """次のフェイズを返す"""
        return PHASE_TRANSITIONS[self]


PHASE_TRANSITIONS: Dict[Phase, Phase] = {
    Phase.CLOCK_AND_CP: Phase.MARINE_ACTION,
    Phase.MARINE_ACTION: Phase.STEALER_ACTION,
    Phase.STEALER_ACTION: Phase.END_PHASE,
    Phase.END_PHASE: Phase.CLOCK_AND_CP,
}

PhaseHook = Callable[['GameCycle', Phase], None]


class GameCycle:
    """フェイズとターン数を持つ状態機械。終了状態はない"""

    def __init__(
        self,
        initial_phase: Phase = Phase.CLOCK_AND_CP,
        enter_hooks: Optional[Dict[Phase, List[PhaseHook]]] = None,
    ):
        """
        enter_hooks は最初の on_enter より前に登録されるので、
        初期フェイズのフックも生成時に一度呼ばれる
        """
        self.turn_number = 1
        self.phase = initial_phase
        self._enter_hooks: Dict[Phase, List[PhaseHook]] = {
            phase: list(hooks) for phase, hooks in (enter_hooks or {}).items()
        }
        self.on_enter(self.phase)

    def add_enter_hook(self, phase: Phase, hook: PhaseHook) -> None:
        """
        フェイズ開始時に呼ばれるフックを登録
        登録時点で既にそのフェイズにいても呼ばれない
        """
        self._enter_hooks.setdefault(phase, []).append(hook)

    def on_enter(self, phase: Phase) -> None:
        """フェイズが現在のフェイズになった直後に一度だけ呼ばれる"""
        logger.debug("Turn %d: entering %s", self.turn_number, phase.value)
        for hook in self._enter_hooks.get(phase, []):
            hook(self, phase)

    def step(self) -> Phase:
        """フェイズを1つ進める"""
        if self.phase == Phase.END_PHASE:
            self.turn_number += 1
        self.phase = self.phase.next
        self.on_enter(self.phase)
        return self.phase

    def to_dict(self) -> dict:
        return {"turn_number": self.turn_number, "phase": self.phase.value}
