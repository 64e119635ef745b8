from __future__ import annotations

from trisol.config import get_frame_delay, get_start_hole


class DisplayArguments:
    def __init__(self, debug: bool, visual: bool, frame_delay: float) -> None:
        self.debug = debug

        # Debug output is not paced, so it wins over visual mode.
        self.visual = visual and not debug

        self.frame_delay = frame_delay


class Arguments:
    def __init__(self, start_hole: int, display: DisplayArguments) -> None:
        self.start_hole = start_hole
        self.display = display

    @classmethod
    def default(cls) -> Arguments:
        return Arguments(
            get_start_hole(),
            DisplayArguments(False, False, get_frame_delay()),
        )
