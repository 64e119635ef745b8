import typer
from typing import Annotated, Optional

from trisol.arguments import Arguments, DisplayArguments
from trisol.config import get_frame_delay, get_start_hole
from trisol.render import Renderer
from trisol.search.engine import SearchContext, search
from trisol.search.solution import reconstruct
from trisol.triangle.board import Board
from trisol.triangle.geometry import NUM_HOLES

app = typer.Typer(pretty_exceptions_enable=False)


class Solver:
    def __init__(self, args: Arguments) -> None:
        self.start_hole = args.start_hole
        self.debug = args.display.debug
        self.renderer = Renderer(args.display)

    def __call__(self) -> SearchContext:
        self.renderer.start()

        on_visit = self.renderer.trace if self.debug else None
        context = search(Board.start(self.start_hole), on_visit)

        self.renderer.show_totals(context)
        self.renderer.show_solution(reconstruct(context))
        return context


@app.command()
def solve(
    debug: Annotated[
        bool, typer.Option("--debug", "-d", help="Trace every board of the search")
    ] = False,
    visual: Annotated[
        bool, typer.Option("--visual", "-v", help="Animate the solution")
    ] = False,
    start_hole: Annotated[
        Optional[int],
        typer.Option(
            "--start", "-s", min=1, max=NUM_HOLES, help="Empty hole at the start"
        ),
    ] = None,
) -> None:
    if start_hole is None:
        start_hole = get_start_hole()

    display_args = DisplayArguments(debug, visual, get_frame_delay())
    args = Arguments(start_hole, display_args)

    Solver(args)()


if __name__ == "__main__":
    app()
