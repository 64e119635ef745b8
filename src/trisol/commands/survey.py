import typer
from typing import Annotated

from trisol.search.engine import search
from trisol.search.solution import link_solution
from trisol.triangle.board import Board
from trisol.triangle.geometry import NUM_HOLES

app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def survey(
    holes: Annotated[
        list[int],
        typer.Option("--start", "-s", min=1, max=NUM_HOLES, help="Holes to try"),
    ] = [],
) -> None:
    if not holes:
        holes = list(range(1, NUM_HOLES + 1))

    for hole in holes:
        context = search(Board.start(hole))
        solution = link_solution(context)

        print(
            f"hole {hole:>2} | {context.total_boards:>9} boards"
            f" | {context.total_winning_boards:>6} winning boards"
            f" | {len(solution):>2} solution boards"
        )


if __name__ == "__main__":
    app()
