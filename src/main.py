import argparse
import os
import sys
import time

from termcolor import colored

from game_of_life import Grid
from rules import VARIANTS, get_variant

DELAY_SECONDS = 0.06  # between generations
TOP_PADDING = 4
ANSI_CLEAR = "\x1b[2J\x1b[1;1H"

_clear_failed = False


def clear_screen(method="ansi"):
    """Reset the terminal viewport. A failing clear command is only reported."""
    global _clear_failed
    if method == "ansi":
        sys.stdout.write(ANSI_CLEAR)
        return
    try:
        status = os.system('cls' if os.name == 'nt' else 'clear')
    except OSError as exc:
        status = exc
    if status and not _clear_failed:
        _clear_failed = True
        print(colored("WARNING:", "yellow", attrs=["bold"]) + f" clear command failed ({status}), drawing without clearing.",
              file=sys.stderr)


def run(grid, generations=None, delay=DELAY_SECONDS, clear=clear_screen, out=None, color=False):
    """Main simulation loop. Runs forever unless `generations` is given."""
    out = out if out is not None else sys.stdout
    generation = 0
    while generations is None or generation < generations:
        clear()
        out.write("\n" * TOP_PADDING)
        grid.render(out, color=color)
        out.flush()
        grid.advance()
        generation += 1
        time.sleep(delay)
    return generation


def main(argv=None):
    parser = argparse.ArgumentParser(description="Conway's Game of Life in the terminal, with an infected variant")
    parser.add_argument("--variant", choices=sorted(VARIANTS), default="infection",
                        help="Rule set to simulate (default: infection)")
    parser.add_argument("--clear", choices=["ansi", "command"], default="ansi",
                        help="How to clear the screen between frames (default: ansi)")
    parser.add_argument("--color", action="store_true",
                        help="Color live and infected cells")
    parser.add_argument("-n", "--generations", type=int, default=None,
                        help="Stop after this many generations (default: run forever)")
    args = parser.parse_args(argv)

    variant = get_variant(args.variant)
    grid = Grid(variant.size, variant)
    grid.randomize()
    print(colored("Seeded", "green") + f" {variant.size}x{variant.size} {variant.name} grid", file=sys.stderr)

    try:
        run(grid, generations=args.generations,
            clear=lambda: clear_screen(args.clear), color=args.color)
    except KeyboardInterrupt:
        print(f"\n👋 Interrupted after {grid.generation} generations.", file=sys.stderr)
        return 0
    print(colored("Finished", "blue") + f" after {grid.generation} generations", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
