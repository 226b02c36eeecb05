"""Print the estimated cost of cutting a profile.

Usage: python -m quote.gen_quote [FILE]

With no FILE, quotes the three bundled sample profiles in turn.
"""
import sys

from .constants import DEFAULT_RESOLUTION
from .estimate import DEFAULT_RATES, quote_scene, fmt_cost
from .log import setup_logging
from .scene import SceneError, load_scene

SAMPLE_FILES = [
    "files/Rectangle.json",
    "files/ExtrudeCircularArc.json",
    "files/CutCircularArc.json",
]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    setup_logging()
    paths = args[:1] or SAMPLE_FILES
    for path in paths:
        try:
            scene = load_scene(path)
        except SceneError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        q = quote_scene(scene, DEFAULT_RATES, DEFAULT_RESOLUTION)
        print(fmt_cost(q.cost))
    return 0


if __name__ == "__main__":
    sys.exit(main())
