"""
Command line interface for the movie match engine.

Usage:
    movie-match movies.txt --base "Bacon, Kevin" distance "Weaver, Sigourney"
    movie-match movies.txt --base "Bacon, Kevin" star "Alien (1979)"
    movie-match movies.txt hint "weav" --max 5
    movie-match movies.txt stats --json
"""

import argparse
import json
import logging
import sys

from .config import ConfigError, load_config
from .engine import IS_MOVIE, NOT_FOUND, UNREACHABLE, MovieMatch
from .handlers import SubgraphTooLarge, connected_components, degree_sequence, graph_density
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movie-match",
        description="Degrees of separation between actors in a movie database",
    )
    parser.add_argument("database", help="Movie database file (title/actor/actor/...)")
    parser.add_argument("--base", help="Base actor for distance queries")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--no-rich", action="store_true", help="Plain log output")
    parser.add_argument("--seed", type=int, help="Shuffle adjacency order with this seed first")

    commands = parser.add_subparsers(dest="command", required=True)

    distance = commands.add_parser("distance", help="Degrees of separation from the base actor")
    distance.add_argument("names", nargs="+")

    star = commands.add_parser("star", help="Cast of a movie or movies of an actor")
    star.add_argument("name")

    hint = commands.add_parser("hint", help="Names close to a prefix")
    hint.add_argument("prefix")
    hint.add_argument("--max", type=int, dest="max_suggestions")

    commands.add_parser("dump", help="Diagnostic dump of graph, survey and names")

    stats = commands.add_parser("stats", help="Graph statistics")
    stats.add_argument("--top", type=int, default=10, help="Busiest vertices to list")
    stats.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def format_distance(mm: MovieMatch, name: str, result: int) -> str:
    """Human-readable outcome of one distance query."""
    if result == NOT_FOUND:
        return f" ** {name} is not in the database"
    if result == IS_MOVIE:
        return f" ** {name} is a movie"
    if result == UNREACHABLE:
        return f" ** {name} has no connection to {mm.base_actor}"
    return f" {name} is {result} degree(s) from {mm.base_actor}\n{mm.show_path()}"


def format_stats(mm: MovieMatch, top: int, as_json: bool = False) -> str:
    density = graph_density(mm.graph)
    components = connected_components(mm.graph)
    busiest = [
        {"name": mm.names.name(v), "degree": d} for d, v in degree_sequence(mm.graph, top)
    ]
    data = {
        "movies": mm.movie_count,
        "actors": mm.actor_count,
        "credits": density["edges"],
        "density": density["density"],
        "components": components["component_count"],
        "largest_component": components["largest_size"],
        "busiest": busiest,
    }
    if as_json:
        return json.dumps(data, indent=2)

    lines = [
        "Movie Graph",
        "=" * 60,
        f"  movies: {data['movies']:,}",
        f"  actors: {data['actors']:,}",
        f"  credits: {data['credits']:,}",
        f"  components: {data['components']:,} (largest {data['largest_component']:,})",
        "",
        f"  top {len(busiest)} by degree:",
    ]
    lines.extend(f"    {entry['degree']:>6}  {entry['name']}" for entry in busiest)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.log_level, use_rich=not args.no_rich)

    mm = MovieMatch(config)
    if not mm.load(args.database):
        return 1
    if args.seed is not None:
        mm.shuffle(args.seed)

    if args.command == "distance":
        if not args.base:
            print("error: distance requires --base", file=sys.stderr)
            return 1
        if not mm.init(args.base):
            return 1
        for name in args.names:
            print(format_distance(mm, name, mm.distance(name)))
    elif args.command == "star":
        print(mm.show_star(args.name), end="")
    elif args.command == "hint":
        for name in mm.hint(args.prefix, args.max_suggestions):
            print(f"  {name}")
    elif args.command == "dump":
        if args.base and not mm.init(args.base):
            return 1
        print(mm.dump(), end="")
    elif args.command == "stats":
        try:
            print(format_stats(mm, args.top, args.json))
        except SubgraphTooLarge as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
