"""
Degrees of separation over a bipartite actor/movie graph.

Actors and movies share one vertex id space; every edge joins a movie to
a member of its cast. A single breadth-first survey rooted at the base
actor answers all distance queries until the base or the graph changes.
Because paths alternate actor, movie, actor, ..., the graph distance
between two actors is always even and half of it is the number of movies
separating them.
"""

import logging
import random
import re
from collections.abc import Iterable
from pathlib import Path

from .config import MovieMatchConfig
from .graph import AdjacencyGraph, undirected_graph
from .loader import DatabaseLoadError, read_records
from .name_index import NameIndex
from .survey import BreadthFirstSurvey, Color, tree_path, write_data

logger = logging.getLogger(__name__)

# Outcomes of MovieMatch.distance() other than a separation count
NOT_FOUND = -3
UNREACHABLE = -2
IS_MOVIE = -1

# Movie titles end in a four-digit year in parentheses: "Alien (1979)"
_MOVIE_TITLE = re.compile(r"\([0-9]{4}\)\Z")


def is_movie_title(name: str) -> bool:
    return _MOVIE_TITLE.search(name) is not None


class MovieMatch:
    """
    Kevin Bacon game engine.

    Usage:
        mm = MovieMatch()
        mm.load("movies.txt")
        mm.init("Bacon, Kevin")
        mm.distance("Weaver, Sigourney")  # degrees of separation, or -1/-2/-3
        print(mm.show_path())
    """

    def __init__(self, config: MovieMatchConfig | None = None):
        self.config = config or MovieMatchConfig()
        self._graph = undirected_graph()
        self._names = NameIndex(
            hint_length=self.config.hint_length,
            hint_pad=self.config.hint_pad,
            hint_margin=self.config.hint_margin,
        )
        self._movie: list[bool] = []
        self._bfs = BreadthFirstSurvey(self._graph)
        self._base_actor: str | None = None
        self._path: list[int] = []

    # === ACCESSORS ===

    @property
    def graph(self) -> AdjacencyGraph:
        return self._graph

    @property
    def names(self) -> NameIndex:
        return self._names

    @property
    def survey(self) -> BreadthFirstSurvey:
        return self._bfs

    @property
    def base_actor(self) -> str | None:
        return self._base_actor

    @property
    def path(self) -> list[int]:
        """Vertices from the last successfully queried actor back to the base."""
        return self._path

    @property
    def path_names(self) -> list[str]:
        return [self._names.name(v) for v in self._path]

    @property
    def movie_count(self) -> int:
        return sum(self._movie)

    @property
    def actor_count(self) -> int:
        return len(self._movie) - self.movie_count

    def is_movie(self, v: int) -> bool:
        return self._movie[v]

    # === LOADING ===

    def load(self, source: Path | str | Iterable[str]) -> bool:
        """
        Load a movie database, replacing any previous one.

        Args:
            source: Database path, or an iterable of database lines

        Returns:
            True on success, False if the database could not be read
        """
        try:
            records = read_records(source, self.config.delimiter)
        except DatabaseLoadError as e:
            logger.error("%s", e)
            return False

        self._graph.clear()
        self._names.clear()
        self._movie.clear()
        self._base_actor = None
        self._path = []

        # First pass: assign vertex ids in first-seen order
        self._names.reserve(sum(len(record) for record in records))
        for record in records:
            for name in record:
                self._register(name)
        self._graph.set_vertex_count(len(self._names))

        # Second pass: one edge per (movie, cast member)
        rejected = 0
        for movie, *cast in records:
            for actor in cast:
                if not self._connect(movie, actor):
                    rejected += 1

        self._names.sort()
        self._bfs.reset()
        logger.info(
            "%d movies and %d actors read from %s",
            self.movie_count,
            self.actor_count,
            source if isinstance(source, (str, Path)) else "input",
        )
        if rejected:
            logger.warning("%d credits rejected as non-bipartite", rejected)
        return True

    def _register(self, name: str) -> int:
        inserted, v = self._names.insert(name)
        if inserted:
            self._movie.append(is_movie_title(name))
        return v

    def add_credit(self, movie: str, actor: str) -> bool:
        """
        Add an edge between a movie and a cast member.

        Names are registered if new, and the hint array is rebuilt so they
        show up in hint(). The edge is refused when both ends are the same
        kind, which keeps the graph bipartite and every actor-to-actor
        distance even. The base survey is not re-run; call init() again.

        Returns:
            True if the edge was added
        """
        size = len(self._names)
        added = self._connect(movie, actor)
        if len(self._names) != size:
            self._names.sort()
        return added

    def _connect(self, movie: str, actor: str) -> bool:
        m = self._register(movie)
        a = self._register(actor)
        if self._graph.vertex_count < len(self._names):
            self._graph.set_vertex_count(len(self._names))
        if self._movie[m] == self._movie[a]:
            kind = "movies" if self._movie[m] else "actors"
            logger.warning("refusing edge %r -- %r: both are %s", movie, actor, kind)
            return False
        self._graph.add_edge(m, a)
        return True

    # === QUERIES ===

    def init(self, actor: str) -> bool:
        """
        Make ``actor`` the base and survey the graph from it.

        Must be called again after the graph changes.

        Returns:
            False if the name is unknown or names a movie
        """
        v = self._names.retrieve(actor)
        if v is None:
            logger.error("Init: %s is not in the database", actor)
            return False
        if self._movie[v]:
            logger.error("Init: %s is a movie", actor)
            return False

        self._base_actor = actor
        self._bfs.reset()
        self._bfs.search_from(v)
        logger.debug("base actor %r (vertex %d) surveyed", actor, v)
        return True

    def distance(self, actor: str) -> int:
        """
        Degrees of separation between ``actor`` and the base actor.

        Returns:
            The number of movies separating the two actors, or
            NOT_FOUND (-3) for unknown names, IS_MOVIE (-1) for movies,
            UNREACHABLE (-2) for actors not connected to the base
        """
        v = self._names.retrieve(actor)
        if v is None:
            return NOT_FOUND
        if self._movie[v]:
            return IS_MOVIE
        color = self._bfs.color
        # Vertices added after the last survey are unknown to it
        if self._base_actor is None or v >= len(color) or color[v] is not Color.BLACK:
            return UNREACHABLE

        self._path = tree_path(self._bfs.parent, v)
        return self._bfs.distance[v] // 2

    def star(self, name: str) -> list[str] | None:
        """
        Names adjacent to ``name``: the cast of a movie or an actor's movies.

        Returns:
            Neighbor names in case-insensitive order, None if ``name`` is unknown
        """
        v = self._names.retrieve(name)
        if v is None:
            return None
        neighbors = [self._names.name(u) for u in self._graph.neighbors(v)]
        return sorted(neighbors, key=lambda s: (s.casefold(), s))

    def hint(self, prefix: str, max_suggestions: int | None = None) -> list[str]:
        if max_suggestions is None:
            max_suggestions = self.config.max_suggestions
        return self._names.hint(prefix, max_suggestions)

    def shuffle(self, seed: int | None = None) -> None:
        """Randomize adjacency order and re-survey from the base actor."""
        if seed is None:
            seed = self.config.shuffle_seed
        self._graph.shuffle(random.Random(seed))
        if self._base_actor is not None:
            self._bfs.reset()
            self._bfs.search_from(self._names.retrieve(self._base_actor))

    # === DISPLAY ===

    def show_path(self) -> str:
        """The last queried path, one name per line; movies are indented."""
        lines = [""]
        for i, name in enumerate(self.path_names):
            lines.append(("   | " if i % 2 else " ") + name)
        lines.append("")
        return "\n".join(lines) + "\n"

    def show_star(self, name: str) -> str:
        neighbors = self.star(name)
        if neighbors is None:
            return f"\n ** {name} is not in the database\n"
        lines = ["", f" {name}"]
        lines.extend(f"   | {n}" for n in neighbors)
        return "\n".join(lines) + "\n\n"

    def dump(self) -> str:
        """Diagnostic listing: adjacency lists, survey data and the name table."""
        parts = [self._graph.dump(), write_data(self._bfs)]
        parts.extend(
            f"name_[{v}] = {name}\tvrtx_[{name}] = {self._names.retrieve(name)}"
            for v, name in enumerate(self._names.names)
        )
        return "\n".join(parts) + "\n"
