"""A poet that bridges words using a word-affinity graph built from a corpus."""

from __future__ import annotations

import argparse
import os
import re
from collections.abc import Iterator
from itertools import pairwise

from .graph import Graph
from .vertices_graph import ConcreteVerticesGraph

WORD_MAX = 1024
DEFAULT_CORPUS = "/../src/poet/mugar-omni-theater.txt"
DEFAULT_TEXT = "This is my theater system."

_SEPARATORS = re.compile(r"[ \n]")


def _corpus_words(text: str) -> Iterator[str]:
    """Yield lower-cased tokens split on spaces and newlines, empty ones included."""
    for token in _SEPARATORS.split(text):
        if len(token) >= WORD_MAX:
            raise ValueError("Word is too long.")
        yield token.lower()


def _link(graph: Graph[str], last_word: str, new_word: str) -> None:
    if not new_word or not last_word:
        return
    weight = graph.targets(last_word).get(new_word, 0) + 1
    graph.set(last_word, new_word, weight)


class GraphPoet:
    """Builds a word-affinity graph from a corpus file and writes poems with it.

    Each pair of adjacent words in the corpus adds weight to the edge between
    them. A poem is written by inserting, between each pair of input words,
    the word that best bridges them in the graph.
    """

    def __init__(
        self,
        graph: Graph[str],
        poet_file_path: str,
        absolute_path: bool = False,
    ) -> None:
        """Read the corpus at poet_file_path into graph.

        Unless absolute_path is true, the path is appended to the current
        working directory as written, so it should begin with a separator.
        Raises OSError if the file cannot be read and ValueError if a word
        is too long.
        """
        self._graph = graph
        path = os.fspath(poet_file_path)
        if not absolute_path:
            path = os.getcwd() + path
        with open(path, encoding="utf-8") as corpus:
            text = corpus.read()

        last_word = ""
        for word in _corpus_words(text):
            _link(graph, last_word, word)
            last_word = word

    def _bridge(self, previous: str, following: str) -> str:
        outgoing = self._graph.targets(previous)
        best, best_weight = "", 0
        for word, weight in self._graph.sources(following).items():
            if word not in outgoing:
                continue
            total = weight + outgoing[word]
            if total > best_weight:
                best, best_weight = word, total
        return best

    def poem(self, input: str) -> str:
        """Return input with bridge words inserted between its words."""
        words = input.split()
        if not words:
            return ""
        parts = [words[0]]
        for previous, following in pairwise(words):
            bridge = self._bridge(previous.lower(), following.lower())
            if bridge:
                parts.append(bridge)
            parts.append(following)
        return " ".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Print a poem written from a corpus file."""
    parser = argparse.ArgumentParser(description="Write a poem from a corpus.")
    parser.add_argument("corpus", nargs="?", default=DEFAULT_CORPUS)
    parser.add_argument("--text", default=DEFAULT_TEXT)
    parser.add_argument("--absolute", action="store_true")
    args = parser.parse_args(argv)

    poet = GraphPoet(ConcreteVerticesGraph(), args.corpus, args.absolute)
    print(poet.poem(args.text))
    return 0