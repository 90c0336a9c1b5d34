"""Word-graph primitives: candidate generation and the shared frontier."""

from word_network.graph.frontier import Frontier
from word_network.graph.variants import is_distance_one, split_word, variants_of

__all__ = ["Frontier", "is_distance_one", "split_word", "variants_of"]
