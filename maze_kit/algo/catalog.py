from typing import Dict, Optional, Type

from maze_kit.algo.base import Generator
from maze_kit.algo.binary_tree import BinaryTree
from maze_kit.algo.dfs import RecursiveBacktracker
from maze_kit.algo.division import RecursiveDivision
from maze_kit.algo.ellers import Ellers
from maze_kit.algo.kruskal import Kruskals
from maze_kit.algo.prim import PrimsAlgorithm
from maze_kit.algo.sidewinder import Sidewinder
from maze_kit.algo.wilson import Wilsons
from maze_kit.rng.base import RandomSource
from maze_kit.rng.lfib4 import LFib4
from maze_kit.rng.python_random import PythonRandom
from maze_kit.rng.taus88 import Taus88
from maze_kit.rng.xorshift import XorShift32

ALGORITHMS: Dict[str, Type[Generator]] = {
    "binary": BinaryTree,
    "sidewinder": Sidewinder,
    "ellers": Ellers,
    "kruskal": Kruskals,
    "prim": PrimsAlgorithm,
    "dfs": RecursiveBacktracker,
    "division": RecursiveDivision,
    "wilson": Wilsons,
}

# Algorithms that always produce a spanning tree of the grid graph
SPANNING_TREE = ("kruskal", "prim", "dfs", "wilson")

RNGS: Dict[str, Type[RandomSource]] = {
    "xorshift": XorShift32,
    "taus88": Taus88,
    "lfib4": LFib4,
    "python": PythonRandom,
}


def make_rng(name: str, seed: Optional[int] = None) -> RandomSource:
    try:
        cls = RNGS[name]
    except KeyError:
        raise ValueError(f"Unknown random source '{name}', expected one of {sorted(RNGS)}") from None
    return cls(seed)


def generate_maze(algo: str, width: int, height: int, seed: Optional[int] = None,
                  rng: Optional[RandomSource] = None, **options) -> Generator:
    """Builds the named generator, runs it once and returns it."""
    try:
        cls = ALGORITHMS[algo]
    except KeyError:
        raise ValueError(f"Unknown algorithm '{algo}', expected one of {sorted(ALGORITHMS)}") from None
    generator = cls(width, height, rng=rng, seed=seed, **options)
    generator.generate()
    return generator
