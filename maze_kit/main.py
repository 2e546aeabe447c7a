import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_kit' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_kit.algo.catalog import ALGORITHMS, RNGS, make_rng


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Kit: maze generation algorithms over a bit-packed grid")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=10, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=sorted(ALGORITHMS), help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--rng", type=str, default=None, choices=sorted(RNGS), help="Random source (default: the algorithm's own)")
    gen_parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), help="Start node (prim, dfs only)")
    gen_parser.add_argument("--tiles", action="store_true", help="Print the tile view instead of the box drawing")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--algo", type=str, nargs="*", default=None, choices=sorted(ALGORITHMS), help="Algorithms to time (default: all)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_kit")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")

        cls = ALGORITHMS[args.algo]
        options = {}
        if args.rng:
            options["rng"] = make_rng(args.rng, args.seed)
        else:
            options["seed"] = args.seed
        if args.start:
            from maze_kit.algo.base import StartPositionGenerator
            if not issubclass(cls, StartPositionGenerator):
                parser.error(f"--start is not supported by {args.algo}")
            options["start"] = tuple(args.start)

        generator = cls(args.width, args.height, **options)
        generator.generate()

        if args.tiles:
            from maze_kit.viz.tile import TileMaze
            print(TileMaze(generator.grid), end="")
        else:
            print(generator.grid, end="")

        if args.stats:
            from maze_kit.core.complexity import MazeStats
            stats = MazeStats.calculate_stats(generator.grid)
            logger.info(f"Stats: {stats}")

    elif args.command == "benchmark":
        logger.info(f"Running Generator Benchmark Suite (Size: {args.size}x{args.size})...")
        names = args.algo or sorted(ALGORITHMS)

        print(f"\n{'ALGORITHM':<12} | {'TIME (s)':<10} | {'CELLS/S':<12} | {'DEAD ENDS':<10}")
        print("-" * 54)

        from maze_kit.core.complexity import MazeStats
        for name in names:
            generator = ALGORITHMS[name](args.size, args.size, seed=args.seed)

            t_start = time.perf_counter()
            generator.generate()
            duration = time.perf_counter() - t_start

            stats = MazeStats.calculate_stats(generator.grid)
            speed = generator.grid.size / duration if duration > 0 else float("inf")
            print(f"{name:<12} | {duration:<10.4f} | {speed:<12,.0f} | {stats['dead_ends']:<10}")


if __name__ == "__main__":
    main()
