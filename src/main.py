"""
Main entry point for the letter box solver.

Usage:
    python -m src.main solve SAT ERN OIL DMG --words words.txt
    python -m src.main hint SAT-ERN-OIL-DMG --words words.txt --chain "MEDALS"
    python -m src.main check SAT-ERN-OIL-DMG --chain "MEDALS SORTING" --words words.txt
    python -m src.main generate --words words.txt --seed 42
    python -m src.main solve SAT-ERN-OIL-DMG --words words.txt --json
    python -m src.main --config config.yaml --verbose solve SAT-ERN-OIL-DMG
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .letterbox import (
    ConfigurationError,
    HintAdvisor,
    LetterBox,
    PuzzleGenerator,
    SolutionSearch,
    SolverConfig,
    WordIndex,
    load_word_list,
)
from .verifiers import filter_cascading_errors, parse_chain, parse_sides, verify_chain


def load_config(config_path: str) -> SolverConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SolverConfig(**data)


def _load_corpus(args: argparse.Namespace, config: SolverConfig, required: bool = True) -> Optional[List[str]]:
    path = args.words or config.word_list
    if path is None:
        if required:
            raise FileNotFoundError("No word list given (use --words or set word_list in the config)")
        return None
    return load_word_list(path)


def _build(args: argparse.Namespace, config: SolverConfig, required: bool = True):
    box = LetterBox(puzzle=parse_sides(" ".join(args.sides)))
    corpus = _load_corpus(args, config, required=required)
    index = WordIndex.build(box, corpus) if corpus is not None else None
    return box, index


def cmd_solve(args: argparse.Namespace, config: SolverConfig) -> int:
    box, index = _build(args, config)
    search_config = config.search
    if args.top is not None:
        search_config = search_config.model_copy(update={"top_n": args.top})

    search = SolutionSearch(index=index, config=search_config)
    solutions = search.get_top_solutions()

    if args.json:
        print(json.dumps([s.model_dump() for s in solutions]))
        return 0

    print(f"Puzzle: {box.puzzle}")
    print(f"Valid words: {len(index)}")
    if not solutions:
        print("No solutions found")
        return 0
    for rank, solution in enumerate(solutions, start=1):
        print(f"{rank}. {' -> '.join(solution.words)} (score {solution.score:.1f})")
    return 0


def cmd_hint(args: argparse.Namespace, config: SolverConfig) -> int:
    box, index = _build(args, config)
    advisor = HintAdvisor(index=index, limit=config.hint_limit)
    hints = advisor.suggest(parse_chain(args.chain or ""))

    if args.json:
        print(json.dumps(hints))
        return 0

    if not hints:
        print("No helpful words left")
        return 0
    for word in hints:
        print(word)
    return 0


def cmd_check(args: argparse.Namespace, config: SolverConfig) -> int:
    box, index = _build(args, config, required=False)
    result = verify_chain(box, parse_chain(args.chain), index=index)

    if args.json:
        print(result.model_dump_json())
        return 0 if result.valid else 1

    for error in filter_cascading_errors(result.errors):
        print(f"ERROR {error.code}: {error.message}")
    for warning in result.warnings:
        print(f"WARNING {warning.code}: {warning.message}")
    if result.complete:
        print(f"Solved! Score: {result.score:.1f}")
    elif result.valid:
        print(f"Valid so far, {len(result.missing_letters)} letters to go")
    return 0 if result.valid else 1


def cmd_generate(args: argparse.Namespace, config: SolverConfig) -> int:
    generator_config = config.generator
    if args.seed is not None:
        generator_config = generator_config.model_copy(update={"seed": args.seed})

    corpus = _load_corpus(args, config, required=False) or []
    generator = PuzzleGenerator(corpus=corpus, config=generator_config)
    puzzle = generator.generate()

    if args.json:
        print(puzzle.model_dump_json())
    else:
        print(puzzle)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve, check and generate letter box puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_list: words.txt
  hint_limit: 5
  search:
    max_depth: 10
    time_limit: 15
    max_solutions: 20
  generator:
    known_puzzle_probability: 0.7
    seed: 42
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_json_arg(sub: argparse.ArgumentParser) -> None:
        # SUPPRESS keeps a --json given before the sub-command
        sub.add_argument(
            "--json",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Print machine-readable output"
        )

    def add_puzzle_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "sides",
            nargs="+",
            help="Puzzle sides, e.g. SAT-ERN-OIL-DMG or SAT ERN OIL DMG"
        )
        sub.add_argument(
            "--words", "-w",
            help="Path to the word list (one word per line)"
        )
        add_json_arg(sub)

    solve = subparsers.add_parser("solve", help="Find the best word chains")
    add_puzzle_args(solve)
    solve.add_argument("--top", "-n", type=int, help="Number of solutions to show")
    solve.set_defaults(handler=cmd_solve)

    hint = subparsers.add_parser("hint", help="Suggest next words")
    add_puzzle_args(hint)
    hint.add_argument("--chain", help="Words played so far, e.g. \"MEDALS SORT\"")
    hint.set_defaults(handler=cmd_hint)

    check = subparsers.add_parser("check", help="Verify a chain of words")
    add_puzzle_args(check)
    check.add_argument("--chain", required=True, help="Words to check, e.g. \"MEDALS SORTING\"")
    check.set_defaults(handler=cmd_check)

    generate = subparsers.add_parser("generate", help="Generate a new puzzle")
    generate.add_argument("--words", "-w", help="Path to the word list used to probe new puzzles")
    generate.add_argument("--seed", type=int, help="Random seed for reproducible puzzles")
    add_json_arg(generate)
    generate.set_defaults(handler=cmd_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else SolverConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        return args.handler(args, config)
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
