#!/usr/bin/env python3
# run_logic.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Command-line interface for formula conversion, evaluation and validity checks

import sys
import argparse
from pathlib import Path
from typing import Dict, List

from parser import build_tree, height, infix_to_prefix, parse, ParseError
from logic import (
    EvaluationError,
    PreconditionViolation,
    check_cnf,
    evaluate,
    to_cnf_steps,
    truth_table,
)
from utils.dimacs_reader import (
    DimacsFormatError,
    dimacs_report,
    dimacs_to_infix,
    read_dimacs,
)
from utils.logger import configure_logging, get_logger
from utils.tree_visualizer import visualize_tree


def read_formula_argument(value: str) -> str:
    """Return the formula text, reading it from a file when prefixed with '@'.

    Raises:
        FileNotFoundError: If the referenced file doesn't exist
        ValueError: If the referenced file is empty
    """
    if not value.startswith("@"):
        return value

    path = Path(value[1:])
    try:
        content = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {path}")

    if not content:
        raise ValueError(f"Formula file is empty: {path}")
    return content


def parse_assignment(pairs: List[str]) -> Dict[str, bool]:
    """Parse NAME=VALUE pairs where VALUE is one of T/F/1/0/true/false.

    Raises:
        ValueError: A pair is missing '=' or has an unknown value
    """
    truthy = {"t", "1", "true"}
    falsy = {"f", "0", "false"}

    env = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got '{pair}'")
        lowered = value.strip().lower()
        if lowered not in truthy | falsy:
            raise ValueError(f"Unknown truth value '{value}' for {name}")
        env[name.strip()] = lowered in truthy
    return env


def cmd_prefix(args) -> int:
    print(infix_to_prefix(read_formula_argument(args.formula)))
    return 0


def cmd_tree(args) -> int:
    tree = build_tree(read_formula_argument(args.prefix), compact=args.compact)
    print(tree)
    return 0


def cmd_height(args) -> int:
    tree = build_tree(read_formula_argument(args.prefix), compact=args.compact)
    print(height(tree))
    return 0


def cmd_eval(args) -> int:
    tree = parse(read_formula_argument(args.formula))
    result = evaluate(tree, parse_assignment(args.assign))
    print("True" if result else "False")
    return 0


def cmd_table(args) -> int:
    tree = parse(read_formula_argument(args.formula))
    table = truth_table(tree)
    print(table.format())
    return 0


def cmd_cnf(args) -> int:
    tree = parse(read_formula_argument(args.formula))
    steps = to_cnf_steps(tree)

    if args.steps:
        print(f"1. Implication-Free: {steps.implication_free}")
        print(f"2. Negation Normal Form (NNF): {steps.negation_normal}")
        print(f"3. Conjunctive Normal Form (CNF): {steps.conjunctive_normal}")
    else:
        print(steps.conjunctive_normal)

    if args.check:
        report = check_cnf(str(steps.conjunctive_normal))
        print(f"Valid (tautology): {report.valid}")
    return 0


def cmd_check(args) -> int:
    report = check_cnf(read_formula_argument(args.formula))
    print(f"Number of false clauses : {report.false_clauses}")
    print(f"Number of true clauses : {report.true_clauses}")
    if report.valid:
        print("The CNF formula is valid (a tautology).")
    else:
        print("The CNF formula is NOT valid.")
    return 0


def cmd_dimacs(args) -> int:
    formula = read_dimacs(str(args.file))
    print(dimacs_to_infix(formula))

    if args.check:
        true_count, false_count = dimacs_report(formula)
        print(f"Number of non-tautology clauses: {false_count}")
        print(f"Number of tautology clauses: {true_count}")
        if false_count == 0:
            print("The DIMACS CNF formula is valid (a tautology).")
        else:
            print("The DIMACS CNF formula is NOT valid (contains non-tautology clauses).")
    return 0


def cmd_visualize(args) -> int:
    tree = parse(read_formula_argument(args.formula))
    if args.cnf:
        tree = to_cnf_steps(tree).conjunctive_normal
    rendered = visualize_tree(tree, args.output, fmt=args.format)
    return 0 if rendered else 1


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Logos Propositional Logic Toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Operators: + (OR), * (AND), ~ (NOT), > (implication)
Variables: single letters (A) or indexed names (P1, P10, ...)

Examples:
  python run_logic.py prefix "A > B * C"
  python run_logic.py tree "> A * B C"
  python run_logic.py tree --compact ">A*BC"
  python run_logic.py eval "(A > B) * ~C" A=T B=F C=F
  python run_logic.py table "A + B * C"
  python run_logic.py cnf --steps --check "~(A > B)"
  python run_logic.py check "(P + ~P) * (Q + ~Q)"
  python run_logic.py dimacs --check formula.cnf

A formula argument starting with '@' is read from that file.
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("prefix", help="Convert infix to prefix")
    p.add_argument("formula")
    p.set_defaults(handler=cmd_prefix)

    p = commands.add_parser("tree", help="Build a tree from prefix and print it as infix")
    p.add_argument("prefix")
    p.add_argument("--compact", action="store_true", help="Single-character prefix notation")
    p.set_defaults(handler=cmd_tree)

    p = commands.add_parser("height", help="Height of the tree built from prefix")
    p.add_argument("prefix")
    p.add_argument("--compact", action="store_true", help="Single-character prefix notation")
    p.set_defaults(handler=cmd_height)

    p = commands.add_parser("eval", help="Evaluate an infix formula")
    p.add_argument("formula")
    p.add_argument("assign", nargs="*", metavar="NAME=VALUE")
    p.set_defaults(handler=cmd_eval)

    p = commands.add_parser("table", help="Print the truth table of an infix formula")
    p.add_argument("formula")
    p.set_defaults(handler=cmd_table)

    p = commands.add_parser("cnf", help="Convert an infix formula to CNF")
    p.add_argument("formula")
    p.add_argument("--steps", action="store_true", help="Show every conversion stage")
    p.add_argument("--check", action="store_true", help="Check validity of the result")
    p.set_defaults(handler=cmd_cnf)

    p = commands.add_parser("check", help="Check validity of a CNF formula")
    p.add_argument("formula")
    p.set_defaults(handler=cmd_check)

    p = commands.add_parser("dimacs", help="Convert a DIMACS CNF file to infix")
    p.add_argument("file", type=Path)
    p.add_argument("--check", action="store_true", help="Check validity of the formula")
    p.set_defaults(handler=cmd_dimacs)

    p = commands.add_parser("visualize", help="Render the parse tree with Graphviz")
    p.add_argument("formula")
    p.add_argument("-o", "--output", default="parse_tree", help="Output base filename")
    p.add_argument("--format", default="png", help="Image format (png, svg, ...)")
    p.add_argument("--cnf", action="store_true", help="Render the CNF tree instead")
    p.set_defaults(handler=cmd_visualize)

    return parser


def main(argv=None) -> int:
    """Main entry point for the toolkit.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        return args.handler(args)

    except DimacsFormatError as e:
        logger.error(f"DIMACS error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (EvaluationError, PreconditionViolation, FileNotFoundError, ValueError) as e:
        logger.error(f"Evaluation error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
