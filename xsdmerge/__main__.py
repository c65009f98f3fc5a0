import argparse
import logging
import sys
from pathlib import Path

from lxml import etree

from xsdmerge import document
from xsdmerge.checks import TypeCoverageCheck
from xsdmerge.gen.cpp import CppGenerator
from xsdmerge.model import CasePolicy
from xsdmerge.utils import collect_inputs, load_type_overrides, merge_files

logger = logging.getLogger("xsdmerge")


def load_merged(args):
    policy = CasePolicy(args.case_insensitive)
    logger.info("Building file list...")
    inputs = collect_inputs(args.input)
    logger.info(f"Found {len(inputs)} schema files in {args.input}")
    return merge_files(inputs, policy), policy


def run_merge(args):
    merged, _ = load_merged(args)
    document.dump(merged, args.output)


def run_generate(args):
    merged, policy = load_merged(args)
    overrides = load_type_overrides(args.types) if args.types else {}

    coverage = TypeCoverageCheck(overrides, policy)
    coverage.check(merged)
    if coverage.summary():
        logger.warning(coverage.summary())

    if args.output is None:
        CppGenerator(sys.stdout, overrides, policy).generate(merged)
        return
    with open(args.output, "w") as dest:
        CppGenerator(dest, overrides, policy).generate(merged)
    logger.info(f"Wrote declarations to {args.output}")


def add_common_args(parser):
    parser.add_argument('input', type=Path, help="schema file, or directory to look for .xsd files in")
    parser.add_argument('-c', '--case-insensitive', action='store_true',
                        help="case insensitive string comparison, default false")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="xsdmerge")
    parser.add_argument('-v', '--verbose', action='store_true', help="log debug output")
    subcmds = parser.add_subparsers(required=True, dest='command')

    merge = subcmds.add_parser("merge", help="merge schemas into a single schema file")
    add_common_args(merge)
    merge.add_argument('-o', '--output', type=Path, required=True, help="path to output file")

    gen = subcmds.add_parser("generate", help="generate C++ declarations from the merged schemas")
    add_common_args(gen)
    gen.add_argument('-o', '--output', type=Path, help="path to output file, default stdout")
    gen.add_argument('-t', '--types', type=Path, help="JSON file with type overrides")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler()
        ]
    )

    try:
        if args.command == 'merge':
            run_merge(args)
        elif args.command == 'generate':
            run_generate(args)
    except (OSError, ValueError, etree.XMLSyntaxError) as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
