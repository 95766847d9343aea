"""Command-line interface."""

import logging
import random
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Mapping, Tuple

from graphedit.config import EditorConfig
from graphedit.errors import GraphError
from graphedit.logs import fatal, setup_logging
from graphedit.model import GraphType
from graphedit.report import Reporter
from graphedit.session import Session, Variant, load_graph
from graphedit.shell import Shell


def main():
    parser, commands = get_parser()
    args = parser.parse_args()
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    cfg = EditorConfig.find(args.config)
    setup_logging(sys.stderr, log_level, exit_level, cfg["color"])

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args, cfg)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="graphedit", description="tool for editing small graphs"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_shell = commands.add_parser("shell", help="edit graphs interactively")

    parser_info = commands.add_parser("info", help="show graph information")
    parser_info.add_argument("file", help="graph file (*.txt)")
    parser_info.add_argument(
        "-d", "--degrees", action="store_true", help="show vertex degrees"
    )
    parser_info.add_argument(
        "-H", "--hinges", action="store_true", help="show hinge vertices"
    )

    parser_random = commands.add_parser("random", help="generate a random graph")
    parser_random.add_argument("count", type=int, help="number of vertices to draw")
    parser_random.add_argument("output", help="graph file to write (*.txt)")
    parser_random.add_argument(
        "--directed", action="store_true", help="generate a directed graph"
    )
    parser_random.add_argument(
        "--weighted", action="store_true", help="generate a weighted graph"
    )
    parser_random.add_argument("--min", type=int, help="minimum edge weight")
    parser_random.add_argument("--max", type=int, help="maximum edge weight")
    parser_random.add_argument("--seed", type=int, help="random seed")

    for subparser in [parser_shell, parser_info, parser_random]:
        subparser.add_argument(
            "-c", "--config", type=Path, help="configuration file (YAML)"
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def command_shell(args: Namespace, cfg: EditorConfig):
    session = Session(cfg["names_file"])
    shell = Shell(
        session, min_weight=cfg["min_weight"], max_weight=cfg["max_weight"]
    )
    shell.run()


def command_info(args: Namespace, cfg: EditorConfig):
    try:
        graph = load_graph(args.file)
    except GraphError as ex:
        fatal("%s", ex)
    reporter = Reporter()
    print(reporter.summary(graph), end="")
    if args.degrees:
        print(reporter.degrees(graph), end="")
    if args.hinges:
        print(reporter.hinges(graph), end="")


def command_random(args: Namespace, cfg: EditorConfig):
    variant = Variant.WEIGHTED if args.weighted else Variant.UNWEIGHTED
    graph_type = GraphType.DIRECTED if args.directed else GraphType.UNDIRECTED
    min_weight = cfg["min_weight"] if args.min is None else args.min
    max_weight = cfg["max_weight"] if args.max is None else args.max
    session = Session(cfg["names_file"])
    try:
        graph = session.generate(
            args.count,
            variant,
            graph_type,
            min_weight,
            max_weight,
            rng=random.Random(args.seed),
        )
        session.save(args.output)
    except GraphError as ex:
        fatal("%s", ex)
    print(f'Saved {len(graph)} vertices to "{args.output}".')
