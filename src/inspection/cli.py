"""CLI: инспекция спецзначений IEEE 754 из командной строки.

Команды:
- classify VALUE...: классификация значений
- compare A B: сравнение пары и их обратных величин
- demo: демонстрационные сценарии (acos(2.0), log(0.0), 1/±x)

--json на любой команде печатает отчёты строками JSON, проверенными по
контрактам.
"""

import argparse
import logging
import sys
from typing import Final, Optional, Sequence

from src.inspection.report import ReportConfig, print_classification, print_comparison
from src.inspection.scenarios import run_demo

logger = logging.getLogger(__name__)

COMMANDS: Final[tuple[str, ...]] = ("classify", "compare", "demo")


def _is_float_text(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def parse_float_arg(text: str) -> float:
    """Разбор значения по правилам float() (nan, inf, -0.0, 1e-300)."""
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a floating-point value: {text!r}")


def separate_values(argv: Sequence[str]) -> list[str]:
    """
    Перенос значений команды за разделитель "--".

    argparse считает опцией любой токен с "-", кроме -\\d+ и -\\d*.\\d+,
    поэтому -1e5 или -inf без "--" не распознаются как значения. Токены после
    имени команды, которые принимает float(), переносятся за "--"; опции
    команды остаются перед ним. Если "--" уже указан, argv не меняется.

    Examples:
        >>> separate_values(["classify", "-1e5", "--no-bits"])
        ['classify', '--no-bits', '--', '-1e5']
    """
    args = list(argv)
    if "--" in args:
        return args

    for i, token in enumerate(args):
        if token not in COMMANDS:
            continue
        tail = args[i + 1:]
        values = [t for t in tail if _is_float_text(t)]
        if not values:
            return args
        options = [t for t in tail if not _is_float_text(t)]
        return args[: i + 1] + options + ["--"] + values

    return args


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.inspection",
        description="Inspect IEEE 754 special values (NaN, infinities, signed zero)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify values (negative values such as -inf or -1e-300 are accepted as is)
  python -m src.inspection classify 1.0 nan -inf -0.0 -1e-300

  # Compare two values and their reciprocals
  python -m src.inspection compare 0.0 -0.0

  # Run the built-in acos/log/reciprocal demonstration as JSON lines
  python -m src.inspection demo --json
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Classify one or more values")
    classify_parser.add_argument("values", nargs="+", type=parse_float_arg, metavar="VALUE")
    classify_parser.add_argument("--no-bits", action="store_true",
                                 help="Do not print the bit pattern")

    compare_parser = subparsers.add_parser("compare", help="Compare two values and their reciprocals")
    compare_parser.add_argument("a", type=parse_float_arg)
    compare_parser.add_argument("b", type=parse_float_arg)

    demo_parser = subparsers.add_parser("demo", help="Run the demonstration scenarios")
    demo_parser.add_argument("--no-bits", action="store_true",
                             help="Do not print the bit pattern")

    for command_parser in (classify_parser, compare_parser, demo_parser):
        command_parser.add_argument("--json", action="store_true",
                                    help="Print reports as JSON lines")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Точка входа. Возвращает код завершения процесса."""
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(separate_values(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("command: %s", args.command)

    config = ReportConfig(
        show_bits=not getattr(args, "no_bits", False),
        json_output=args.json,
    )

    if args.command == "classify":
        for value in args.values:
            print_classification(value, config=config, stream=sys.stdout)
    elif args.command == "compare":
        print_comparison(args.a, args.b, config=config, stream=sys.stdout)
    elif args.command == "demo":
        run_demo(config, stream=sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
