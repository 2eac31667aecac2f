"""
Entry point: python -m physmath

Прогоняет эталонные случаи всех формул и завершается с кодом 0, если все
случаи прошли, иначе с кодом 1.
"""

import argparse
import sys

from physmath.core.logging import setup_logging
from physmath.self_test import SelfTestConfig, run_self_tests


def main(argv: list[str] | None = None) -> int:
    """Запуск self-test прогона.

    Args:
        argv: аргументы командной строки (default: sys.argv[1:])

    Returns:
        Код завершения процесса
    """
    parser = argparse.ArgumentParser(
        prog="physmath",
        description="Run the reference cases of the complex number type and physics formulas.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for random complex operands")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details")
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else "INFO")

    results = run_self_tests(SelfTestConfig(seed=args.seed))
    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
