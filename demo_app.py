#!/usr/bin/env python3
"""
showcase for seqalg

runs every algorithm against small integer and text samples, plus a
single-use custom sequence, and logs each result as one line of text.
"""

import argparse
import json
import logging
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional

import seqalg as sa
from seqalg import IGNORE_CASE, Result

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class ShowcaseConfig:
    """sample data for the showcase"""
    ints_a: List[int] = field(default_factory=lambda: [1, 2, 2, 3, 4])
    ints_b: List[int] = field(default_factory=lambda: [3, 4, 4, 5])
    strings_a: List[str] = field(default_factory=lambda: ["a", "b", "B", "c"])
    strings_b: List[str] = field(default_factory=lambda: ["b", "C", "d"])
    custom: List[int] = field(default_factory=lambda: [10, 20, 20, 30])
    custom_other: List[int] = field(default_factory=lambda: [20, 30, 40])


def load_config(path: Optional[str] = None) -> ShowcaseConfig:
    """defaults, overlaid with the keys of a json object file when a path is given"""
    if path is None:
        return ShowcaseConfig()

    with Path(path).open('r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"config file must contain a json object, got {type(data).__name__}")

    known = {f.name for f in fields(ShowcaseConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")

    for key, value in data.items():
        if not isinstance(value, list):
            raise ValueError(f"config key '{key}' must be a list")

    return ShowcaseConfig(**data)


class CustomSequence:
    """a hand-written iterable that yields its items through a generator"""

    def __init__(self, data: Iterable[Any]):
        self._data = list(data) if data is not None else []

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self._data)):
            yield self._data[i]


def stringify(items: Iterable[Any]) -> str:
    return "[" + ", ".join("null" if x is None else str(x) for x in items) + "]"


def render(result: Any) -> str:
    """text form of a scalar, a materialized sequence or a Result"""
    if isinstance(result, Result):
        if result.is_success:
            return render(result.value)
        return f"failed: {result.error}"
    if isinstance(result, bool):
        return str(result)
    if isinstance(result, (list, tuple, CustomSequence)):
        return stringify(result)
    return str(result)


class Showcase:
    """collects one rendered line per algorithm call"""

    def __init__(self):
        self.lines: List[str] = []

    def emit(self, title: str, result: Any) -> str:
        line = f"{title}: {render(result)}"
        self.lines.append(line)
        logger.info(line)
        return line

    def section(self, title: str) -> None:
        self.lines.append(f"--- {title} ---")
        logger.info(f"--- {title} ---")

    def ints(self, a: List[int], b: List[int]) -> None:
        self.section("TEST: INTEGERS")
        self.emit("A", a)
        self.emit("B", b)

        self.emit("All(A, >0)", sa.all_(a, lambda x: x > 0))
        self.emit("Any(A, ==2)", sa.any_(a, lambda x: x == 2))
        self.emit("Contains(A, 3)", sa.contains(a, 3))
        self.emit("Distinct(A)", sa.distinct(a))
        self.emit("ElementAt(A, 2)", sa.element_at(a, 2))
        self.emit("Except(A, B)", sa.except_(a, b))
        self.emit("First(A, even)", sa.first(a, lambda x: x % 2 == 0))
        self.emit("Last(A, <4)", sa.last(a, lambda x: x < 4))
        self.emit("Intersect(A,B)", sa.intersect(a, b))
        self.emit("Count(A, ==2)", sa.count(a, lambda x: x == 2))
        self.emit("SequenceEqual(A, A)", sa.sequence_equal(a, a))
        self.emit("SequenceEqual(A, B)", sa.sequence_equal(a, b))
        self.emit("Single(A, ==3)", sa.single(a, lambda x: x == 3))
        self.emit("Single(A, ==2)", sa.single(a, lambda x: x == 2))
        self.emit("SkipWhile(A, <3)", sa.skip_while(a, lambda x: x < 3))
        self.emit("Where(A, >=3)", sa.where(a, lambda x: x >= 3))
        self.emit("Union(A,B)", sa.union(a, b))

    def strings(self, a: List[str], b: List[str]) -> None:
        self.section("TEST: STRINGS")
        self.emit("A", a)
        self.emit("B", b)

        same_ci: Callable[[str, str], bool] = IGNORE_CASE.equals

        self.emit("All(A, non-empty)", sa.all_(a, lambda s: bool(s)))
        self.emit("Any(A, equals 'B')", sa.any_(a, lambda s: s == "B"))
        self.emit("Contains(A, 'b')", sa.contains(a, "b"))
        self.emit("Contains(A, 'b', ignore case)", sa.contains(a, "b", IGNORE_CASE))
        self.emit("Contains(A, 'B', ignore case)", sa.contains(a, "B", IGNORE_CASE))
        self.emit("Distinct(A)", sa.distinct(a))
        self.emit("Distinct(A, ignore case)", sa.distinct(a, IGNORE_CASE))
        self.emit("Except(A,B) default", sa.except_(a, b))
        self.emit("Except(A,B) ignore case", sa.except_(a, b, IGNORE_CASE))
        self.emit("Intersect(A,B) default", sa.intersect(a, b))
        self.emit("Intersect(A,B) ignore case", sa.intersect(a, b, IGNORE_CASE))
        self.emit("Union(A,B)", sa.union(a, b))
        self.emit("Union(A,B) ignore case", sa.union(a, b, IGNORE_CASE))
        self.emit("ElementAt(A, 1)", sa.element_at(a, 1))
        self.emit("First(A, 'b' ignore case)", sa.first(a, lambda s: same_ci(s, "b")))
        self.emit("Last(A, length==1)", sa.last(a, lambda s: len(s) == 1))
        self.emit("Count(A, 'b' ignore case)", sa.count(a, lambda s: same_ci(s, "b")))
        self.emit("SequenceEqual(A, A)", sa.sequence_equal(a, a))
        self.emit("Single(A, equals 'c')", sa.single(a, lambda s: s == "c"))
        self.emit("Single(A, 'b' ignore case)", sa.single(a, lambda s: same_ci(s, "b")))
        self.emit("SkipWhile(A, =='a')", sa.skip_while(a, lambda s: s == "a"))
        self.emit("Where(A, !='B' ignore case)", sa.where(a, lambda s: not same_ci(s, "B")))

    def custom(self, data: List[int], other: List[int]) -> None:
        self.section("TEST: CUSTOM SEQUENCE")
        custom = CustomSequence(data)

        self.emit("Custom", custom)
        self.emit("List", other)

        self.emit("Distinct(Custom)", sa.distinct(custom))
        self.emit("Intersect(Custom, List)", sa.intersect(custom, other))
        self.emit("Except(Custom, List)", sa.except_(custom, other))
        self.emit("Where(Custom, >15)", sa.where(custom, lambda x: x > 15))
        self.emit("SequenceEqual(Custom, SameCustom)", sa.sequence_equal(custom, CustomSequence(data)))
        self.emit("ElementAt(Custom, 2)", sa.element_at(custom, 2))

        # the two-source operators must cope with sources that can be read only once
        self.emit("Union(Once(Custom), Once(List))", sa.union(sa.once(data), sa.once(other)))

    def run(self, config: ShowcaseConfig) -> List[str]:
        logger.debug(f"config: {asdict(config)}")
        logger.info("=== RUNNING seqalg SHOWCASE ===")
        self.ints(config.ints_a, config.ints_b)
        self.strings(config.strings_a, config.strings_b)
        self.custom(config.custom, config.custom_other)
        logger.info("=== SHOWCASE COMPLETE ===")
        return self.lines


def run_showcase(config: Optional[ShowcaseConfig] = None) -> List[str]:
    """run the whole showcase and return the rendered lines"""
    return Showcase().run(config or ShowcaseConfig())


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run every seqalg algorithm on sample data')
    parser.add_argument('--config', help='JSON file overriding the sample sequences')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """main entry point for the showcase"""
    args = create_cli_interface().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error(f"could not load config {args.config}: {e}")
        return 1

    run_showcase(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
