"""Script for running the automated scoring exam against the `Bag` container.

The exam consists of five independent groups of checks (insertion and queries, copying,
clone-based assignment, erasure, and concatenation). Each group stops at its first failed check and
then scores zero; otherwise it scores its full number of points.

Example invocation:
    python ./arraybag/cli/exam.py \
        num_random_items=3000 \
        save_results=True \
        results_dir=[RESULTS_DIR]
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from arraybag import Bag
from arraybag.utils.config import get_config as cli_get_config
from arraybag.utils.misc import sample_values, set_random_seed

logger = logging.getLogger(__name__)

RESULTS_FILE_NAME = "exam_results.json"


@dataclass
class ExamConfig:
    num_random_items: int = 3000  # Random insertions at the end of the first group
    random_seed: int = 0

    save_results: bool = False  # Whether to write a JSON summary of the scores
    results_dir: str = "."  # Directory to save the results in


@dataclass
class ExamResults:
    points: Dict[str, int] = field(default_factory=dict)
    total: int = 0
    max_total: int = 0


def _report(passed: bool) -> bool:
    print("Test passed." if passed else "Test failed.")
    return passed


def _check_size(bag: Bag[float], expected: int) -> bool:
    return _report(bag.size() == expected)


def check_insert_and_queries(config: ExamConfig) -> bool:
    bag: Bag[float] = Bag()

    print("A. Testing size for an empty bag.")
    if not _check_size(bag, 0):
        return False

    for expected_size, (step, value) in enumerate(zip("BCDEF", [4.0, 2.0, 1.0, 3.0, 2.0]), 1):
        print(f"{step}. Inserting {value} into the bag, then checking size.")
        bag.insert(value)
        if not _check_size(bag, expected_size):
            return False

    print("\tThen checking occurrences of 2.0.")
    if not _report(bag.occurrences(2.0) == 2):
        return False

    print("G. Inserting 5.0, 6.0, 7.0 into the bag, then checking size.")
    for value in [5.0, 6.0, 7.0]:
        bag.insert(value)
    if not _check_size(bag, 8):
        return False

    print("H. Inserting two more 2.0's, then checking occurrences of 2.0.")
    bag.insert(2.0)
    bag.insert(2.0)
    if not _report(bag.occurrences(2.0) == 4):
        return False

    print(f"I. Inserting {config.num_random_items} random items in [0, 50), then checking size.")
    for value in sample_values(config.num_random_items):
        bag.insert(value)
    return _check_size(bag, config.num_random_items + 10)


def check_copy_constructor(config: ExamConfig) -> bool:
    bag: Bag[float] = Bag()

    print("A. Testing the copy constructor on an empty bag.")
    if not _check_size(Bag.from_bag(bag), 0):
        return False

    print("B. Testing the copy constructor with a 4-item bag, and then the == operator.")
    for _ in range(4):
        bag.insert(1.0)
    copied = Bag.from_bag(bag)
    if not _report(bag == copied and copied == bag):
        return False

    bag.insert(1.0)
    print("C. Checking size of the copy after altering the original.")
    if not _check_size(copied, 4):
        return False
    print("D. Checking size of the altered original.")
    return _check_size(bag, 5)


def check_clone_assignment(config: ExamConfig) -> bool:
    bag: Bag[float] = Bag()

    print("A. Testing that assigning a clone works for an empty bag.")
    assigned = Bag.from_bag(bag)
    assigned.insert(1.0)
    assigned = bag.copy()
    if not _check_size(assigned, 0):
        return False

    print("B. Testing assignment with a 4-item bag, then altering the original by an insertion.")
    for _ in range(4):
        bag.insert(1.0)
    assigned = bag.copy()
    bag.insert(1.0)
    if not _report(bag.occurrences(1.0) == 5 and assigned.occurrences(1.0) == 4):
        return False
    print("\tTesting size of the assigned bag.")
    if not _check_size(assigned, 4):
        return False
    print("\tTesting size of the original.")
    if not _check_size(bag, 5):
        return False

    print("C. Testing a self-assignment.")
    bag = bag.copy()
    clone = bag.copy()
    return _report(clone == bag and bag == clone)


def check_erase(config: ExamConfig) -> bool:
    bag: Bag[float] = Bag()

    print("Testing erase from an empty bag (should have no effect).")
    bag.erase(0.0)
    if not _check_size(bag, 0):
        return False

    values = [8.0, 6.0, 10.0, 1.0, 7.0, 10.0, 15.0, 3.0, 13.0, 2.0, 5.0, 11.0, 14.0, 4.0, 12.0]
    print(f"Inserting these: {' '.join(f'{v:g}' for v in values)}")
    for value in values:
        bag.insert(value)
    if not _check_size(bag, 15):
        return False

    print("Testing capacity, which should be 16.")
    if not _report(bag.capacity == 16):
        print(bag)
        return False

    print("Erasing one 0 (which is not in the bag, so the bag should be unchanged).")
    if not _report(not bag.erase_one(0.0)) or not _check_size(bag, 15):
        return False

    # Each step is (value, whether to erase only one occurrence, expected size afterwards).
    steps = [
        (6.0, False, 14),
        (10.0, True, 13),
        (1.0, False, 12),
        (15.0, False, 11),
        (5.0, False, 10),
        (11.0, False, 9),
        (3.0, False, 8),
        (13.0, False, 7),
        (2.0, False, 6),
        (14.0, True, 5),
        (4.0, False, 4),
        (12.0, False, 3),
        (8.0, False, 2),
        (7.0, False, 1),
        (10.0, True, 0),
    ]
    for value, only_one, expected_size in steps:
        if only_one:
            print(f"Erasing one {value:g}.")
            if not _report(bag.erase_one(value)):
                return False
        else:
            print(f"Erasing all {value:g}.")
            bag.erase(value)
        if not _check_size(bag, expected_size):
            return False

    print("Testing capacity again, which should still be 16.")
    if not _report(bag.capacity == 16):
        return False

    print("Trimming to size, after which capacity should be 1.")
    bag.trim_to_size()
    if not _report(bag.capacity == 1):
        print(bag)
        return False

    print("Inserting 5000 and three 5's into the bag, then erasing all of the 5's.")
    for value in [5000.0, 5.0, 5.0, 5.0]:
        bag.insert(value)
    bag.erase(5.0)
    if not _check_size(bag, 1):
        print(bag)
        return False

    return True


def check_concatenation(config: ExamConfig) -> bool:
    bag_1: Bag[float] = Bag()
    bag_2: Bag[float] = Bag()

    print("Inserting 2000 1's into the first bag and 2000 2's into the second bag.")
    for _ in range(2000):
        bag_1.insert(1.0)
        bag_2.insert(2.0)

    print("Testing the += operator, then checking occurrences of 1's and 2's in the first bag.")
    bag_3 = bag_2.copy()
    bag_1 += bag_2
    if not _report(bag_1.occurrences(1.0) == 2000 and bag_1.occurrences(2.0) == 2000):
        return False

    print("Testing the + operator, then checking occurrences of 2's in the result.")
    bag_4 = bag_1 + bag_3
    return _report(bag_4.occurrences(2.0) == 4000)


@dataclass
class ExamGroup:
    name: str
    description: str
    max_points: int
    run: Callable[[ExamConfig], bool]


EXAM_GROUPS: List[ExamGroup] = [
    ExamGroup(
        "insert", "Testing insert and the constant member functions", 32, check_insert_and_queries
    ),
    ExamGroup("copy", "Testing the copy constructor and == operator", 12, check_copy_constructor),
    ExamGroup("assign", "Testing assignment from a clone", 12, check_clone_assignment),
    ExamGroup("erase", "Testing the erase and erase_one methods", 32, check_erase),
    ExamGroup("concat", "Testing the += and + operators", 12, check_concatenation),
]


def run_group(group_id: int, group: ExamGroup, config: ExamConfig) -> int:
    print(f"\n\nSTART OF TEST {group_id}:")
    print(f"{group.description} ({group.max_points} points).")

    if group.run(config):
        points = group.max_points
        print(f"Test {group_id} got {points} points out of a possible {group.max_points}.\n\n")
    else:
        points = 0
        print(f"Test {group_id} failed.")
        print(f"END OF TEST {group_id}.\n\n")

    return points


def run_from_config(config: ExamConfig) -> ExamResults:
    set_random_seed(config.random_seed)

    print("Running the exam with the following config:")
    print(config)

    results = ExamResults(max_total=sum(group.max_points for group in EXAM_GROUPS))
    for group_id, group in enumerate(EXAM_GROUPS, start=1):
        results.points[group.name] = run_group(group_id, group, config)
    results.total = sum(results.points.values())

    print(f"The bag scored {results.total} points out of the {results.max_total} points available.")

    if config.save_results:
        results_dir = Path(config.results_dir)
        results_dir.mkdir(parents=True, exist_ok=True)

        results_path = results_dir / RESULTS_FILE_NAME
        logger.info(f"Writing exam results to {results_path}")

        with open(results_path, "wt") as f_results:
            json.dump(asdict(results), f_results, indent=2)

    return results


def main(argv: Optional[List[str]] = None) -> ExamResults:
    config: ExamConfig = cli_get_config(argv=argv, config_cls=ExamConfig)
    return run_from_config(config)


if __name__ == "__main__":
    main()
