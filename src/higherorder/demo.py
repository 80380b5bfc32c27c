"""Walkthrough evaluating every example once and logging the results."""

import typing as tp

from higherorder.config import Settings
from higherorder.core.enums import NameFormat
from higherorder.functional import (
    compact,
    concat_words,
    containing,
    evens,
    format_names,
    honoree_roll,
    odds,
    partition,
    partition_pairs,
    square_all,
    total,
    total_with_steps,
)
from higherorder.logger.logger import logger

NUMBERS = [1, 2, 3, 4, 5, 6]
NAMES = {"Alan": "Turing", "Ada": "Lovelace", "Grace": "Hopper"}
FILENAMES = [
    "cute_cat.jpg",
    "cute_dog.jpg",
    "essay_cats-are-the-best.doc",
    "turtles_are_ok.png",
    "baby_otters.svg",
]
OPTIONAL_INTS = [1, 2, None, 4, None, 5]
FIBONACCI = [1, 1, 2, 3, 5, 8, 13, 21]
WORDS = [
    "This", "might", "sound", "crazy", "but", "here's",
    "my", "collection", "so", "map", "me", "maybe",
]  # fmt: skip
ONE_TO_TEN = list(range(1, 11))


def run(settings: tp.Optional[Settings] = None) -> tp.Dict[str, tp.Any]:
    """Evaluate every example and return the results keyed by name."""
    settings = settings or Settings.load()
    delimiter = settings.LABEL_DELIMITER

    results: tp.Dict[str, tp.Any] = {
        "squared": square_all(NUMBERS),
        "partition": partition(FILENAMES, delimiter),
        "partition_pairs": partition_pairs(FILENAMES, delimiter),
        "compacted": compact(OPTIONAL_INTS),
        "sum": total(FIBONACCI),
        "sum_steps": total_with_steps(FIBONACCI)[1],
        "sentence": concat_words(WORDS),
        "honorees": honoree_roll(NAMES),
        "evens": evens(ONE_TO_TEN),
        "odds": odds(ONE_TO_TEN),
        "words_with_m": containing(WORDS, "m"),
    }
    for fmt in NameFormat:
        results[f"names_{fmt.value}"] = format_names(NAMES, fmt)
    return results


def main():
    """Run the walkthrough and log each result."""
    settings = Settings.load()
    logger.setLevel(settings.LOG_LEVEL)
    logger.info("Running higherorder walkthrough...")
    for name, value in run(settings).items():
        logger.info(f"{name}: {value!r}")


if __name__ == "__main__":
    main()
