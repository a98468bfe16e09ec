"""Print the stack for a handful of example packages."""

import logging

from sort_packages import sort

logger = logging.getLogger(__name__)

# (description, width, height, length, mass)
EXAMPLE_PACKAGES = [
    ("Standard package", 50.0, 50.0, 50.0, 10.0),
    ("Bulky by volume", 100.0, 100.0, 100.0, 10.0),
    ("Bulky by dimension", 160.0, 50.0, 50.0, 10.0),
    ("Heavy package", 50.0, 50.0, 50.0, 25.0),
    ("Bulky and heavy", 160.0, 50.0, 50.0, 25.0),
]


def main(packages=None):
    """Sort each example package and print the result.

    Args:
        packages: Iterable of (description, width, height, length,
            mass) tuples. Defaults to EXAMPLE_PACKAGES.
    """
    if packages is None:
        packages = EXAMPLE_PACKAGES

    print("Package Sorting System\n")
    for description, width, height, length, mass in packages:
        stack = sort(width, height, length, mass)
        logger.info("%s sorted to %s", description, stack)
        print(
            f"{description}: {width:g}x{height:g}x{length:g} cm, "
            f"{mass:g} kg -> {stack}"
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
