"""Print a sample container in each of its traversal orders."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from multiorder.container import MyContainer


def _line(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    container: MyContainer[int] = MyContainer()
    for value in (7, 15, 6, 1, 2):
        container.add_element(value)

    print(f"Size of container: {len(container)}")
    print(_line(container.ascending_order()))
    print(_line(container.descending_order()))
    print(_line(container.side_cross_order()))
    print(_line(container.reverse_order()))
    print(_line(container.order()))
    print(_line(container.middle_out_order()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())