"""Small argument/reply helpers for scripted and SORT-style commands."""

from typing import Any, Optional, Sequence

__all__ = ["sort_options", "pairs_to_dict"]


def sort_options(
    by: Optional[str] = None,
    get: Optional[str] = None,
    limit: Optional[Sequence[int]] = None,
    order: Optional[str] = None,
    store: Optional[str] = None,
) -> list[Any]:
    """
    Flatten SORT options into the argument list the server expects.

    Example::

        sort_options(by="user:*->age", limit=(0, 10), order="DESC ALPHA")
        # ['BY', 'user:*->age', 'LIMIT', 0, 10, 'DESC', 'ALPHA']
    """
    args: list[Any] = []

    if by:
        args.extend(["BY", by])
    if get:
        args.extend(["GET", get])
    if limit:
        args.append("LIMIT")
        args.extend(limit)
    if order:
        args.extend(order.split())
    if store:
        args.extend(["STORE", store])

    return args


def pairs_to_dict(flat: Sequence[Any]) -> dict[Any, Any]:
    """Turn a flat [k1, v1, k2, v2, …] reply into a dict."""
    if len(flat) % 2:
        raise ValueError(f"Expected an even number of items, got {len(flat)}")
    return dict(zip(flat[0::2], flat[1::2]))
