from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register
from .selection import Strategy, default_workers, rank, select

from . import random_word  # noqa: F401
from . import fixed_first  # noqa: F401
from . import most_common_letters  # noqa: F401
from . import entropy  # noqa: F401
from . import bellman_optimal  # noqa: F401
from . import bellman_full  # noqa: F401
from . import column_lengths  # noqa: F401


def create_solver(solver_id: str, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
           "Strategy", "select", "rank", "default_workers"]
