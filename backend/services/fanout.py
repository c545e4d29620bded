# backend/services/fanout.py
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

from config.settings import settings

T = TypeVar("T")
R = TypeVar("R")


def fan_out(fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
    """Run ``fn`` over ``items`` on a bounded thread pool; results keep input order.

    Only for executors that are not bound to a transaction.
    """
    items = list(items)
    if len(items) <= 1:
        return [fn(item) for item in items]
    workers = max(1, min(settings.FANOUT_WORKERS, len(items)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(fn, items))
