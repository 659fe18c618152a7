# src/utils/misc_utils.py
import asyncio
import math
from typing import Any, Awaitable, Dict, Iterable, List


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divides with IEEE 754 semantics instead of raising ZeroDivisionError.

    0/0 gives NaN and x/0 gives an infinity carrying the sign of x. Averages
    over an empty set of matches or events are reported this way.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def shallow_merge(records: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Merges mappings left to right; later keys overwrite earlier ones."""
    merged: Dict[str, Any] = {}
    for record in records:
        merged.update(record)
    return merged


def replace_non_finite(value: Any) -> Any:
    """Returns a copy of ``value`` with NaN and infinities swapped for None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: replace_non_finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [replace_non_finite(item) for item in value]
    return value


async def gather_or_cancel(*aws: Awaitable[Any]) -> List[Any]:
    """Awaits all awaitables together; the first failure cancels the rest.

    Results come back in argument order. The original exception is re-raised
    once the remaining tasks have been cancelled and have settled.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
