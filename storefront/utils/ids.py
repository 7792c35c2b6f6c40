# storefront/utils/ids.py
import time
from typing import Iterable


def next_id(existing: Iterable[int]) -> int:
    """
    Id = znacznik czasu w ms (jak Date.now()).
    Gdy dwa rekordy powstaja w tej samej milisekundzie, bierzemy max + 1,
    zeby id w obrebie listy bylo unikalne.
    """
    now = int(time.time() * 1000)
    highest = max(existing, default=0)
    return now if now > highest else highest + 1
