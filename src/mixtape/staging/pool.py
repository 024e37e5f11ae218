from __future__ import annotations

from typing import Iterable, List


def available_pool(catalog: Iterable[str], assigned: Iterable[str]) -> List[str]:
    """Catalog tags not in `assigned`, in catalog order.

    Assigned tags the catalog no longer knows are simply never offered; they stay
    assigned on the item.
    """
    taken = set(assigned)
    return [tag for tag in catalog if tag not in taken]
