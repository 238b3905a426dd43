from typing import Dict, List

from statsapi.core import schemas


def group(entries: List[schemas.ControlItem]) -> List[schemas.StatisticsListGroup]:
    """
    Bucket catalog entries by group name.

    Buckets are sorted by group name and the entries inside each bucket by
    title, both with plain string comparison. Entries without a group name
    land in the "" bucket. The relative order of equal titles is unspecified.
    """
    buckets: Dict[str, List[schemas.ControlItem]] = {}
    for entry in entries:
        buckets.setdefault(entry.group_name or "", []).append(entry)

    return [
        schemas.StatisticsListGroup(
            group=group_name,
            # Sort inner statistics based on title
            statistics=sorted(items, key=lambda item: item.title),
        )
        # Sorts groups based on group name
        for group_name, items in sorted(buckets.items(), key=lambda kv: kv[0])
    ]
