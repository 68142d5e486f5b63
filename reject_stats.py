import pandas as pd

STATS_THRESHOLD = 9
STATS_COLUMN_WIDTH = 100


def build_reject_stats(domains, domain_map, threshold=STATS_THRESHOLD):
    """Count surviving domains per root; keep roots with more than `threshold`.

    Sorted by count descending, then root ascending.
    """
    roots = [domain_map[d] for d in domains if d in domain_map]
    if not roots:
        return []

    df = pd.Series(roots, dtype="object").value_counts().rename_axis("root").reset_index(name="count")
    df = df[df["count"] > threshold]
    df = df.sort_values(["count", "root"], ascending=[False, True], kind="mergesort")

    return [(root, int(count)) for root, count in zip(df["root"], df["count"])]


def format_stats(stats, width=STATS_COLUMN_WIDTH):
    return [f"{root.ljust(width)}{count}" for root, count in stats]
