from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, List, Sequence

import pandas as pd


@dataclass(frozen=True)
class HostRanking:
    host_id: Any
    host_name: str
    count: int


def _host_id(value: Any) -> Any:
    if pd.isna(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def top_hosts(df: pd.DataFrame, limit: int = 10) -> List[HostRanking]:
    """
    Rank hosts by number of listings in `df`, highest first.

    The first host_name seen for a host_id is kept. Equal counts stay in the
    order their hosts were first encountered (stable sort, no secondary key).
    Listings without a host_id are counted together under `host_id=None`.
    """
    if df.empty or limit <= 0:
        return []
    grouped = (
        df.groupby("host_id", sort=False, dropna=False)
        .agg(host_name=("host_name", "first"), count=("host_name", "size"))
        .reset_index()
    )
    ranked = grouped.sort_values("count", ascending=False, kind="stable").head(limit)
    return [
        HostRanking(host_id=_host_id(row["host_id"]), host_name=str(row["host_name"]), count=int(row["count"]))
        for row in ranked.to_dict(orient="records")
    ]


def hosts_frame(rankings: Sequence[HostRanking]) -> pd.DataFrame:
    columns = ["rank", "host_id", "host_name", "count"]
    if not rankings:
        return pd.DataFrame(columns=columns)
    frame = pd.DataFrame([asdict(r) for r in rankings])
    frame.insert(0, "rank", range(1, len(frame) + 1))
    return frame[columns]
