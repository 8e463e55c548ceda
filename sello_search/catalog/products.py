import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from sello_search.catalog.column_resolver import resolve_column

logger = logging.getLogger(__name__)


# Match strength, strongest first
MATCH_KINDS = {
    4: "sku_exact",
    3: "sku_prefix",
    2: "sku_contains",
    1: "name_contains",
}


@dataclass(frozen=True)
class ProductMatch:
    sku: str
    name: str
    match_rank: int

    @property
    def match_kind(self) -> str:
        return MATCH_KINDS[self.match_rank]


class ProductCatalog:
    """
    Read-only product list used for literal SKU lookup.

    Only the SKU and product name columns are kept. Rows without a
    SKU are dropped. A source without a recognisable SKU column gives
    an empty catalog instead of an error.
    """

    def __init__(self, df: pd.DataFrame):
        sku_col = resolve_column(df, "sku")
        name_col = resolve_column(df, "name")

        if sku_col is None:
            if not df.empty:
                logger.warning("Product catalog has no SKU column; columns=%s", list(df.columns))
            frame = pd.DataFrame({"sku": pd.Series(dtype=str), "name": pd.Series(dtype=str)})
        else:
            frame = pd.DataFrame({
                "sku": df[sku_col],
                "name": df[name_col] if name_col else "",
            })

        frame = frame.dropna(subset=["sku"])
        frame["sku"] = frame["sku"].astype(str).str.strip()
        frame["name"] = frame["name"].fillna("").astype(str).str.strip()
        frame = frame[frame["sku"] != ""].reset_index(drop=True)

        self._frame = frame
        self._sku_lower = frame["sku"].str.lower()
        self._name_lower = frame["name"].str.lower()

    # -----------------------------
    # CONSTRUCTORS
    # -----------------------------
    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "ProductCatalog":
        return cls(pd.DataFrame(list(records)))

    @classmethod
    def from_csv(cls, path) -> "ProductCatalog":
        return cls(pd.read_csv(path, dtype=str))

    @classmethod
    def coerce(
        cls,
        catalog: Union["ProductCatalog", pd.DataFrame, Iterable[Mapping[str, Any]], None],
    ) -> Optional["ProductCatalog"]:
        if catalog is None or isinstance(catalog, ProductCatalog):
            return catalog
        if isinstance(catalog, pd.DataFrame):
            return cls(catalog)
        return cls.from_records(catalog)

    def __len__(self) -> int:
        return len(self._frame)

    # -----------------------------
    # MATCHING
    # -----------------------------
    def match(self, query: str, limit: Optional[int] = None) -> List[ProductMatch]:
        """
        Literal SKU / name lookup, case-insensitive.

        Ranked exact SKU > SKU prefix > SKU substring > name substring,
        catalog order within a rank, one entry per SKU.
        """
        q = (query or "").strip().lower()
        if not q or self._frame.empty:
            return []

        rank = np.select(
            [
                self._sku_lower == q,
                self._sku_lower.str.startswith(q),
                self._sku_lower.str.contains(q, regex=False),
                self._name_lower.str.contains(q, regex=False),
            ],
            [4, 3, 2, 1],
            default=0,
        )

        hits = self._frame.assign(match_rank=rank, sku_key=self._sku_lower)
        hits = hits[hits["match_rank"] > 0]
        hits = hits.sort_values("match_rank", ascending=False, kind="mergesort")
        hits = hits.drop_duplicates(subset="sku_key", keep="first")

        if limit:
            hits = hits.head(limit)

        return [
            ProductMatch(sku=row.sku, name=row.name, match_rank=int(row.match_rank))
            for row in hits.itertuples(index=False)
        ]
