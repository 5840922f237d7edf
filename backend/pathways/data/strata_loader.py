"""
AMH x Age Strata Loader

Loads the two-dimensional strata tables shipped as CSV in data/tables/:

- cycle_cancellation.csv  risk of cancelling before oocyte retrieval
- oocyte_retrieval.csv    oocytes retrieved (mean, lower/upper quartile)

Both use inclusive [min, max] bands on the same AMH cut points, so AMH 2.0
sits in 1.01-2.00, not in 2.01+. A value in the gap between two bands
(AMH 1.005, age 34.5) resolves to the lower band.

Only the 35-37 cell of the 1.01-2.00 AMH band is a published figure. Every
other cell is a constructed value, monotonic in age and AMH, that fills out
the grid around it; the `source` column marks each row "published" or
"constructed". Do not read the constructed cells as study data.

An empty amh_max / age_max means the band is unbounded above. Each query
resolves the AMH band first, then the age band inside it; both clamp to the
boundary bands.

Data is lazy-loaded on first access (or eagerly via load_tables() at app
startup) and kept in memory read-only.
"""

import logging
from pathlib import Path

import pandas as pd

from pathways.data.banding import band_index, check_query

logger = logging.getLogger(__name__)

_TABLES_DIR = Path(__file__).resolve().parent / "tables"
_CANCELLATION_PATH = _TABLES_DIR / "cycle_cancellation.csv"
_RETRIEVAL_PATH = _TABLES_DIR / "oocyte_retrieval.csv"

# --- Loaded data (lazy) ---
# Each stratum: {"amh_min", "amh_max", "age_mins": [...], "rows": [{...}, ...]}
_cancellation: list[dict] | None = None
_retrieval: list[dict] | None = None


def _read_strata(path: Path, value_cols: list[str]) -> list[dict]:
    """Read one strata CSV into AMH bands, each holding its sorted age bands."""
    if not path.exists():
        raise FileNotFoundError(f"Strata table not found at {path}.")

    df = pd.read_csv(path)
    df = df.sort_values(["amh_min", "age_min"]).reset_index(drop=True)

    strata = []
    for (amh_min, amh_max), group in df.groupby(["amh_min", "amh_max"], sort=True, dropna=False):
        rows = []
        for rec in group.to_dict("records"):
            rows.append({
                "age_min": float(rec["age_min"]),
                "age_max": None if pd.isna(rec["age_max"]) else float(rec["age_max"]),
                **{col: float(rec[col]) for col in value_cols},
                "source": str(rec["source"]),
            })
        strata.append({
            "amh_min": float(amh_min),
            "amh_max": None if pd.isna(amh_max) else float(amh_max),
            "age_mins": [r["age_min"] for r in rows],
            "rows": rows,
        })

    strata.sort(key=lambda s: s["amh_min"])
    _check_bands(path.name, [(s["amh_min"], s["amh_max"]) for s in strata])
    for s in strata:
        _check_bands(path.name, [(r["age_min"], r["age_max"]) for r in s["rows"]])
    return strata


def _check_bands(name: str, bands: list[tuple[float, float | None]]) -> None:
    """Bands must be ascending and non-overlapping; only the last may be open."""
    for i, (lo, hi) in enumerate(bands):
        if hi is None and i != len(bands) - 1:
            raise ValueError(f"{name}: unbounded band {lo}+ is not the last band")
        if hi is not None and hi < lo:
            raise ValueError(f"{name}: band {lo}-{hi} is inverted")
        if i and bands[i - 1][1] is not None and bands[i - 1][1] > lo:
            raise ValueError(f"{name}: band {lo} overlaps the band below it")


def _ensure_loaded():
    """Lazy-load both strata CSVs on first access."""
    global _cancellation, _retrieval

    if _cancellation is not None and _retrieval is not None:
        return

    _cancellation = _read_strata(_CANCELLATION_PATH, ["risk"])
    _retrieval = _read_strata(
        _RETRIEVAL_PATH, ["mean", "lower_quartile", "upper_quartile"]
    )
    logger.info(
        "Loaded strata tables: %d cancellation cells, %d retrieval cells",
        sum(len(s["rows"]) for s in _cancellation),
        sum(len(s["rows"]) for s in _retrieval),
    )


def load_tables() -> None:
    """Load the strata eagerly (called once at app startup)."""
    _ensure_loaded()


def _resolve(strata: list[dict], age: float, amh: float) -> dict:
    amh = check_query(amh, "amh")
    age = check_query(age, "age")
    stratum = strata[band_index([s["amh_min"] for s in strata], amh, name="amh")]
    return stratum["rows"][band_index(stratum["age_mins"], age, name="age")]


def lookup_cycle_cancellation_risk(age: float, amh: float) -> float:
    """Probability that the cycle is cancelled before oocyte retrieval."""
    _ensure_loaded()
    return _resolve(_cancellation, age, amh)["risk"]


def lookup_oocyte_retrieval(age: float, amh: float) -> dict:
    """
    Oocytes retrieved for the patient's AMH x age stratum.

    Returns {"mean": 11.5, "lower_quartile": 8.0, "upper_quartile": 14.0}.
    """
    _ensure_loaded()
    row = _resolve(_retrieval, age, amh)
    return {
        "mean": row["mean"],
        "lower_quartile": row["lower_quartile"],
        "upper_quartile": row["upper_quartile"],
    }


def lookup_strata_source(age: float, amh: float) -> dict[str, str]:
    """Provenance ("published" / "constructed") of the cells a query resolves to."""
    _ensure_loaded()
    return {
        "cycle_cancellation": _resolve(_cancellation, age, amh)["source"],
        "oocyte_retrieval": _resolve(_retrieval, age, amh)["source"],
    }
