from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from ..labels import DEFAULT_LOCALE
from ..synthetic.personas import PERSONAS
from ..synthetic.replay import replay

REPO = Path(__file__).resolve().parents[2]
OUT = REPO / "data" / "reports" / "personas.csv"


def build_report(personas: Optional[Dict] = None, locale: str = DEFAULT_LOCALE) -> pd.DataFrame:
    """One row per persona: final metrics, trait names/styles and insight."""
    rows = []
    for name, make in (personas or PERSONAS).items():
        res = replay(make(), locale=locale)
        snap = res.analyzer.snapshot()
        counts = {k: len(df) for k, df in res.analyzer.buffer.frames().items()}
        rows.append({
            "persona": name,
            **snap.model_dump(),
            "traits": "|".join(t.name for t in res.profile.traits),
            "styles": "|".join(t.style.value for t in res.profile.traits),
            "insight": res.profile.insight,
            **{f"n_{k}": v for k, v in counts.items()},
        })
    return pd.DataFrame(rows)


def main():
    df = build_report()
    OUT.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(OUT, index=False)
    print(f"[report] wrote {OUT}:\n", df[["persona", "avg_speed", "traits"]].to_string(index=False))

if __name__ == "__main__":
    main()
