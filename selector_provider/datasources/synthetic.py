import numpy as np
import pandas as pd

from ..config import Settings, get_settings

CATEGORIES = ["article", "video", "podcast", "event"]
ADJECTIVES = ["Quiet", "Rapid", "Hidden", "Bright", "Open", "Distant"]
NOUNS = ["River", "Signal", "Harbor", "Engine", "Garden", "Archive"]


class SyntheticSource:
    """Generates synthetic item records for demos and local development."""

    def __init__(self, settings: Settings | None = None, seed: int = 42) -> None:
        self.settings = settings or get_settings()
        self.seed = seed

    def load(self) -> pd.DataFrame:
        rows = self.settings.max_rows
        rng = np.random.default_rng(self.seed)
        titles = [f"{a} {n}" for a, n in zip(rng.choice(ADJECTIVES, size=rows), rng.choice(NOUNS, size=rows))]
        df = pd.DataFrame({
            "id": [f"syn-{i:05d}" for i in range(rows)],
            "title": titles,
            "category": rng.choice(CATEGORIES, size=rows, p=[0.4, 0.3, 0.2, 0.1]),
            "score": rng.normal(50, 15, size=rows).clip(min=0, max=100).round(1),
        })
        df["name"] = df["title"].str.lower().str.replace(" ", "-", regex=False)
        df["description"] = df["category"] + " about " + df["title"]
        return df
