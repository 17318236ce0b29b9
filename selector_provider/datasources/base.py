from typing import Protocol

import pandas as pd


class ItemSource(Protocol):
    """Protocol for sources returning item records as a pandas DataFrame."""

    def load(self) -> pd.DataFrame: ...
