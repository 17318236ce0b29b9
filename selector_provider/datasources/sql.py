import pandas as pd
from sqlalchemy import create_engine

from ..config import Settings, get_settings
from .synthetic import SyntheticSource


class SqlSource:
    """Loads item records from the SQL database defined by DB_URL."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load(self) -> pd.DataFrame:
        if not self.settings.db_url:
            return SyntheticSource(self.settings).load()
        engine = create_engine(self.settings.db_url, pool_pre_ping=True)
        sql = (
            """
            SELECT id, title, name, description, category, score
            FROM items
            ORDER BY id
            """
        )
        return pd.read_sql(sql, engine)
