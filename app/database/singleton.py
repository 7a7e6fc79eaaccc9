import logging
from typing import Any, Dict, Optional

from supabase import Client

logger = logging.getLogger(__name__)


class SingletonTable:
    """A table holding one configuration row (personal_info, hero, settings).

    The first row is the live one. Writes update it when present and insert
    it otherwise.
    """

    def __init__(self, supabase: Client, table: str):
        self.supabase = supabase
        self.table = table

    def get(self) -> Optional[Dict[str, Any]]:
        result = self.supabase.table(self.table)\
            .select("*")\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def upsert(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        existing = self.supabase.table(self.table)\
            .select("id")\
            .limit(1)\
            .execute()

        if existing.data:
            row_id = existing.data[0]["id"]
            result = self.supabase.table(self.table)\
                .update(data)\
                .eq("id", row_id)\
                .execute()
        else:
            logger.info("No %s row yet, inserting one", self.table)
            result = self.supabase.table(self.table).insert(data).execute()

        return result.data[0] if result.data else None
