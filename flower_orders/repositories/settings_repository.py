"""
Settings Repository - Data Access Layer
"""
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from flower_orders.models.app_setting import AppSetting


class SettingsRepository:
    """Repository for admin key/value settings"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        setting = self.db.query(AppSetting).filter(AppSetting.key == key).first()
        return setting.value if setting else None

    def put(self, key: str, value: str, now: datetime) -> AppSetting:
        """Insert or overwrite a setting"""
        setting = self.db.query(AppSetting).filter(AppSetting.key == key).first()
        if setting is None:
            setting = AppSetting(key=key, value=value, updated_at=now)
            self.db.add(setting)
        else:
            setting.value = value
            setting.updated_at = now
        self.db.commit()
        self.db.refresh(setting)
        return setting
