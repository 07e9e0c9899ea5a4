# notifications/services/config.py

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

NOTIFY_SEND_URL = "https://app.notify.lk/api/v1/send"


@dataclass(frozen=True)
class NotifyConfig:
    api_key: str
    user_id: str
    sender_id: str
    admin_phone: str

    @property
    def enabled(self) -> bool:
        return bool(self.api_key and self.user_id and self.sender_id)

    @classmethod
    def from_settings(cls) -> "NotifyConfig":
        cfg = getattr(settings, "NOTIFY", {}) or {}
        return cls(
            api_key=str(cfg.get("API_KEY") or "").strip(),
            user_id=str(cfg.get("USER_ID") or "").strip(),
            sender_id=str(cfg.get("SENDER_ID") or "").strip(),
            admin_phone=str(cfg.get("ADMIN_PHONE") or "").strip(),
        )
