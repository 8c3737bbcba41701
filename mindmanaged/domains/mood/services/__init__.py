from mindmanaged.domains.mood.services.mood_service import (
    create_checkin,
    delete_checkin,
    get_checkin,
    list_checkins,
    mood_trend,
)

__all__ = ["create_checkin", "get_checkin", "delete_checkin", "list_checkins", "mood_trend"]
