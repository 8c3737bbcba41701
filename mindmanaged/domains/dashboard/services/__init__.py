from mindmanaged.domains.dashboard.services.dashboard_service import get_analytics, get_dashboard

__all__ = ["get_dashboard", "get_analytics"]
