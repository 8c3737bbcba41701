"""
Gunicorn configuration for the Mind Managed API.
Run with: gunicorn -c deploy/gunicorn.conf.py mindmanaged.wsgi:app
Every setting can be overridden from the environment.
"""

from __future__ import annotations

import logging
import multiprocessing
import os

# ===== Binding =====
bind = os.environ.get("GUNICORN_BIND", f"0.0.0.0:{os.environ.get('PORT', '5000')}")

# ===== Workers =====
# Requests are short and mostly wait on the database or openFDA, so threads help.
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = int(os.environ.get("GUNICORN_WORKERS", str(min(multiprocessing.cpu_count() * 2 + 1, 8))))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
max_requests = int(os.environ.get("GUNICORN_MAX_REQUESTS", "5000"))
max_requests_jitter = int(os.environ.get("GUNICORN_MAX_REQUESTS_JITTER", "500"))

# ===== Timeouts =====
# Must stay above MEDICATION_API_TIMEOUT_SECONDS so a slow upstream answers 408 instead of a killed worker.
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT", "20"))
keepalive = int(os.environ.get("GUNICORN_KEEPALIVE", "5"))

# ===== Logging =====
accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")  # stdout
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")    # stderr
loglevel = os.environ.get("GUNICORN_LOGLEVEL", os.environ.get("LOG_LEVEL", "info").lower())
capture_output = True
access_log_format = os.environ.get(
    "GUNICORN_ACCESS_LOG_FORMAT",
    '{"timestamp": "%(t)s", "remote": "%(h)s", "request": "%(r)s", '
    '"status": %(s)s, "bytes": %(b)s, "response_time_us": %(D)s}',
)

# ===== Proxy / request limits =====
forwarded_allow_ips = os.environ.get("GUNICORN_FORWARDED_ALLOW_IPS", "127.0.0.1")
limit_request_line = int(os.environ.get("GUNICORN_LIMIT_REQUEST_LINE", "4094"))
limit_request_fields = int(os.environ.get("GUNICORN_LIMIT_REQUEST_FIELDS", "100"))

preload_app = os.environ.get("GUNICORN_PRELOAD", "false").lower() in ("1", "true", "yes")
proc_name = os.environ.get("GUNICORN_PROC_NAME", "mindmanaged")


def when_ready(server):
    """Called just after the server is started."""
    logging.getLogger(__name__).info(
        "Mind Managed API ready on %s (workers=%s, threads=%s, timeout=%ss)", bind, workers, threads, timeout
    )


def worker_abort(worker):
    """Called when a worker is timed out and is being replaced."""
    logging.getLogger(__name__).warning("Worker %s timed out (>%ss), aborting", worker.pid, timeout)
