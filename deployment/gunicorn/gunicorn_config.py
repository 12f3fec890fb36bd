"""
Gunicorn configuration for the College Website Backend.

    gunicorn core.wsgi:application -c deployment/gunicorn/gunicorn_config.py
"""
import multiprocessing
import os

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 60
keepalive = 5

# Logging (stdout/stderr unless paths are given)
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "college-website-backend"

# Server mechanics
daemon = False


# Server hooks
def when_ready(server):
    """Called just after the server is started."""
    server.log.info("College website backend ready. Spawning workers")


def worker_abort(worker):
    """Called when a worker receives the SIGABRT signal (usually a timeout)."""
    worker.log.info("Worker received SIGABRT signal")
