import os

# gunicorn -c gunicorn.conf.py
wsgi_app = "signup:create_app()"
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")

# Served apps use ProductionConfig unless APP_ENV says otherwise
raw_env = [f"APP_ENV={os.getenv('APP_ENV', 'production')}"]

# The memory backend keeps records per process; several workers would each
# hold a different list, so it runs a single worker unless told otherwise.
_storage = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
workers = int(os.getenv("GUNICORN_WORKERS", "1" if _storage == "memory" else "2"))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 30
graceful_timeout = 20
keepalive = 5

# The app logs JSON to stdout; gunicorn only reports its own errors
accesslog = None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
