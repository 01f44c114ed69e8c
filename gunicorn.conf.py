# Gunicorn configuration for HealthScript
import os
import sys

# Add src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', 8000)}"
backlog = 2048

# Worker processes
workers = int(os.environ.get("WEB_CONCURRENCY", 2))
worker_class = "uvicorn.workers.UvicornWorker"
# OCR and PDF rendering can take a few seconds
timeout = 60
keepalive = 5

max_requests = 1000
max_requests_jitter = 50

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOGGING_LEVEL", "info").lower()

proc_name = "healthscript"

wsgi_app = "healthscript.app:app"
preload_app = True
daemon = False
