"""
Start the HealthScript API with uvicorn.

Usage: ``python startup.py`` (reads PORT/HOST from the environment or .env).
"""
import logging
import os
import sys
import traceback

import uvicorn

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)


def _log_environment() -> None:
    logger.info("=" * 60)
    logger.info("HealthScript Backend Startup")
    logger.info("=" * 60)
    logger.info(f"Python version: {sys.version.split()[0]}")
    logger.info(f"  APP_ENV: {os.environ.get('APP_ENV', 'not set')}")
    logger.info(f"  MONGO_URI: {'✅ set' if os.environ.get('MONGO_URI') else '❌ not set'}")
    logger.info(f"  MONGO_DB_NAME: {os.environ.get('MONGO_DB_NAME', 'not set')}")
    secret = os.environ.get('SECURITY_SECRET_KEY', '')
    if secret:
        logger.info(
            f"  SECURITY_SECRET_KEY length: {len(secret)} chars "
            f"{'✅' if len(secret) >= 32 else '❌ (must be >= 32)'}"
        )
    else:
        logger.info("  SECURITY_SECRET_KEY: ⚠️  not set (using default)")
    logger.info(f"  RECOGNITION_TESSERACT_CMD: {os.environ.get('RECOGNITION_TESSERACT_CMD', 'tesseract on PATH')}")


def main() -> None:
    _log_environment()
    try:
        from healthscript.core.config import get_settings

        settings = get_settings()
    except Exception as e:
        logger.error(f"❌ Failed to load settings: {e}")
        logger.error(traceback.format_exc())
        logger.error("Check MONGO_URI and SECURITY_SECRET_KEY (>= 32 characters)")
        sys.exit(1)

    port = int(os.environ.get("PORT", settings.port))
    host = os.environ.get("HOST", settings.host)
    logger.info(f"Starting uvicorn server on {host}:{port}...")
    try:
        uvicorn.run(
            "healthscript.app:app",
            host=host,
            port=port,
            log_level=settings.logging.level.lower(),
            access_log=True,
            reload=settings.is_development,
            timeout_keep_alive=75,
            timeout_graceful_shutdown=30,
        )
    except KeyboardInterrupt:
        logger.info("⚠️  Shutting down due to keyboard interrupt")
    except Exception as e:
        logger.error(f"❌ CRITICAL: Failed to start application: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
