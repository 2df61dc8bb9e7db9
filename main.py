"""
Entry point for the sarasara feed server.
"""
import argparse
import sys
import uvicorn
from dotenv import load_dotenv

from sarasara.core.config import Settings
from sarasara.core.logging_config import setup_logger
from sarasara.api.main import create_app

# Load environment variables
load_dotenv()

def parse_args(argv=None):
    """Parse command line flags; unset flags fall back to the environment."""
    parser = argparse.ArgumentParser(description="Serve RaiPlay Sound programs as podcast RSS feeds")
    parser.add_argument("--bind-address", help="host:port to listen on (default 0.0.0.0:8080)")
    parser.add_argument("--public-url", help="Public base URL used to proxy audio enclosures through /audio")
    parser.add_argument("--raiplaysound-url", help="Upstream base URL (default https://www.raiplaysound.it)")
    parser.add_argument("--log-level", help="Logging level (default INFO)")
    return parser.parse_args(argv)

def build_settings(args) -> Settings:
    """Merge command line flags over environment settings."""
    overrides = {
        "BIND_ADDRESS": args.bind_address,
        "PUBLIC_URL": args.public_url,
        "RAIPLAYSOUND_URL": args.raiplaysound_url,
        "LOG_LEVEL": args.log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})

def main(argv=None):
    args = parse_args(argv)
    try:
        settings = build_settings(args)
        host, port = settings.bind_host_port()
    except ValueError as e:
        print(f"ERROR: Invalid configuration: {e}")
        return 1

    logger = setup_logger(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    logger.info(f"Starting sarasara on {host}:{port}...")

    app = create_app(settings)
    uvicorn.run(app, host=host, port=port, log_level=settings.LOG_LEVEL.lower())
    return 0

if __name__ == "__main__":
    sys.exit(main())
