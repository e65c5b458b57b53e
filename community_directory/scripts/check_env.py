"""
Environment Check Script
Reports which required environment variables are set (values masked) and
sanity-checks the Supabase URL and service role key formats.
Exit status is 1 when any required variable is missing.
"""

import sys
import logging
from typing import List, Optional

from community_directory.config.settings import Settings

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def mask_value(value: Optional[str]) -> str:
    if not value:
        return "NOT SET"
    return f"{value[:4]}...{value[-4:]}"


def is_valid_supabase_url(url: str) -> bool:
    return url.startswith("https://") and ".supabase.co" in url


def is_valid_service_role_key(key: str) -> bool:
    # Service role keys are JWTs; the encoded header always starts with eyJ
    return key.startswith("eyJ") and len(key) > 100


def check_environment(settings: Settings) -> List[str]:
    """Log the state of each required variable and return the missing ones"""
    logger.info("Checking environment variables...")
    values = {
        "SUPABASE_URL": settings.supabase_url,
        "SUPABASE_SERVICE_ROLE_KEY": settings.supabase_service_role_key,
        "CLERK_WEBHOOK_SECRET": settings.clerk_webhook_secret,
        "ENVIRONMENT": settings.environment,
    }
    for name, value in values.items():
        logger.info(f"{name}: {'OK' if value else 'MISSING'} {mask_value(value)}")

    if settings.supabase_url:
        valid = is_valid_supabase_url(settings.supabase_url)
        logger.info(f"Supabase URL format: {'valid' if valid else 'INVALID'}")
    if settings.supabase_service_role_key:
        valid = is_valid_service_role_key(settings.supabase_service_role_key)
        logger.info(f"Service role key format: {'valid' if valid else 'INVALID'}")

    return settings.missing_required()


def main() -> int:
    missing = check_environment(Settings())
    if missing:
        logger.info("\nMissing variables:")
        for name in missing:
            logger.info(f"- {name}")
        logger.info("\nPlease add the missing variables to your .env file")
        return 1
    logger.info("\nAll required environment variables are set")
    return 0


if __name__ == "__main__":
    sys.exit(main())
