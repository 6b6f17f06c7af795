#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database and the Perplexity API are reachable.
Usage: python scripts/check_connections.py
"""
from scholar_api.core.config import get_settings
from scholar_api.core.logging import configure_logging
from scholar_api.db.postgres import get_engine, test_postgres_connection
from scholar_api.services.perplexity_client import create_perplexity_client


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    print("=" * 50)
    print("SCHOLARSHIP ASSISTANT - CONNECTION CHECK")
    print("=" * 50)

    # PostgreSQL
    print("\n[1] Checking PostgreSQL...")
    print(f"    Host: {settings.db_host}:{settings.db_port}/{settings.db_name} (sslmode={settings.db_sslmode})")
    if test_postgres_connection(get_engine()):
        print("    PostgreSQL: CONNECTED")
    else:
        print("    PostgreSQL: FAILED")

    # Perplexity (only if API key is set)
    print("\n[2] Checking Perplexity API...")
    if settings.perplexity_api_key:
        print(f"    Base URL: {settings.perplexity_base_url}")
        if create_perplexity_client().test_connection():
            print("    Perplexity: CONNECTED")
        else:
            print("    Perplexity: FAILED")
    else:
        print("    Perplexity: API key not configured (skipped)")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
