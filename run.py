#!/usr/bin/env python3
"""
Application startup script with environment configuration support.
"""

import os
import sys
import argparse

from lexibridge.config.loader import ConfigLoader, load_config_for_environment
from lexibridge.core.exceptions import InvalidConfigurationError


def seed_database(settings) -> int:
    """Create the dictionary tables if needed and insert the starter rows"""
    from lexibridge.core.db import Base, create_db_engine, create_session_factory
    from lexibridge.models import dictionary  # noqa: F401  registers the tables
    from lexibridge.services.dictionary_seeder import DictionarySeeder

    if not settings.database.url:
        print("✗ DATABASE_URL is not set; nothing to seed")
        return 1

    engine = create_db_engine(settings.database.url, echo=settings.database.echo)
    try:
        Base.metadata.create_all(engine)
        counts = DictionarySeeder(create_session_factory(engine)).seed()
    finally:
        engine.dispose()

    for table, inserted in counts.items():
        print(f"  - {table}: {inserted} rows inserted")
    return 0


def export_runtime_environment(settings) -> None:
    """Hand the resolved environment and CLI overrides to the uvicorn worker processes"""
    os.environ["ENVIRONMENT"] = settings.environment.value
    if settings.debug:
        os.environ["DEBUG"] = "true"


def main():
    """Main startup function with environment configuration"""
    parser = argparse.ArgumentParser(description="LexiBridge Translation Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (overrides config)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (overrides config)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (overrides config)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (overrides config)"
    )
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--validate-env",
        help="Validate a specific environment configuration"
    )
    parser.add_argument(
        "--create-sample",
        help="Create a sample .env file for the specified environment"
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Populate the dictionary database with the starter dictionary and exit"
    )

    args = parser.parse_args()

    # Handle utility commands
    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return

    if args.validate_env:
        is_valid = ConfigLoader.validate_environment_config(args.validate_env)
        if is_valid:
            print(f"✓ Environment '{args.validate_env}' configuration is valid")
        else:
            print(f"✗ Environment '{args.validate_env}' configuration is invalid or missing")
            sys.exit(1)
        return

    if args.create_sample:
        try:
            sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
            print(f"✓ Sample configuration created: {sample_file}")
        except (ValueError, OSError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            sys.exit(1)
        return

    # Load configuration for the specified environment
    try:
        settings = load_config_for_environment(args.env)
        print(f"✓ Loaded configuration for environment: {settings.environment.value}")
    except InvalidConfigurationError as e:
        print(f"✗ Failed to load configuration: {e.message} {e.details}")
        sys.exit(1)

    if args.seed:
        sys.exit(seed_database(settings))

    # Apply command line overrides
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.workers:
        settings.workers = args.workers
    if args.reload:
        settings.reload = True
    if args.debug:
        settings.debug = True

    print(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Host: {settings.host}")
    print(f"   Port: {settings.port}")
    print(f"   Workers: {settings.workers}")
    print(f"   Debug: {settings.debug}")
    print(f"   Reload: {settings.reload}")
    print(f"   Log Level: {settings.log_level.value}")
    print(f"   Dictionary: {'database' if settings.database.url else 'bundled starter dictionary'}")
    print(f"   Fallback: {settings.fallback.base_url if settings.engine.enable_fallback else 'disabled'}")

    export_runtime_environment(settings)

    import uvicorn

    uvicorn.run(
        "lexibridge.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers if not settings.reload else 1,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
