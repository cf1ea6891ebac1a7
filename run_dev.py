#!/usr/bin/env python3
"""Development server runner for the IEDC admin API."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv


def setup_environment():
    """Set up the development environment."""
    project_root = Path(__file__).parent
    sys.path.insert(0, str(project_root))

    env_file = project_root / '.env'
    if env_file.exists():
        load_dotenv(env_file)
        print(f"Loaded environment from {env_file}")
    else:
        print(f"No .env file found at {env_file}, using defaults")

    os.environ.setdefault('FLASK_APP', 'iedc')
    os.environ.setdefault('FLASK_DEBUG', '1')


def run_development_server():
    """Run the Flask development server."""
    from iedc import create_app

    app = create_app()
    port = int(os.environ.get('PORT', '8080'))

    print("\n" + "=" * 60)
    print("Starting IEDC admin API")
    print("=" * 60)
    print(f"Database: {app.config['SQLALCHEMY_DATABASE_URI']}")
    print(f"Seeded on start: {app.config['SEED_ON_START']}")
    print(f"\nAPI root: http://localhost:{port}/api/ping")
    print("\nTo reload the demo data, run in another terminal:")
    print("   flask --app iedc seed demo")
    print("\nPress Ctrl+C to stop the server")
    print("=" * 60)

    app.run(host='0.0.0.0', port=port, debug=True, use_reloader=True)


def main():
    setup_environment()
    try:
        run_development_server()
    except KeyboardInterrupt:
        print("\nDevelopment server stopped by user")


if __name__ == "__main__":
    main()
