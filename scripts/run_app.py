"""
CLI script to launch the PaperShelf Streamlit application.

Usage:
    python scripts/run_app.py                          # Default port 8501
    python scripts/run_app.py --port 8502              # Custom port
    python scripts/run_app.py --config my/config.json  # Custom configuration
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from papershelf.core.config_loader import CONFIG_ENV_VAR


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Launch the PaperShelf library interface"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Port to run the application on (default: 8501)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't open browser automatically"
    )

    return parser.parse_args()


def main():
    """Main entry point for launching the app."""
    args = parse_args()

    project_root = Path(__file__).parent.parent
    app_path = project_root / "papershelf" / "gui" / "app.py"

    env = dict(os.environ)
    if args.config:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(1)
        env[CONFIG_ENV_VAR] = str(config_path)

    print("=" * 60)
    print("PaperShelf - Library")
    print("=" * 60)
    print(f"Starting on http://localhost:{args.port}")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    # Bound to localhost: the file picker opens on this machine.
    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(app_path),
        "--server.port", str(args.port),
        "--server.address", "localhost",
    ]

    if args.no_browser:
        cmd.extend(["--server.headless", "true"])

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
