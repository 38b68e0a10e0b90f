"""Start a script in its own window according to its file extension."""

import os
import subprocess
import sys
from typing import Optional


def build_command(script: str) -> Optional[list[str]]:
    """Return the command line that starts the script, or None for unknown extensions."""
    extension = os.path.splitext(script)[1]
    if extension in (".bat", ".exe"):
        return ["cmd", "/C", "start", script]
    if extension == ".sh":
        return ["cmd", "/C", "start", "bash", "-c", script]
    if extension == ".ps1":
        return ["powershell", script]
    if extension == ".cmd":
        return ["cmd", "/c", script]
    return None


def main(argv: Optional[list[str]] = None) -> int:
    """Start the script named by the first argument without waiting for it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    script = args[0]
    print(f"script:  {script}", file=sys.stderr)
    command = build_command(script)
    if command is None:
        print("Unknown file extension", file=sys.stderr)
        return 0
    try:
        subprocess.Popen(command)
    except OSError as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())