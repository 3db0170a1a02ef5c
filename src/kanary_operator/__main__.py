"""Entry point for the Kanary Operator."""

import subprocess
import sys


def main():
    """Run the operator using kopf."""
    subprocess.run(
        [
            sys.executable,
            "-m",
            "kopf",
            "run",
            "--standalone",
            "--all-namespaces",
            "-m",
            "kanary_operator.operator",
        ],
        check=True,
    )


if __name__ == "__main__":
    main()
