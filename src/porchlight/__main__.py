"""``python -m porchlight`` — serve the default site on port 8080."""

from porchlight.cli import main

main(["run"])
