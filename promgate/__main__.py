"""Allow ``python -m promgate``."""

from promgate.cli.main import run

if __name__ == "__main__":
    run()
