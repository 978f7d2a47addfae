"""Allow `python -m prefbuild`."""

from prefbuild.cli import main

if __name__ == "__main__":
    main()
