"""Module entrypoint for ``python -m lazyeditor``."""

from .cli import main


if __name__ == "__main__":
    main()
