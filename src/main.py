"""Atajo `python -m main` para la CLI de kcl-bootstrap cuando `src/` ya está en el path."""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
