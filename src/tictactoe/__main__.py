"""Entry point for running the game server via ``python -m tictactoe``."""

from __future__ import annotations

import logging

import uvicorn

from .config import load_config


def main() -> None:
    """Start the FastAPI-powered Tic-Tac-Toe server."""

    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    uvicorn.run("tictactoe.ui:app", host=config.host, port=config.port, reload=False)


if __name__ == "__main__":
    main()
