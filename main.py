"""Entry point for the times tables quiz game."""

import logging

from funtables.app import App


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = App()
    app.run()


if __name__ == "__main__":
    main()
