"""Process entry point: serve the exporter with uvicorn."""

import uvicorn

from helpers.constants import APP_LOGGER, LISTEN_ADDRESS
from helpers.utils import parse_listen_address


def main() -> None:
    host, port = parse_listen_address(LISTEN_ADDRESS)
    APP_LOGGER.info(msg=f"Listening on {host}:{port}")
    uvicorn.run("fastapi_app.app:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
