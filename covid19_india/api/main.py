"""Process entry point: serve the API with uvicorn on the configured host and port."""

from __future__ import annotations

import uvicorn

from covid19_india.api.api_config import get_api_config


def main() -> None:
    config = get_api_config()
    uvicorn.run("covid19_india.api.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
