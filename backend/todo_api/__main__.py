"""Run the todo API with uvicorn on the configured host and port."""

import uvicorn

from todo_api.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
