"""Run the feedback service with uvicorn."""

import uvicorn

from feedback.config import settings


def main() -> None:
    uvicorn.run("feedback.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
