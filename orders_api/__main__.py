import uvicorn

from orders_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "orders_api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
