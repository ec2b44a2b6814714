import uvicorn

from csvshelf.config import StorageConfig


def main() -> None:
    config = StorageConfig.from_env()
    uvicorn.run(
        "csvshelf.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
