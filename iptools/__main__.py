import uvicorn

from .config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "iptools.main:app",
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
        access_log=False,
    )


if __name__ == "__main__":
    main()
