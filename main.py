# main.py

from sys import argv

from uvicorn import run

from blogger.configs import settings

SERVICES = {
    "blog": ("blogger.main:blog_app", settings.BLOG_SERVICE_PORT),
    "comment": ("blogger.main:comment_app", settings.COMMENT_SERVICE_PORT),
}


def main(args: list[str] | None = None) -> None:
    args = argv[1:] if args is None else args
    service = args[0] if args else "blog"
    if service not in SERVICES:
        raise SystemExit(f"usage: python main.py [{'|'.join(SERVICES)}]")

    app_path, port = SERVICES[service]
    run(
        app_path,
        host=settings.HOST,
        port=port,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
        loop="uvloop",
        http="httptools",
    )


if __name__ == "__main__":
    main()
