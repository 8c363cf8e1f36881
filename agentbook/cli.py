import click


@click.group()
def main() -> None:
    """Agentbook - sample-database CRUD API and keyword proxy."""


@main.command()
@click.option("--host", default=None, help="Bind host (default: from AGENTBOOK_HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Bind port (default: from AGENTBOOK_PORT or 3000).")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development.")
def api(host: str | None, port: int | None, reload: bool) -> None:
    """Start the agents / companies CRUD API."""
    import uvicorn

    from agentbook.crud_api.settings import ApiSettings

    settings = ApiSettings()

    uvicorn.run(
        "agentbook.crud_api.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level="warning",  # uvicorn's own logging is intercepted by loguru
    )


@main.command()
@click.option("--host", default=None, help="Bind host (default: from AGENTBOOK_PROXY_HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Bind port (default: from AGENTBOOK_PROXY_PORT or 3001).")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development.")
def proxy(host: str | None, port: int | None, reload: bool) -> None:
    """Start the keyword proxy."""
    import uvicorn

    from agentbook.keyword_proxy.settings import ProxySettings

    settings = ProxySettings()

    uvicorn.run(
        "agentbook.keyword_proxy.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level="warning",
    )


if __name__ == "__main__":
    main()
