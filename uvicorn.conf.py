from app.core.config import get_settings

settings = get_settings()

app = "app.main:app"
host = settings.BACKEND_HOST
port = settings.BACKEND_PORT
log_level = "debug" if settings.DEBUG else "info"
workers = 1 if settings.DEBUG else 2
proxy_headers = True


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=log_level,
        workers=workers,
        proxy_headers=proxy_headers,
    )
