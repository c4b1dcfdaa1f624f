import uvicorn

from app.core.config import settings, is_development

if __name__ == "__main__":
    print(f"[STARTUP] Database file: {settings.DATABASE_PATH}")
    print(f"[STARTUP] Server binding to host={settings.HOST} port={settings.PORT}")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=is_development(),
        log_level=settings.LOG_LEVEL.lower(),
        # One worker: the JSON store has no cross-process locking
        workers=1,
        lifespan="auto",
    )
