from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from compair.config import get_settings
from compair.logging_config import setup_logging
from compair.routers import compare

VERSION = "1.0.0"
STATIC_DIR = Path(__file__).parent / "static"

setup_logging(get_settings().log_level)

app = FastAPI(
    title="ComPair",
    version=VERSION,
    description="Side-by-side line and word comparison of two text files."
)


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/status")
def status():
    return {
        "status": "running",
        "service": "compair",
        "version": VERSION
    }

app.include_router(compare.router, prefix="/api")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
