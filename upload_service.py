"""
Image upload service

Accepts a single multipart upload on ``POST /upload`` (field ``image``),
stores it under a timestamp-randomized name and serves the directory at
``/images``.

Run with:
    uvicorn upload_service:app --port 5001
"""

import logging
import random
import shutil
import time
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config import configure_logging, settings
from errors import install_error_handlers

logger = logging.getLogger(__name__)


def unique_filename(original_name: str) -> str:
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}"
    return unique_suffix + Path(original_name).suffix


def create_upload_app(upload_dir: Optional[Union[str, Path]] = None) -> FastAPI:
    images_dir = Path(upload_dir or settings.upload_dir)
    images_dir.mkdir(parents=True, exist_ok=True)

    app = FastAPI(title="Anime Store Image Upload")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.mount("/images", StaticFiles(directory=str(images_dir)), name="images")

    @app.post("/upload")
    def upload(image: Optional[UploadFile] = File(None)):
        if image is None or not image.filename:
            raise HTTPException(status_code=400, detail="No file uploaded")
        filename = unique_filename(image.filename)
        with (images_dir / filename).open("wb") as out:
            shutil.copyfileobj(image.file, out)
        logger.info("Stored upload %s as %s", image.filename, filename)
        return {"imageUrl": f"/images/{filename}"}

    return app


app = create_upload_app()


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=settings.upload_port)
