"""
email_bridge — app FastAPI autonome
Démarrer : uvicorn email_bridge.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.settings import load_settings
from .router import router


def create_app() -> FastAPI:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")

    app = FastAPI(title="email_bridge — HTML ⇄ Document", version="0.1.0", docs_url="/docs")
    # L'éditeur tourne dans un iframe d'une autre origine
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
