# chatgen/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from chatgen.core.json import UTF8JSONResponse
from chatgen.core.config import Settings, settings as default_settings
from chatgen.core.errors import register_error_handlers
from chatgen.db.init_db import init_models
from chatgen.db.session import build_engine, build_sessionmaker
from chatgen.users.store import UserStore
from chatgen.chat.service import ChatClient
from chatgen.images.service import ImageClient

# routers
from chatgen.users.router import router as users_router
from chatgen.chat.router import router as chat_router
from chatgen.images.router import router as images_router

log = logging.getLogger("uvicorn")


def create_app(cfg: Settings | None = None) -> FastAPI:
    cfg = cfg or default_settings

    app = FastAPI(
        title="Chatgen API",
        default_response_class=UTF8JSONResponse,
    )
    app.state.settings = cfg

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allow_origins_list,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    register_error_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        log.info("🚀 Iniciando servicio…")
        if not cfg.GROQ_API_KEY:
            log.error("❌ GROQ_API_KEY missing in environment variables")

        engine = build_engine(cfg.DATABASE_URL)
        await init_models(engine, cfg.DATABASE_URL)
        app.state.engine = engine
        app.state.user_store = UserStore(
            build_sessionmaker(engine),
            timeout=cfg.STORE_TIMEOUT_SECONDS,
        )
        app.state.chat_client = ChatClient(cfg)
        app.state.image_client = ImageClient(cfg)
        log.info("✅ Startup listo.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.chat_client.aclose()
        await app.state.image_client.aclose()
        await app.state.engine.dispose()
        log.info("👋 Servicio detenido.")

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Backend working"

    @app.get("/api/health/")
    async def health():
        return {"ok": True, "service": "chatgen"}

    # routers
    app.include_router(users_router)    # /signup, /login
    app.include_router(chat_router)     # /chat
    app.include_router(images_router)   # /generate-image

    return app


app = create_app()
