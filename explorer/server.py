# -*- coding: utf-8 -*-

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response
import uvicorn

from explorer import errors
from explorer.assets import content_type_for, has_local_assets
from explorer.bootstrap import start, render_initializer, render_index, DEFAULT_TITLE
from explorer.config import CONFIG
from explorer.errors import HttpError
from explorer.spec_loader import load_spec, spec_to_json, spec_title

logger = logging.getLogger('openapi-explorer')

EXPLORER_PREFIX = "/explorer"

router = APIRouter(prefix=EXPLORER_PREFIX)


def _mount_viewer(app, config):
    app.state.viewer_config = config
    app.state.initializer_script = render_initializer(config)


@router.get("/swagger.json")
async def get_specs(request: Request):
    spec_data = request.app.state.spec_data
    if spec_data is None:
        raise HttpError.internal_server_error("Failed to serialize OpenAPI: no schema document loaded")
    try:
        spec = spec_to_json(spec_data)
    except (TypeError, ValueError) as e:
        raise HttpError.internal_server_error(f"Failed to serialize OpenAPI: {e}")
    return Response(content=spec, media_type="application/json")


@router.get("/")
async def get_index(request: Request):
    return HTMLResponse(_index_html(request.app))


@router.get("/{tail:path}")
async def get_swagger(tail: str, request: Request):
    if tail == "index.html":
        return HTMLResponse(_index_html(request.app))
    if tail == "swagger-initializer.js":
        script = getattr(request.app.state, "initializer_script", None)
        if script is None:
            raise HttpError.internal_server_error("Explorer is not started")
        return Response(content=script, media_type=content_type_for(tail))
    # asset_dir直下のファイルのみ返す
    asset_dir = Path(CONFIG["asset_dir"])
    if Path(tail).name != tail or not (asset_dir / tail).is_file():
        raise HttpError.not_found("Path not handled")
    return Response(content=(asset_dir / tail).read_bytes(), media_type=content_type_for(tail))


def _index_html(app):
    asset_base = "." if has_local_assets(CONFIG["asset_dir"]) else CONFIG["swagger_ui_cdn"]
    title = spec_title(app.state.spec_data, DEFAULT_TITLE)
    return render_index(asset_base, title=title)


def create_app(spec_data=None):
    """
    エクスプローラのアプリケーションを生成する
    spec_data: /explorer/swagger.json で返すAPI仕様書
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 起動時にビューアを初期化する
        start(lambda config: _mount_viewer(app, config))
        logger.info(f"swagger available at http://{CONFIG['host']}:{CONFIG['port']}{EXPLORER_PREFIX}/")
        yield
        logger.info("エクスプローラを停止します")

    app = FastAPI(
        title="openapi-explorer",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.spec_data = spec_data
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    errors.register(app)
    app.include_router(router)
    return app


def run(spec_file=None):
    """
    API仕様書を読み込んでエクスプローラを起動する
    """
    spec_file = spec_file or CONFIG["spec_file"]
    spec_data = load_spec(spec_file)
    if spec_data is None:
        logger.warning(f"仕様書を読み込めませんでした: {spec_file}")
    uvicorn.run(create_app(spec_data), host=CONFIG["host"], port=CONFIG["port"])
