"""HTTP interface: POST /links with {"url": ...}."""
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .config import Settings
from .errors import ErrorCategory, ResolveError
from .resolver import resolve_direct_links

STATUS_CODES = {
    ErrorCategory.BAD_REQUEST: 400,
    ErrorCategory.INTERNAL: 500,
}


class LinksRequest(BaseModel):
    url: str


class LinksResponse(BaseModel):
    links: str


def create_app(settings=None):
    settings = settings or Settings.from_env()

    app = FastAPI(title="Imgur direct links")
    app.state.settings = settings

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # sync endpoint: run in the threadpool, one session per request
    @app.post("/links", response_model=LinksResponse)
    def get_links(payload: LinksRequest):
        try:
            links = resolve_direct_links(payload.url, settings=app.state.settings)
        except ResolveError as ex:
            raise HTTPException(
                status_code=STATUS_CODES[ex.category], detail=ex.message
            ) from ex
        return LinksResponse(links=links)

    return app
