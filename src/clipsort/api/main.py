import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from clipsort.database import dump_categories, dump_items
from clipsort.services import HistoryService

logger = logging.getLogger(__name__)

_notices: ContextVar[Optional[List[str]]] = ContextVar("notices", default=None)


def collect_notice(message: str) -> None:
    logger.warning(message)
    bucket = _notices.get()
    if bucket is not None:
        bucket.append(message)


class CategoryName(BaseModel):
    name: str = Field(min_length=1)


def _grouped_json(grouped) -> Dict[str, list]:
    return {key: dump_items(items) for key, items in grouped.items()}


def create_app(service: Optional[HistoryService] = None) -> FastAPI:
    service = service or HistoryService(notify=collect_notice)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await service.load()
        yield
        await service.close()

    # handlers that read the service must stay coroutines; GroupedViews is
    # not safe to share with threadpool workers
    app = FastAPI(title="ClipSort", lifespan=lifespan)
    app.state.service = service

    @app.get("/")
    def root():
        return "running"

    @app.get("/history/by-date")
    async def history_by_date():
        return _grouped_json(service.by_date())

    @app.get("/history/by-category")
    async def history_by_category():
        return _grouped_json(service.by_category())

    @app.get("/categories")
    async def list_categories():
        return dump_categories(service.categories)

    @app.post("/categories")
    async def create_category(body: CategoryName):
        notices: List[str] = []
        _notices.set(notices)
        category = await service.create_category(body.name)
        if category is None:
            return {"error": notices[0] if notices else "could not create category"}
        return {"ok": True, "category": category.model_dump(mode="json")}

    @app.post("/items/{item_id}/category")
    async def assign_category(item_id: str, body: CategoryName):
        items = await service.assign_category(item_id, body.name)
        if items is None:
            return {"error": f"could not assign {item_id} to {body.name!r}"}
        return {"ok": True, "items": dump_items(items)}

    return app
