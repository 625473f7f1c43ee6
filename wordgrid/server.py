import logging

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from wordgrid.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")


def apply_log_level():
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)


def _require(body: dict, name: str, kind: type):
    value = body.get(name)
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise HTTPException(400, f"'{name}' must be a {kind.__name__}")
    return value


def create_app() -> FastAPI:
    application = FastAPI(title="Word Grid Solver")
    apply_log_level()

    @application.get("/health")
    async def health():
        return {"status": "ok"}

    @application.post("/solve")
    async def solve(request: Request):
        from wordgrid.errors import GridError, InvalidWord
        from wordgrid.metrics import SolveTimer
        from wordgrid.solver import Solver
        from wordgrid.words import HttpLinesWordsSource, InMemoryWordsSource, default_source

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")

        grid_string = _require(body, "grid", str)
        width = _require(body, "width", int)
        height = _require(body, "height", int)
        diagonals = _require(body, "diagonals", bool) if "diagonals" in body else settings.DIAGONALS
        logger.info("POST /solve grid=%s %dx%d diagonals=%s", grid_string, width, height, diagonals)

        words = body.get("words")
        if words is not None:
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise HTTPException(400, "'words' must be a list of strings")
            source = InMemoryWordsSource(*words)
        elif body.get("words_url"):
            source = HttpLinesWordsSource(body["words_url"], settings.HTTP_TIMEOUT)
        else:
            source = default_source(settings.WORDS_URL, settings.WORDS_PATH, settings.HTTP_TIMEOUT)

        timer = SolveTimer()

        with timer.stage("build"):
            try:
                solver = Solver.from_string(grid_string, width, height, diagonals)
            except GridError as e:
                raise HTTPException(400, str(e))

        with timer.stage("fetch_words"):
            try:
                candidates = await source.get_words()
            except (httpx.HTTPError, OSError) as e:
                logger.error("Failed to fetch words: %s", e)
                raise HTTPException(502, f"Could not fetch word list: {e}")

        with timer.stage("solve"):
            try:
                all_words = solver.solve(
                    candidates,
                    workers=settings.WORKERS,
                    dedupe=settings.DEDUPE_OUTPUT,
                    strict=settings.STRICT_WORDS,
                )
            except InvalidWord as e:
                raise HTTPException(400, str(e))

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("%s (returning %d)", timer.report(len(all_words)), len(words))

        return JSONResponse({
            "grid": solver.grid.rows(),
            "words": words,
            "word_count": len(words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        apply_log_level()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
