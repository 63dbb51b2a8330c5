from typing import List

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from resolverkit.config import settings
from resolverkit.examples import person
from resolverkit.fields.format import MissingSourceFieldError
from resolverkit.obs.context import ResolverContext
from resolverkit.obs.logger import log_event
from resolverkit.obs.middleware import ContextMiddleware, get_context

load_dotenv()


app = FastAPI(
    title="resolverkit playground",
    version="0.1.0",
)
app.add_middleware(ContextMiddleware)


@app.exception_handler(MissingSourceFieldError)
async def missing_source_field(request: Request, exc: MissingSourceFieldError):
    log_event("format_error", level="ERROR", path=exc.path, route=request.url.path)
    return JSONResponse(
        {"error": "missing_source_field", "path": exc.path},
        status_code=500,
    )


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "resolverkit", "env": settings.APP_ENV}


@app.get("/test")
async def person_example(
    include_private: List[str] = Query(default=[]),
    context: ResolverContext = Depends(get_context),
):
    """Format the sample person; ``include_private=*`` exposes every private field."""
    selected = True if "*" in include_private else include_private
    data = await person({"include_private": selected}, context)
    return {"data": data, "metrics": context.resolver_metrics.as_dict()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
