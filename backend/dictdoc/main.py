from dataclasses import asdict

from fastapi import FastAPI

from dictdoc import __version__, api
from dictdoc.config import get_settings


app = FastAPI(
    title="dictdoc API",
    description="Dictionary explanations as styled tokens",
    version=__version__,
)

app.include_router(api.router)


@app.get("/status/info")
def status_info():
    return {"version": __version__, "settings": asdict(get_settings())}
