import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from daywiki import __version__
from daywiki.parsing import EmptyInputError, parse_article


LOG_LEVEL = os.getenv("DAYWIKI_LOG_LEVEL", "INFO").upper()

app = FastAPI(
    title="Daywiki API",
    description="Разбор статей Википедии о календарных днях",
    version=__version__,
)


@app.on_event("startup")
def on_startup() -> None:
    logging.getLogger("daywiki").setLevel(LOG_LEVEL)


class ParseRequest(BaseModel):
    text: str = Field(
        ...,
        description="Полный вики-текст статьи о дне.",
    )


@app.get("/status/info")
def status_info():
    return {"name": "daywiki", "version": __version__}


@app.post("/parse")
def parse(payload: ParseRequest):
    try:
        report = parse_article(payload.text)
    except EmptyInputError:
        raise HTTPException(status_code=400, detail="Пустой текст статьи")
    return report.to_dict()
