from fastapi import FastAPI

from notes_app.api import draft, notes
from notes_app.logging_setup import setup_logging

setup_logging()

app = FastAPI(title="Notes API")
app.include_router(notes.router)
app.include_router(draft.router)


@app.get("/health")
def health():
    return {"ok": True}
