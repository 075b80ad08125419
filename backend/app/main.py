# backend/app/main.py
from fastapi import FastAPI

from backend.app.api.analysis import router as analysis_router
from backend.app.api.mailbox import router as mailbox_router

app = FastAPI(title="mail-insight API")
app.include_router(analysis_router, prefix="/api")
app.include_router(mailbox_router, prefix="/api")
