"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from marketplace_search.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Marketplace Search",
    description="Car marketplace search page: filters, facets, pagination and saved searches",
    version="0.1.0",
)

app.include_router(router)
