from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from weatherapp.api.routers import weather
from weatherapp.providers.weather.base import WeatherProvider


def create_app(provider: Optional[WeatherProvider] = None) -> FastAPI:
    app = FastAPI(title="Weather Comparison API", version="0.1.0")
    app.state.weather_provider = provider

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(weather.router)
    return app


app = create_app()
