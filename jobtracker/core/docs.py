"""
OpenAPI documentation settings.

Built once at startup from `settings` and never mutated afterwards.
"""

from dataclasses import dataclass
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from jobtracker.core.config import settings


@dataclass(frozen=True)
class DocsConfig:
    title: str
    version: str
    description: str
    server_url: str
    server_description: str = "Local server"
    security_scheme: str = "bearerAuth"


def docs_config_from_settings() -> DocsConfig:
    return DocsConfig(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.PROJECT_DESCRIPTION,
        server_url=settings.SWAGGER_SERVER_URL,
    )


def configure_openapi(app: FastAPI, config: DocsConfig) -> None:
    """
    Replace the app's schema generator with one that adds the server URL and
    a JWT bearer security scheme required by default.
    """

    def openapi():
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=config.title,
            version=config.version,
            description=config.description,
            routes=app.routes,
            servers=[{"url": config.server_url, "description": config.server_description}],
        )
        components = schema.setdefault("components", {})
        components.setdefault("securitySchemes", {})[config.security_scheme] = {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        schema["security"] = [{config.security_scheme: []}]

        app.openapi_schema = schema
        return schema

    app.openapi = openapi
