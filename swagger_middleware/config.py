"""
Configuration for the documentation middleware
"""
import os
from typing import Any, Callable, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SwaggerConfigError


class Config(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    next: Optional[Callable[[Any], bool]] = Field(
        None, description="Skip the middleware for a request when this returns True; must not read the body"
    )
    base_path: str = Field("/", description="Prefix under which both endpoints live")
    file_path: str = Field("./swagger.json", description="swagger.json or swagger.yaml file to serve")
    ui_path: str = Field("docs", description="Combined with base_path for the full UI path")
    title: str = Field("Fiber API documentation", description="Title of the documentation page")
    ui: Literal["swagger", "redoc"] = Field("swagger", description="Renderer used for the UI page")

    def with_defaults(self) -> "Config":
        """Replace empty fields with the values from CONFIG_DEFAULT"""
        update = {
            name: getattr(CONFIG_DEFAULT, name)
            for name in ("base_path", "file_path", "ui_path", "title")
            if not getattr(self, name)
        }
        if not update:
            return self
        return self.model_copy(update=update)

    def merge(self, **overrides) -> "Config":
        """Validated copy with overrides applied, raising SwaggerConfigError on bad values"""
        try:
            return type(self).model_validate({**dict(self), **overrides})
        except ValidationError as err:
            raise SwaggerConfigError(f"Invalid documentation config: {err}") from err

    @classmethod
    def from_env(cls, prefix: str = "SWAGGER_", **overrides) -> "Config":
        """Build a config from environment variables (and .env), keyword overrides win"""
        load_dotenv()
        values = {
            "base_path": os.getenv(f"{prefix}BASE_PATH", ""),
            "file_path": os.getenv(f"{prefix}FILE_PATH", ""),
            "ui_path": os.getenv(f"{prefix}UI_PATH", ""),
            "title": os.getenv(f"{prefix}TITLE", ""),
        }
        ui = os.getenv(f"{prefix}UI")
        if ui:
            values["ui"] = ui.lower()
        values.update(overrides)
        try:
            config = cls(**values)
        except ValidationError as err:
            raise SwaggerConfigError(f"Invalid documentation config from environment: {err}") from err
        return config.with_defaults()


CONFIG_DEFAULT = Config()
