from pydantic import BaseModel, Field, field_validator


class ApiSettings(BaseModel):
    base_url: str
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return v.rstrip("/")


class StorageSettings(BaseModel):
    token_key: str = "token"
    identity_key: str = "user"


class TrackingSettings(BaseModel):
    enabled: bool = True
    interval_seconds: int = Field(default=30, gt=0)
    min_report_seconds: int = Field(default=5, ge=0)
    view_path: str = "/content-views/{content_id}"
    beacon_timeout_seconds: float = Field(default=5.0, gt=0)

    @field_validator("view_path")
    @classmethod
    def must_template_content_id(cls, v: str) -> str:
        if "{content_id}" not in v:
            raise ValueError("view_path must contain '{content_id}'")
        return v


class UiSettings(BaseModel):
    title: str = "Legal Clinic Uganda"
    categories: list[str] = Field(default_factory=lambda: ["All"])
    password_min_length: int = Field(default=8, ge=1)


class Settings(BaseModel):
    api: ApiSettings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    tracking: TrackingSettings = Field(default_factory=TrackingSettings)
    ui: UiSettings = Field(default_factory=UiSettings)
