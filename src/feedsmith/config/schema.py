"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class HttpConfig(BaseModel):
    """HTTP transport configuration shared by every source."""

    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str | None = None
    # 0 disables the limit and fetches every episode page at once
    max_concurrency: int = Field(default=10, ge=0)


class IVooxSelectors(BaseModel):
    """CSS selectors for iVoox pages.

    These track the site's markup exactly and break when it changes. Keeping
    them here lets a markup update be handled by editing config.yaml.
    """

    search_result: str = ".modulo-type-programa .header-modulo a"
    channel_name: str = "h1"
    channel_author: str = ".d-flex > .text-medium a"
    channel_description: str = ".d-flex > .d-none > .text-truncate-3"
    channel_image: str = ".d-flex > .image-wrapper.pr-2 > img"
    episode_link: str = ".pl-1 > .d-flex > .d-flex > .w-100 > a"
    episode_description: str = "div.mb-3 > div > p.text-truncate-5"
    episode_date: str = "span.text-medium.ml-sm-1"
    episode_image: str = ".d-flex > .image-wrapper.pr-2 > img"
    image_attribute: str = "data-lazy-src"


class IVooxConfig(BaseModel):
    """iVoox site configuration."""

    search_url_template: str = "https://www.ivoox.com/{slug}_sw_1_1.html"
    episode_origin: str = "https://ivoox.com"
    audio_url_template: str = (
        "https://www.ivoox.com/listenembeded_mn_12345678_1.mp3?source=EMBEDEDHTML5"
    )
    audio_id_placeholder: str = "12345678"
    ttl_minutes: int = Field(default=60, gt=0)
    selectors: IVooxSelectors = Field(default_factory=IVooxSelectors)


class GlobalConfig(BaseModel):
    """Global Feedsmith configuration."""

    version: str = "1"
    default_output_dir: Path = Field(default=Path("~/feeds"))
    log_level: LogLevel = "INFO"
    default_source: str = "ivoox"
    allow_partial: bool = False

    http: HttpConfig = Field(default_factory=HttpConfig)
    ivoox: IVooxConfig = Field(default_factory=IVooxConfig)
