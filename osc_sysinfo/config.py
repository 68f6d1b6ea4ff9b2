from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from osc_sysinfo.formatting import Section

VRCHAT_CHATBOX_ADDRESS = "/chatbox/input"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # --- destination ---
    host: str = "127.0.0.1"
    port: int = Field(default=9000, ge=1, le=65535)
    address: str = VRCHAT_CHATBOX_ADDRESS
    immediate: bool = True  # post straight to the chat box, skip the keyboard

    # --- loop ---
    interval: int = Field(default=3, ge=1)  # seconds between messages

    # --- sections ---
    show_time: bool = True
    show_cpu: bool = True
    show_ram: bool = True
    show_gpu: bool = True
    gpu_index: int = Field(default=0, ge=0)

    # --- logging ---
    log_level: LogLevel = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "OSC_SYSINFO_"}

    @field_validator("address")
    @classmethod
    def check_address(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("OSC address must start with '/'")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def sections(self) -> list[Section]:
        """Enabled sections in display order."""
        flags = {
            Section.TIME: self.show_time,
            Section.CPU: self.show_cpu,
            Section.RAM: self.show_ram,
            Section.GPU: self.show_gpu,
        }
        return [section for section in Section if flags[section]]
