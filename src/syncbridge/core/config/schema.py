from __future__ import annotations

from pydantic import BaseModel, Field

from syncbridge.core.runtime.timeouts import DEFAULT_TIMEOUT_SECONDS


class RuntimeConfig(BaseModel):
    default_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    enforce_single_completion: bool = True


class TelemetryConfig(BaseModel):
    log_level: str = "INFO"
    json_logs: bool = True


class BridgeConfig(BaseModel):
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
