from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProfileDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    uuid: str
    host: str
    port: int = 443
    name: str = "vless"
    path: str = "/"
    tls: bool = True
