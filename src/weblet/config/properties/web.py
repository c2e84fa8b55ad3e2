# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Web subsystem configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, Field

from weblet.core.config import config_properties


@config_properties(prefix="weblet.web")
class WebProperties(BaseModel):
    """Configuration for the web subsystem (weblet.web.*)."""

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    templates: str | None = None
    reload_templates: bool = False
    static_dir: str | None = None
    static_path: str = "/static"
