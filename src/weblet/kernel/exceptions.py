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
"""Weblet exception hierarchy."""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class WebletException(Exception):
    """Base exception for all Weblet errors.

    Carries an optional error code and context dict for structured error data.
    Catch WebletException to handle every toolkit error, or catch a specific
    subclass for targeted handling.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(WebletException):
    """Domain rule violations and request-level errors."""


class ResourceNotFoundException(BusinessException):
    """Requested resource (form file part, route) does not exist."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(WebletException):
    """Infrastructure failures: storage, templates, serialization."""


class SessionStoreLoadException(InfrastructureException):
    """Persisted session state could not be read or decoded at startup."""


class SessionPersistenceException(InfrastructureException):
    """A session store could not write its persisted state."""


class TemplateLoadException(InfrastructureException):
    """Templates could not be located or parsed."""


class SerializationException(InfrastructureException):
    """A response payload could not be serialized."""
