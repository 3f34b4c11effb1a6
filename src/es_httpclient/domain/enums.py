"""Typed enumerations shared by requests, responses and the HTTP layer."""

from __future__ import annotations

from enum import StrEnum


class HttpMethod(StrEnum):
    """Represent HTTP methods used by the REST endpoints."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RefreshPolicy(StrEnum):
    """Represent the `refresh` query parameter of write requests."""

    IMMEDIATE = "true"
    WAIT_UNTIL = "wait_for"
    NONE = "false"


class OpType(StrEnum):
    """Represent the operation type of an index request."""

    INDEX = "index"
    CREATE = "create"


class DocWriteResult(StrEnum):
    """Represent the outcome of a document write operation."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    NOOP = "noop"


class AliasActionType(StrEnum):
    """Represent supported alias mutations."""

    ADD = "add"
    REMOVE = "remove"
    REMOVE_INDEX = "remove_index"
