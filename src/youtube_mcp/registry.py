"""Tool, resource and prompt catalog.

Entries are collected and checked first, then installed on a ``FastMCP``
instance in one pass. A duplicate name, a duplicate URI or a URI template whose
variables do not match its handler raises before anything is installed.
"""

import inspect
import logging
import re
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from youtube_mcp.errors import DuplicateNameError, TemplateMismatchError

logger = logging.getLogger(__name__)

_TEMPLATE_VAR = re.compile(r"{(\w+)}")


def read_only_annotations(title: str) -> ToolAnnotations:
    return ToolAnnotations(
        title=title,
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    )


@dataclass(frozen=True)
class ToolEntry:
    name: str
    title: str
    description: str
    handler: Callable[..., Awaitable[str]]
    annotations: ToolAnnotations | None = None

    def __post_init__(self):
        if self.annotations is None:
            object.__setattr__(self, "annotations", read_only_annotations(self.title))


@dataclass(frozen=True)
class ResourceEntry:
    name: str
    uri_template: str
    description: str
    handler: Callable[..., Any]
    mime_type: str = "application/json"

    @property
    def variables(self) -> set[str]:
        return set(_TEMPLATE_VAR.findall(self.uri_template))


@dataclass(frozen=True)
class PromptEntry:
    name: str
    title: str
    description: str
    handler: Callable[..., Any]


@dataclass
class Catalog:
    tools: dict[str, ToolEntry] = field(default_factory=dict)
    resources: dict[str, ResourceEntry] = field(default_factory=dict)
    prompts: dict[str, PromptEntry] = field(default_factory=dict)

    def add_tool(self, entry: ToolEntry) -> None:
        if entry.name in self.tools:
            raise DuplicateNameError(f"Tool already registered: {entry.name}")
        self.tools[entry.name] = entry

    def add_resource(self, entry: ResourceEntry) -> None:
        if entry.name in self.resources:
            raise DuplicateNameError(f"Resource already registered: {entry.name}")
        for existing in self.resources.values():
            if existing.uri_template == entry.uri_template:
                raise DuplicateNameError(
                    f"URI {entry.uri_template} already registered by {existing.name}"
                )
        params = set(inspect.signature(entry.handler).parameters)
        if params != entry.variables:
            raise TemplateMismatchError(
                f"Resource {entry.name}: URI variables {sorted(entry.variables)} "
                f"do not match handler parameters {sorted(params)}"
            )
        self.resources[entry.name] = entry

    def add_prompt(self, entry: PromptEntry) -> None:
        if entry.name in self.prompts:
            raise DuplicateNameError(f"Prompt already registered: {entry.name}")
        self.prompts[entry.name] = entry

    def extend(
        self,
        tools: Iterable[ToolEntry] = (),
        resources: Iterable[ResourceEntry] = (),
        prompts: Iterable[PromptEntry] = (),
    ) -> "Catalog":
        for t in tools:
            self.add_tool(t)
        for r in resources:
            self.add_resource(r)
        for p in prompts:
            self.add_prompt(p)
        return self

    def install(self, server: FastMCP) -> FastMCP:
        for t in self.tools.values():
            # Unstructured only: every call yields a single JSON text block
            server.add_tool(
                t.handler,
                name=t.name,
                title=t.title,
                description=t.description,
                annotations=t.annotations,
                structured_output=False,
            )
        for r in self.resources.values():
            server.resource(
                r.uri_template,
                name=r.name,
                description=r.description,
                mime_type=r.mime_type,
            )(r.handler)
        for p in self.prompts.values():
            server.prompt(name=p.name, title=p.title, description=p.description)(p.handler)

        logger.debug(
            f"Installed {len(self.tools)} tools, {len(self.resources)} resources, "
            f"{len(self.prompts)} prompts"
        )
        return server
