"""Typed models for HtmlDependencyManifest JSON documents.

These Pydantic v2 models are used by the command line entry point, which
reads a list of dependency declarations from disk, validates it against
``schemas/HtmlDependencyManifest.v1.json`` and hands the resulting
:class:`~htmldeps.models.dependency.HtmlDependency` objects to the renderer
or the staging helpers.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

import jsonschema
from pydantic import BaseModel

from htmldeps.models.dependency import HtmlDependency, html_dependency

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "HtmlDependencyManifest.v1.json"

SrcSpec = Union[str, dict[str, str], list[list[str]]]
AttachmentSpec = Union[str, dict[str, Optional[str]]]


class ManifestEntry(BaseModel):
    name:       str
    version:    str
    src:        SrcSpec
    meta:       dict[str, str] = {}
    script:     list[str] = []
    stylesheet: list[str] = []
    head:       list[str] = []
    attachment: Union[list[AttachmentSpec], dict[str, str]] = []

    def to_dependency(self) -> HtmlDependency:
        src: Any = self.src
        if isinstance(src, list):
            src = [tuple(pair) for pair in src]
        return html_dependency(
            self.name,
            self.version,
            src,
            meta=self.meta,
            script=self.script,
            stylesheet=self.stylesheet,
            head=self.head,
            attachment=self.attachment,
        )


class DependencyManifest(BaseModel):
    schema_id:      str = "HtmlDependencyManifest"
    schema_version: str = "1.0.0"
    dependencies:   list[ManifestEntry]

    def to_dependencies(self) -> list[HtmlDependency]:
        return [entry.to_dependency() for entry in self.dependencies]


def load_schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def parse_manifest(data: dict) -> DependencyManifest:
    """Validate *data* against the JSON schema, then build the typed model.

    Raises:
        jsonschema.ValidationError: If *data* does not conform to the schema.
    """
    jsonschema.validate(instance=data, schema=load_schema())
    return DependencyManifest.model_validate(data)


def dependency_to_entry(dep: HtmlDependency) -> dict:
    """Serialise *dep* into a manifest entry dict.

    ``src`` is written as a pair list so repeated kinds keep their order.
    """
    entry: dict[str, Any] = {
        "name": dep.name,
        "version": dep.version,
        "src": [[kind, location] for kind, location in dep.src],
    }
    if dep.meta:
        entry["meta"] = dict(dep.meta)
    for field in ("script", "stylesheet", "head"):
        values = getattr(dep, field)
        if values:
            entry[field] = list(values)
    if dep.attachment:
        entry["attachment"] = [
            {"path": a.path, "name": a.name} if a.name else a.path
            for a in dep.attachment
        ]
    return entry


def dependencies_to_manifest(deps: list[HtmlDependency]) -> dict:
    return {
        "schema_id": "HtmlDependencyManifest",
        "schema_version": "1.0.0",
        "dependencies": [dependency_to_entry(d) for d in deps],
    }
