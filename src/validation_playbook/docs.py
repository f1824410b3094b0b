"""
Markdown Reference Renderer

Renders the example models as markdown: a heading per model, its
description, a field table and, when the model declares one, an example
payload in a fenced json block.
"""

import inspect
import json
from pathlib import Path
from typing import Iterable, List, Optional, Type, Union

from pydantic import BaseModel

from validation_playbook.annotations import field_catalog
from validation_playbook.registry import ModelRegistry

TABLE_HEADER = "| Field | Type | Required | Default | Constraints | Description |"
TABLE_RULE = "|---|---|---|---|---|---|"
DEFAULT_TITLE = "Model Reference"


def _cell(value) -> str:
    text = "" if value is None else str(value)
    return text.replace("|", "\\|").replace("\n", " ")


def _anchor(title: str) -> str:
    return "".join(c for c in title.lower().replace(" ", "-") if c.isalnum() or c in "-_")


def _description(model_cls: Type[BaseModel]) -> str:
    doc = inspect.getdoc(model_cls) or ""
    return doc.split("\n\n")[0].strip()


def _example(model_cls: Type[BaseModel]) -> Optional[dict]:
    extra = model_cls.model_config.get("json_schema_extra")
    if isinstance(extra, dict):
        examples = extra.get("examples") or []
        if examples:
            return examples[0]
    return None


def render_model_reference(model_cls: Type[BaseModel], heading_level: int = 2) -> str:
    """Markdown section for one model."""
    lines: List[str] = [f"{'#' * heading_level} {model_cls.__name__}", ""]

    description = _description(model_cls)
    if description:
        lines += [description, ""]

    lines += [TABLE_HEADER, TABLE_RULE]
    for spec in field_catalog(model_cls):
        constraints = ", ".join(f"{k}={v}" for k, v in spec.constraints.items())
        lines.append(
            "| "
            + " | ".join(
                [
                    f"`{spec.name}`",
                    _cell(spec.type_label),
                    "yes" if spec.required else "no",
                    _cell(spec.default if spec.default is not None else "-"),
                    _cell(constraints or "-"),
                    _cell(spec.description),
                ]
            )
            + " |"
        )

    example = _example(model_cls)
    if example is not None:
        lines += ["", "Example:", "", "```json", json.dumps(example, indent=2, ensure_ascii=False), "```"]

    return "\n".join(lines) + "\n"


def render_reference(
    models: Optional[Iterable[Type[BaseModel]]] = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """Full document: title, table of contents, then one section per model."""
    models = list(models) if models is not None else ModelRegistry.all_models()

    parts = [f"# {title}", ""]
    for model_cls in models:
        parts.append(f"- [{model_cls.__name__}](#{_anchor(model_cls.__name__)})")
    parts.append("")

    for model_cls in models:
        parts.append(render_model_reference(model_cls))

    return "\n".join(parts)


def write_reference(path: Union[str, Path], models: Optional[Iterable[Type[BaseModel]]] = None) -> Path:
    """Writes the rendered reference to `path`, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_reference(models), encoding="utf-8")
    print(f"📄 [Docs] Reference written to {target}")
    return target
