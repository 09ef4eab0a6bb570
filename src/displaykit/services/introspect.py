"""Model introspection: build PropertyDescriptors from Python classes.

Supports pydantic models, dataclasses, and plain annotated classes.
Explicit labels come from ``Field(title=...)`` on pydantic models and
``field(metadata={"label": ...})`` on dataclasses.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from datetime import date, datetime
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from displaykit.domain.descriptors import PropertyDescriptor
from displaykit.domain.types import TypeTag

logger = logging.getLogger(__name__)

LABEL_METADATA_KEY = "label"


def _strip_annotated(annotation: Any) -> Any:
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def type_tag_for(annotation: Any) -> tuple[TypeTag, bool]:
    """Return ``(type_tag, nullable)`` for a type annotation.

    ``Optional[X]``, ``X | None`` and ``Annotated[X, ...]`` are unwrapped.
    Unions of more than one non-None member map to ``TypeTag.OTHER``.

    Examples:
        >>> type_tag_for(bool | None)
        (<TypeTag.BOOLEAN: 'Boolean'>, True)
    """
    annotation = _strip_annotated(annotation)
    nullable = False

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [a for a in get_args(annotation) if a is not type(None)]
        nullable = len(members) < len(get_args(annotation))
        if len(members) != 1:
            return TypeTag.OTHER, nullable
        annotation = _strip_annotated(members[0])

    if annotation is bool:
        return TypeTag.BOOLEAN, nullable
    if get_origin(annotation) is not None:
        return TypeTag.OTHER, nullable
    # datetime subclasses date, so it is checked first.
    if isinstance(annotation, type) and issubclass(annotation, datetime):
        return TypeTag.DATE, nullable
    if isinstance(annotation, type) and issubclass(annotation, date):
        return TypeTag.DATE_ONLY, nullable
    return TypeTag.OTHER, nullable


def _describe_pydantic(model_cls: type[BaseModel]) -> list[PropertyDescriptor]:
    descriptors: list[PropertyDescriptor] = []
    for field_name, info in model_cls.model_fields.items():
        tag, nullable = type_tag_for(info.annotation)
        descriptors.append(
            PropertyDescriptor(
                name=info.alias or field_name,
                declared_type=tag,
                container_type=model_cls,
                explicit_label=info.title,
                nullable=nullable,
            )
        )
    return descriptors


def _describe_dataclass(model_cls: type) -> list[PropertyDescriptor]:
    hints = get_type_hints(model_cls, include_extras=True)
    descriptors: list[PropertyDescriptor] = []
    for f in dataclasses.fields(model_cls):
        tag, nullable = type_tag_for(hints.get(f.name, f.type))
        descriptors.append(
            PropertyDescriptor(
                name=f.name,
                declared_type=tag,
                container_type=model_cls,
                explicit_label=f.metadata.get(LABEL_METADATA_KEY),
                nullable=nullable,
            )
        )
    return descriptors


def _describe_annotated(model_cls: type) -> list[PropertyDescriptor]:
    descriptors: list[PropertyDescriptor] = []
    for name, annotation in get_type_hints(model_cls, include_extras=True).items():
        if name.startswith("_") or get_origin(annotation) is typing.ClassVar:
            continue
        tag, nullable = type_tag_for(annotation)
        descriptors.append(
            PropertyDescriptor(
                name=name,
                declared_type=tag,
                container_type=model_cls,
                nullable=nullable,
            )
        )
    return descriptors


def describe_model(model_cls: type) -> list[PropertyDescriptor]:
    """Return one PropertyDescriptor per property of *model_cls*.

    Raises:
        TypeError: If *model_cls* is not a class.
    """
    if not isinstance(model_cls, type):
        msg = f"Expected a class, got {type(model_cls).__name__}"
        raise TypeError(msg)

    if issubclass(model_cls, BaseModel):
        descriptors = _describe_pydantic(model_cls)
    elif dataclasses.is_dataclass(model_cls):
        descriptors = _describe_dataclass(model_cls)
    else:
        descriptors = _describe_annotated(model_cls)

    logger.debug("Described %s: %d properties", model_cls.__qualname__, len(descriptors))
    return descriptors
