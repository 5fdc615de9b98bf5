"""Domain layer utilities."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import MISSING, fields, is_dataclass
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def dict_to_dataclass(dc_type: type[D], values: Mapping[str, Any]) -> D:
    """Recursively build a dataclass instance from a nested mapping.

    Args:
        dc_type: The dataclass type to build.
        values: The mapping containing the data.

    Returns:
        An instance of dc_type populated with data from values.

    Note:
        - Keys in values that are not fields of dc_type are ignored.
        - All fields without defaults must be present in values.
        - Nested dataclasses are built from mappings, either directly
          (``Blog``, ``Blog | None``) or as items of a homogeneous sequence
          (``tuple[Blog, ...]``, ``list[Blog]``).

    Raises:
        TypeError: If dc_type is not a dataclass, or a sequence-of-dataclass
            field holds a string, a non-sequence or an item that is not a mapping.
        KeyError: If a required field is missing.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    type_hints = get_type_hints(dc_type)
    kwargs = {}
    for field in fields(dc_type):
        has_default = (
            field.default is not MISSING or field.default_factory is not MISSING
        )
        field_type = type_hints.get(field.name, field.type)
        if field.name in values:
            kwargs[field.name] = _convert(field_type, values[field.name])
        else:
            if not has_default and field.init:
                raise KeyError(f"Missing required field '{field.name}'")
            if not field.init:
                continue
            if field.default is not MISSING:
                kwargs[field.name] = field.default
            else:
                factory = cast(Callable[[], Any], field.default_factory)
                kwargs[field.name] = factory()
    return cast(D, dc_type(**kwargs))


def _convert(field_type: Any, inner: Any) -> Any:
    if (target_dc := _resolve_dataclass_type(field_type)) and isinstance(
        inner, Mapping
    ):
        return dict_to_dataclass(target_dc, inner)
    if item_dc := _resolve_item_dataclass_type(field_type):
        if isinstance(inner, (str, bytes)) or not isinstance(inner, Sequence):
            raise TypeError(
                f"Expected a sequence of {item_dc.__name__} records, "
                f"got {type(inner).__name__}"
            )
        items = [_convert_item(item_dc, item) for item in inner]
        return tuple(items) if get_origin(field_type) is tuple else items
    return inner


def _convert_item(item_dc: type[Any], item: Any) -> Any:
    if isinstance(item, item_dc):
        return item
    if not isinstance(item, Mapping):
        raise TypeError(
            f"Expected a {item_dc.__name__} record, got {type(item).__name__}"
        )
    return dict_to_dataclass(item_dc, item)


def _resolve_dataclass_type(field_type: Any) -> type[Any] | None:
    origin = get_origin(field_type)
    if origin is None:
        return cast(type[Any], field_type) if is_dataclass(field_type) else None
    args = [arg for arg in get_args(field_type) if arg is not NoneType]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None


def _resolve_item_dataclass_type(field_type: Any) -> type[Any] | None:
    if get_origin(field_type) not in (tuple, list):
        return None
    args = [arg for arg in get_args(field_type) if arg is not Ellipsis]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None
