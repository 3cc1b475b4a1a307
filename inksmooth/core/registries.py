from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .builders import StrokeBuilder

stroke_builder_registry: dict[str, type["StrokeBuilder"]] = {}


def register_stroke_builder(name: str):
    def _decorator(cls: type["StrokeBuilder"]) -> type["StrokeBuilder"]:
        if not name or name in stroke_builder_registry:
            raise ValueError(f"Invalid or duplicate stroke builder name '{name}'")
        stroke_builder_registry[name] = cls
        return cls
    return _decorator


def get_stroke_builder(name: str, **kwargs) -> "StrokeBuilder":
    try:
        cls = stroke_builder_registry[name]
    except KeyError:
        raise KeyError(f"Unknown stroke builder '{name}', expected one of {sorted(stroke_builder_registry)}") from None
    return cls(**kwargs)
