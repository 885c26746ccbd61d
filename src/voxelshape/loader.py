"""Blockstate / block model JSON loading.

Only the parts of the files that affect collision shape are read: variant
model references and rotations, element corners and element rotations.
Textures are kept for reference; faces, UVs and display transforms are
ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from voxelshape.contracts import (
    Axis,
    Blockstate,
    BlockModel,
    BlockVariant,
    CuboidElement,
    ElementRotation,
    Vector3,
)
from voxelshape.errors import LoaderError, ModelConversionError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "minecraft"

ModelResolver = Callable[[str], BlockModel]


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise LoaderError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LoaderError(f"Invalid JSON in {path}: {exc}") from exc


def _optional_float(payload: Mapping[str, Any], key: str) -> Optional[float]:
    value = payload.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise LoaderError(f"'{key}' must be a number, got {value!r}") from exc


# ---------------------------------------------------------------------------
# Blockstates
# ---------------------------------------------------------------------------

def parse_variant(key: str, payload: Any) -> BlockVariant:
    """Parse one entry of a blockstate's ``variants`` object."""
    if isinstance(payload, list):
        if not payload:
            raise LoaderError(f"Variant '{key}' has an empty alternatives list")
        # Weighted alternatives: the first one stands in for the shape.
        payload = payload[0]
    if not isinstance(payload, dict):
        raise LoaderError(f"Variant '{key}' must be an object")
    model = payload.get("model")
    if not isinstance(model, str) or not model:
        raise LoaderError(f"Variant '{key}' has no model reference")
    return BlockVariant(
        key=key,
        model=model,
        x=_optional_float(payload, "x"),
        y=_optional_float(payload, "y"),
        z=_optional_float(payload, "z"),
        uvlock=bool(payload.get("uvlock", False)),
    )


def parse_blockstate(payload: Any, name: str = "blockstate") -> Blockstate:
    if not isinstance(payload, dict):
        raise LoaderError(f"Blockstate '{name}' must be a JSON object")
    variants = payload.get("variants")
    if not isinstance(variants, dict):
        if "multipart" in payload:
            raise LoaderError(f"Blockstate '{name}' uses multipart, which is not supported")
        raise LoaderError(f"Blockstate '{name}' has no 'variants' object")
    return Blockstate(
        name=name,
        variants=[parse_variant(key, value) for key, value in variants.items()],
    )


def load_blockstate(path: str | Path) -> Blockstate:
    path = Path(path)
    blockstate = parse_blockstate(_read_json(path), name=path.stem)
    logger.info("Loaded blockstate %s: %d variant(s)", path, len(blockstate.variants))
    return blockstate


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

def parse_element(payload: Mapping[str, Any], index: int = 0) -> CuboidElement:
    """Parse one model element.

    Vector lengths and axis names are validated by the value types, so a
    malformed element raises MalformedVectorError / InvalidAxisError.
    """
    try:
        from_corner = payload["from"]
        to_corner = payload["to"]
    except KeyError as exc:
        raise LoaderError(f"Element {index} is missing {exc.args[0]!r}") from exc

    rotation = None
    rot = payload.get("rotation")
    if rot is not None:
        if not isinstance(rot, dict):
            raise LoaderError(f"Element {index} rotation must be an object")
        rotation = ElementRotation(
            origin=Vector3.from_sequence(rot.get("origin", []), "rotation.origin"),
            axis=Axis.parse(rot.get("axis")),
            angle=float(rot.get("angle", 0.0)),
        )

    return CuboidElement(
        from_corner=Vector3.from_sequence(from_corner, "from"),
        to_corner=Vector3.from_sequence(to_corner, "to"),
        rotation=rotation,
        name=payload.get("name") or f"element_{index}",
    )


def parse_model(payload: Any, model_id: str) -> BlockModel:
    if not isinstance(payload, dict):
        raise LoaderError(f"Model '{model_id}' must be a JSON object")
    raw_elements: List[Mapping[str, Any]] = payload.get("elements") or []
    textures: Dict[str, str] = dict(payload.get("textures") or {})
    try:
        elements = [parse_element(el, i) for i, el in enumerate(raw_elements)]
    except (LoaderError, ValueError, TypeError) as exc:
        raise ModelConversionError(model_id, None, str(exc)) from exc
    if not elements:
        logger.warning("Model %s has no elements", model_id)
    return BlockModel(model_id=model_id, elements=elements, textures=textures)


def load_model(path: str | Path, model_id: Optional[str] = None) -> BlockModel:
    path = Path(path)
    return parse_model(_read_json(path), model_id or path.stem)


def model_path_for(assets_root: str | Path, reference: str) -> Path:
    """Map ``"ns:block/name"`` to ``<assets_root>/ns/models/block/name.json``."""
    namespace, sep, rel = reference.partition(":")
    if not sep:
        namespace, rel = DEFAULT_NAMESPACE, reference
    return Path(assets_root) / namespace / "models" / f"{rel}.json"


def assets_resolver(assets_root: str | Path) -> ModelResolver:
    """Resolver loading each referenced model from an assets directory."""
    cache: Dict[str, BlockModel] = {}

    def resolve(reference: str) -> BlockModel:
        if reference not in cache:
            cache[reference] = load_model(model_path_for(assets_root, reference), reference)
        return cache[reference]

    return resolve


def fixed_resolver(model: BlockModel) -> ModelResolver:
    """Resolver returning *model* for every reference."""

    def resolve(reference: str) -> BlockModel:
        return model

    return resolve
