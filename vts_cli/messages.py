"""Typed request payloads for the VTube Studio public API.

Each dataclass maps CLI arguments onto the ``data`` object of one request
message. Field names on the wire are camelCase; optional fields left as
None are omitted so VTube Studio keeps its current value.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


def _drop_none(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


# ── Parsing helpers ────────────────────────────────────────────────────────

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?|\.\d+)\s*([a-zA-Z]*)")

_DURATION_UNITS = {
    "": 1.0,
    "s": 1.0,
    "sec": 1.0,
    "secs": 1.0,
    "second": 1.0,
    "seconds": 1.0,
    "ms": 0.001,
    "msec": 0.001,
    "millis": 0.001,
    "m": 60.0,
    "min": 60.0,
    "mins": 60.0,
    "minute": 60.0,
    "minutes": 60.0,
    "h": 3600.0,
    "hr": 3600.0,
    "hrs": 3600.0,
    "hour": 3600.0,
    "hours": 3600.0,
}


@dataclass(frozen=True)
class HexColor:
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def parse(cls, value: str) -> "HexColor":
        """Parse `#rgb`, `#rgba`, `#rrggbb` or `#rrggbbaa` (the `#` is optional)."""
        digits = value.strip().lstrip("#")
        if not _HEX_DIGITS.match(digits) or len(digits) not in (3, 4, 6, 8):
            raise ValueError(f"could not parse string `{value}` as a hex color value")

        if len(digits) in (3, 4):
            channels = [int(c * 2, 16) for c in digits]
        else:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]

        if len(channels) == 3:
            channels.append(255)
        return cls(*channels)


def parse_duration(value: str) -> float:
    """Parse a human duration like `5s`, `1m30s`, `500ms` or `2` into seconds.

    A number without a unit means seconds and is only accepted on its own.
    """
    text = value.strip()
    if not text:
        raise ValueError("empty duration")

    invalid = ValueError(f"could not parse `{value}` as a duration (e.g. `5s`, `1m30s`, `500ms`)")

    parts = []
    pos = 0
    for match in _DURATION_PART.finditer(text):
        if text[pos:match.start()].strip():
            raise invalid
        parts.append(match)
        pos = match.end()

    if not parts or text[pos:].strip():
        raise invalid

    total = 0.0
    for match in parts:
        number, unit = match.groups()
        if not unit and len(parts) > 1:
            raise invalid
        multiplier = _DURATION_UNITS.get(unit.lower())
        if multiplier is None:
            raise ValueError(f"unknown time unit `{unit}` in duration `{value}`")
        total += float(number) * multiplier
    return total


# ── Parameters ─────────────────────────────────────────────────────────────


class InjectMode(str, Enum):
    SET = "set"
    ADD = "add"


@dataclass
class ParameterCreation:
    name: str
    default: float = 0.0
    min: float = 0.0
    max: float = 100.0
    explanation: str | None = None

    def to_data(self) -> dict:
        return _drop_none({
            "parameterName": self.name,
            "explanation": self.explanation,
            "min": self.min,
            "max": self.max,
            "defaultValue": self.default,
        })


@dataclass
class InjectParameter:
    id: str
    value: float
    weight: float | None = None
    face_found: bool = False
    mode: InjectMode = InjectMode.SET

    def to_data(self) -> dict:
        return {
            "faceFound": self.face_found,
            "mode": self.mode.value,
            "parameterValues": [
                _drop_none({"id": self.id, "value": self.value, "weight": self.weight}),
            ],
        }


# ── Art meshes ─────────────────────────────────────────────────────────────


@dataclass
class ColorTint:
    color: HexColor = field(default_factory=lambda: HexColor(255, 255, 255))
    mix_scene_lighting: float | None = None
    rainbow: bool = False

    def to_data(self) -> dict:
        return _drop_none({
            "colorR": self.color.r,
            "colorG": self.color.g,
            "colorB": self.color.b,
            "colorA": self.color.a,
            "mixWithSceneLightingColor": self.mix_scene_lighting,
            "jeb_": self.rainbow,
        })


@dataclass
class ArtMeshMatcher:
    tint_all: bool = False
    art_mesh_number: list[int] = field(default_factory=list)
    name_exact: list[str] = field(default_factory=list)
    name_contains: list[str] = field(default_factory=list)
    tag_exact: list[str] = field(default_factory=list)
    tag_contains: list[str] = field(default_factory=list)

    def to_data(self) -> dict:
        return {
            "tintAll": self.tint_all,
            "artMeshNumber": list(self.art_mesh_number),
            "nameExact": list(self.name_exact),
            "nameContains": list(self.name_contains),
            "tagExact": list(self.tag_exact),
            "tagContains": list(self.tag_contains),
        }


def color_tint_data(tint: ColorTint, matcher: ArtMeshMatcher) -> dict:
    return {"colorTint": tint.to_data(), "artMeshMatcher": matcher.to_data()}


@dataclass
class ArtMeshSelection:
    text_override: str | None = None
    help_override: str | None = None
    requested_count: int = 0
    preselect: list[str] = field(default_factory=list)

    def to_data(self) -> dict:
        return _drop_none({
            "textOverride": self.text_override,
            "helpOverride": self.help_override,
            "requestedArtMeshCount": self.requested_count,
            "activeArtMeshes": list(self.preselect),
        })


# ── Models ─────────────────────────────────────────────────────────────────


@dataclass
class MoveModel:
    """Move the current model. x/y run from -1 (left/bottom) to 1 (right/top)."""
    duration: float = 0.0
    relative: bool = False
    x: float | None = None
    y: float | None = None
    rotation: float | None = None
    size: float | None = None

    def to_data(self) -> dict:
        return _drop_none({
            "timeInSeconds": self.duration,
            "valuesAreRelativeToModel": self.relative,
            "positionX": self.x,
            "positionY": self.y,
            "rotation": self.rotation,
            "size": self.size,
        })


# ── NDI ────────────────────────────────────────────────────────────────────


@dataclass
class NdiConfig:
    active: bool | None = None
    use_ndi5: bool | None = None
    use_custom_resolution: bool | None = None
    width: int | None = None
    height: int | None = None

    def to_data(self, set_new_config: bool = True) -> dict:
        data = {"setNewConfig": set_new_config}
        if set_new_config:
            data.update(_drop_none({
                "ndiActive": self.active,
                "useNDI5": self.use_ndi5,
                "useCustomResolution": self.use_custom_resolution,
                "customWidthNDI": self.width,
                "customHeightNDI": self.height,
            }))
        return data


# ── Physics ────────────────────────────────────────────────────────────────


class StrengthOrWind(str, Enum):
    STRENGTH = "strength"
    WIND = "wind"


@dataclass
class PhysicsOverride:
    """One physics override.

    A base override (``set_base_value``) applies to the whole model and
    has no group id; a multiplier override targets one physics group.
    """
    value: float
    override_seconds: float = 0.5
    id: str = ""
    set_base_value: bool = False

    def to_data(self) -> dict:
        return {
            "id": self.id,
            "value": self.value,
            "setBaseValue": self.set_base_value,
            "overrideSeconds": self.override_seconds,
        }


def physics_data(kind: StrengthOrWind, override: PhysicsOverride) -> dict:
    data = {"strengthOverrides": [], "windOverrides": []}
    if kind is StrengthOrWind.STRENGTH:
        data["strengthOverrides"].append(override.to_data())
    else:
        data["windOverrides"].append(override.to_data())
    return data


# ── Items ──────────────────────────────────────────────────────────────────


FADE_MODES = ("linear", "easeIn", "easeOut", "easeBoth", "overshoot", "zip")


@dataclass
class ItemList:
    spots: bool = False
    instances: bool = False
    files: bool = False
    with_file_name: str | None = None
    with_instance_id: str | None = None

    def to_data(self) -> dict:
        return _drop_none({
            "includeAvailableSpots": self.spots,
            "includeItemInstancesInScene": self.instances,
            "includeAvailableItemFiles": self.files,
            "onlyItemsWithFileName": self.with_file_name,
            "onlyItemsWithInstanceID": self.with_instance_id,
        })


@dataclass
class ItemLoad:
    file_name: str
    x: float = 0.0
    y: float = 0.0
    size: float = 0.32
    rotation: float = 0.0
    fade_time: float = 0.5
    order: int = 1
    fail_if_order_taken: bool = False
    smoothing: float = 0.0
    censored: bool = False
    flipped: bool = False
    locked: bool = False

    def to_data(self) -> dict:
        # Items must survive the plugin disconnecting right after this request.
        return {
            "fileName": self.file_name,
            "positionX": self.x,
            "positionY": self.y,
            "size": self.size,
            "rotation": self.rotation,
            "fadeTime": self.fade_time,
            "order": self.order,
            "failIfOrderTaken": self.fail_if_order_taken,
            "smoothing": self.smoothing,
            "censored": self.censored,
            "flipped": self.flipped,
            "locked": self.locked,
            "unloadWhenPluginDisconnects": False,
        }


@dataclass
class ItemUnload:
    all_in_scene: bool = False
    from_this_plugin: bool = False
    from_other_plugins: bool = False
    instance_ids: list[str] = field(default_factory=list)
    file_names: list[str] = field(default_factory=list)

    def to_data(self) -> dict:
        return {
            "unloadAllInScene": self.all_in_scene,
            "unloadAllLoadedByThisPlugin": self.from_this_plugin,
            "allowUnloadingItemsLoadedByUserOrOtherPlugins": self.from_other_plugins,
            "instanceIDs": list(self.instance_ids),
            "fileNames": list(self.file_names),
        }


@dataclass
class ItemMove:
    instance_id: str
    duration: float = 0.0
    fade_mode: str = "linear"
    x: float | None = None
    y: float | None = None
    size: float | None = None
    rotation: float | None = None
    order: int | None = None
    set_flip: bool = False
    flip: bool = False
    user_can_stop: bool = False

    def to_data(self) -> dict:
        item = _drop_none({
            "itemInstanceID": self.instance_id,
            "timeInSeconds": self.duration,
            "fadeMode": self.fade_mode,
            "positionX": self.x,
            "positionY": self.y,
            "size": self.size,
            "rotation": self.rotation,
            "order": self.order,
            "setFlip": self.set_flip,
            "flip": self.flip,
            "userCanStop": self.user_can_stop,
        })
        return {"itemsToMove": [item]}


@dataclass
class ItemAnimation:
    instance_id: str
    framerate: float | None = None
    frame: int | None = None
    brightness: float | None = None
    opacity: float | None = None
    stop_frames: list[int] = field(default_factory=list)
    reset_stop_frames: bool = False
    play: bool = False
    stop: bool = False

    def to_data(self) -> dict:
        if self.play and self.stop:
            raise ValueError("`play` and `stop` cannot both be set")

        set_auto_stop_frames = bool(self.stop_frames) or self.reset_stop_frames
        auto_stop_frames = [] if self.reset_stop_frames else list(self.stop_frames)

        return _drop_none({
            "itemInstanceID": self.instance_id,
            "framerate": self.framerate,
            "frame": self.frame,
            "brightness": self.brightness,
            "opacity": self.opacity,
            "setAutoStopFrames": set_auto_stop_frames,
            "autoStopFrames": auto_stop_frames,
            "setAnimationPlayState": self.play or self.stop,
            "animationPlayState": self.play or not self.stop,
        })
