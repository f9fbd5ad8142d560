"""Request/response mapping for each CLI command.

Every action takes an authenticated Session and returns the response data
of the last request it sent.
"""
from __future__ import annotations

import asyncio
import logging

from vts_cli.errors import NotFoundError
from vts_cli.messages import (
    ArtMeshMatcher,
    ArtMeshSelection,
    ColorTint,
    InjectParameter,
    ItemAnimation,
    ItemList,
    ItemLoad,
    ItemMove,
    ItemUnload,
    MoveModel,
    NdiConfig,
    ParameterCreation,
    PhysicsOverride,
    StrengthOrWind,
    color_tint_data,
    physics_data,
)
from vts_cli.session import Session

logger = logging.getLogger(__name__)


# ── State ──────────────────────────────────────────────────────────────────


async def api_state(session: Session) -> dict:
    return await session.request("APIStateRequest")


async def statistics(session: Session) -> dict:
    return await session.request("StatisticsRequest")


async def folders(session: Session) -> dict:
    return await session.request("VTSFolderInfoRequest")


async def scene_colors(session: Session) -> dict:
    return await session.request("SceneColorOverlayInfoRequest")


async def face_found(session: Session) -> dict:
    return await session.request("FaceFoundRequest")


# ── Parameters ─────────────────────────────────────────────────────────────


async def param_get(session: Session, name: str) -> dict:
    return await session.request("ParameterValueRequest", {"name": name})


async def param_create(session: Session, param: ParameterCreation) -> dict:
    return await session.request("ParameterCreationRequest", param.to_data())


async def param_inject(session: Session, param: InjectParameter) -> dict:
    return await session.request("InjectParameterDataRequest", param.to_data())


async def param_delete(session: Session, name: str) -> dict:
    return await session.request("ParameterDeletionRequest", {"parameterName": name})


async def param_list_inputs(session: Session) -> dict:
    return await session.request("InputParameterListRequest")


async def param_list_live2d(session: Session) -> dict:
    return await session.request("Live2DParameterListRequest")


# ── Hotkeys ────────────────────────────────────────────────────────────────


async def hotkeys_list(session: Session, model_id: str | None = None,
                       live2d_file: str | None = None) -> dict:
    data = {}
    if model_id is not None:
        data["modelID"] = model_id
    if live2d_file is not None:
        data["live2DItemFileName"] = live2d_file
    return await session.request("HotkeysInCurrentModelRequest", data)


async def find_hotkey_id(session: Session, name: str) -> str:
    """ID of the first hotkey in the current model whose name matches exactly."""
    resp = await hotkeys_list(session)
    for hotkey in resp.get("availableHotkeys", []):
        if hotkey.get("name") == name:
            return hotkey["hotkeyID"]
    raise NotFoundError(f"no hotkey found with name `{name}`")


async def hotkey_trigger(session: Session, hotkey_id: str | None = None,
                         name: str | None = None, item: str | None = None) -> dict:
    if hotkey_id is None:
        if name is None:
            raise ValueError("either `id` or `name` must be specified")
        hotkey_id = await find_hotkey_id(session, name)
        logger.debug("Hotkey %r resolved to %s", name, hotkey_id)

    data = {"hotkeyID": hotkey_id}
    if item is not None:
        data["itemInstanceID"] = item
    return await session.request("HotkeyTriggerRequest", data)


# ── Art meshes ─────────────────────────────────────────────────────────────


async def artmeshes_list(session: Session) -> dict:
    return await session.request("ArtMeshListRequest")


async def artmeshes_tint(session: Session, tint: ColorTint,
                         matcher: ArtMeshMatcher) -> dict:
    return await session.request("ColorTintRequest", color_tint_data(tint, matcher))


async def hold_tint(resp: dict, duration: float) -> None:
    """Keep the connection open so the tint stays visible.

    VTube Studio resets a plugin's tint as soon as the plugin disconnects.
    """
    if resp.get("matchedArtMeshes", 0) <= 0:
        logger.info("No art meshes matched; exiting.")
        return
    logger.info("Tint request successful. Holding for %gs before exiting...", duration)
    await asyncio.sleep(duration)


async def artmeshes_select(session: Session, selection: ArtMeshSelection) -> dict:
    return await session.request("ArtMeshSelectionRequest", selection.to_data())


# ── Models ─────────────────────────────────────────────────────────────────


async def models_list(session: Session) -> dict:
    return await session.request("AvailableModelsRequest")


async def models_current(session: Session) -> dict:
    return await session.request("CurrentModelRequest")


async def find_model_id(session: Session, name: str) -> str:
    resp = await models_list(session)
    for model in resp.get("availableModels", []):
        if model.get("modelName") == name:
            return model["modelID"]
    raise NotFoundError(f"no model found with name `{name}`")


async def model_load(session: Session, model_id: str | None = None,
                     name: str | None = None) -> dict:
    if model_id is None:
        if name is None:
            raise ValueError("either `id` or `name` must be specified")
        model_id = await find_model_id(session, name)
    return await session.request("ModelLoadRequest", {"modelID": model_id})


async def model_move(session: Session, move: MoveModel) -> dict:
    return await session.request("MoveModelRequest", move.to_data())


# ── Expressions ────────────────────────────────────────────────────────────


async def expressions_list(session: Session, details: bool = False,
                           file: str | None = None) -> dict:
    data = {"details": details}
    if file is not None:
        data["expressionFile"] = file
    return await session.request("ExpressionStateRequest", data)


async def expression_set(session: Session, file: str, active: bool) -> dict:
    return await session.request("ExpressionActivationRequest", {
        "expressionFile": file,
        "active": active,
    })


# ── NDI ────────────────────────────────────────────────────────────────────


async def ndi_get_config(session: Session) -> dict:
    return await session.request("NDIConfigRequest", NdiConfig().to_data(set_new_config=False))


async def ndi_set_config(session: Session, config: NdiConfig) -> dict:
    return await session.request("NDIConfigRequest", config.to_data(set_new_config=True))


# ── Physics ────────────────────────────────────────────────────────────────


async def physics_get(session: Session) -> dict:
    return await session.request("GetCurrentModelPhysicsRequest")


async def physics_set(session: Session, kind: StrengthOrWind,
                      override: PhysicsOverride) -> dict:
    return await session.request("SetCurrentModelPhysicsRequest", physics_data(kind, override))


# ── Items ──────────────────────────────────────────────────────────────────


async def items_list(session: Session, query: ItemList) -> dict:
    return await session.request("ItemListRequest", query.to_data())


async def item_load(session: Session, item: ItemLoad) -> dict:
    return await session.request("ItemLoadRequest", item.to_data())


async def items_unload(session: Session, unload: ItemUnload) -> dict:
    return await session.request("ItemUnloadRequest", unload.to_data())


async def item_move(session: Session, move: ItemMove) -> dict:
    return await session.request("ItemMoveRequest", move.to_data())


async def item_animation(session: Session, animation: ItemAnimation) -> dict:
    return await session.request("ItemAnimationControlRequest", animation.to_data())
