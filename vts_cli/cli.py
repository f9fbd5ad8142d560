"""Click CLI entry point for vts-cli."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import click

from vts_cli import __version__
from vts_cli import actions
from vts_cli.config import (
    DEFAULT_HOST,
    DEFAULT_PLUGIN_DEVELOPER,
    DEFAULT_PLUGIN_NAME,
    DEFAULT_PORT,
    Config,
    load_config,
    resolve_config_path,
    save_config,
)
from vts_cli.errors import ConfigError
from vts_cli.messages import (
    FADE_MODES,
    ArtMeshMatcher,
    ArtMeshSelection,
    ColorTint,
    HexColor,
    InjectMode,
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
    parse_duration,
)
from vts_cli.output import notice, print_json
from vts_cli.session import Session

logger = logging.getLogger(__name__)

# Singular forms accepted for command groups, e.g. `vts hotkey trigger`.
COMMAND_ALIASES = {
    "param": "params",
    "hotkey": "hotkeys",
    "artmesh": "artmeshes",
    "model": "models",
    "expression": "expressions",
    "item": "items",
}

# Lets positional numbers be negative, e.g. `vts params inject FaceAngleX -15`.
NEGATIVE_NUMBERS = {"ignore_unknown_options": True}


class AliasedGroup(click.Group):
    """Group that also resolves the names in COMMAND_ALIASES."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))


class HexColorType(click.ParamType):
    name = "hex_color"

    def convert(self, value, param, ctx):
        if isinstance(value, HexColor):
            return value
        try:
            return HexColor.parse(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class DurationType(click.ParamType):
    """Duration like `5s`, `1m30s` or `500ms`, converted to seconds."""
    name = "duration"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return float(value)
        try:
            return parse_duration(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


HEX_COLOR = HexColorType()
DURATION = DurationType()


@dataclass
class AppState:
    """Per-invocation state shared by all commands through ctx.obj."""
    config_path: str = ""
    compact: bool = False
    client_factory: Callable[[Config], Any] | None = None

    def emit(self, value: Any) -> None:
        print_json(value, compact=self.compact)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s: %(message)s")
    logging.getLogger().setLevel(level)
    for name in ("websockets", "pyvts", "asyncio"):
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)


def _save_new_token(state: AppState, config: Config, token: str) -> None:
    config.token = token
    save_config(state.config_path, config)
    logger.info("Wrote authentication token to config file %s", state.config_path)


async def _execute(state: AppState, config: Config,
                   body: Callable[[Session], Awaitable[Any]]) -> Any:
    session = Session(config, client_factory=state.client_factory)
    try:
        async with session:
            await session.authenticate()
            result = await body(session)
    except Exception:
        # Persist a freshly issued token even if the request itself failed,
        # without hiding that failure behind a save error.
        if session.new_token:
            try:
                _save_new_token(state, config, session.new_token)
            except ConfigError as e:
                logger.error("Could not save the new authentication token: %s", e.message)
        raise

    if session.new_token:
        _save_new_token(state, config, session.new_token)
    return result


def _run(ctx: click.Context, body: Callable[[Session], Awaitable[Any]],
         config: Config | None = None) -> None:
    """Connect, authenticate, run one action and print what it returns."""
    state = ctx.find_object(AppState)
    if config is None:
        config = load_config(state.config_path)
    result = asyncio.run(_execute(state, config, body))
    if result is not None:
        state.emit(result)


def _id_or_name(id_value: str | None, name: str | None) -> None:
    if id_value is not None and name is not None:
        raise click.UsageError("`id` and `--name` cannot be used together")
    if id_value is None and name is None:
        raise click.UsageError("either `id` or `name` must be specified")


@click.group(cls=AliasedGroup)
@click.version_option(version=__version__, prog_name="vts")
@click.option("--config-file", envvar="VTS_CONFIG", type=click.Path(dir_okay=False),
              help="Overwrite path to config file.")
@click.option("--compact", is_flag=True, help="Avoid pretty-printing JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Log request/response traffic.")
@click.pass_context
def cli(ctx: click.Context, config_file: str | None, compact: bool, verbose: bool) -> None:
    """Command-line client for the VTube Studio plugin API."""
    _configure_logging(verbose)
    state = ctx.ensure_object(AppState)
    state.config_path = resolve_config_path(config_file)
    state.compact = compact


# ── config ─────────────────────────────────────────────────────────────────


@cli.group("config")
def config_group() -> None:
    """Actions related to configuration of this program."""
    pass


@config_group.command("init")
@click.option("--host", "-h", default=DEFAULT_HOST, show_default=True)
@click.option("--port", "-p", default=DEFAULT_PORT, show_default=True,
              type=click.IntRange(1, 65535))
@click.option("--token", envvar="VTS_TOKEN", show_envvar=True, default=None,
              help="Existing plugin token (skips the permission pop-up).")
@click.option("--plugin-name", default=DEFAULT_PLUGIN_NAME, show_default=True)
@click.option("--plugin-developer", default=DEFAULT_PLUGIN_DEVELOPER, show_default=True)
@click.pass_context
def config_init(ctx: click.Context, host: str, port: int, token: str | None,
                plugin_name: str, plugin_developer: str) -> None:
    """Requests permissions from VTube Studio to initialize config file."""
    state = ctx.find_object(AppState)
    conf = Config(host=host, port=port, token=token,
                  plugin_name=plugin_name, plugin_developer=plugin_developer)

    async def body(session: Session) -> None:
        await actions.statistics(session)

    _run(ctx, body, config=conf)

    # A token passed in explicitly is not "new", but still belongs in the file.
    save_config(state.config_path, conf)
    notice(f"Config written to {state.config_path}")


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Shows the contents of config file."""
    state = ctx.find_object(AppState)
    state.emit(load_config(state.config_path).to_dict())


@config_group.command("path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Outputs the config file path."""
    click.echo(ctx.find_object(AppState).config_path)


# ── state ──────────────────────────────────────────────────────────────────


@cli.command("state")
@click.pass_context
def state_cmd(ctx: click.Context) -> None:
    """Get the current state of the API."""
    _run(ctx, actions.api_state)


@cli.command("stats")
@click.pass_context
def stats_cmd(ctx: click.Context) -> None:
    """VTube Studio statistics."""
    _run(ctx, actions.statistics)


@cli.command("folders")
@click.pass_context
def folders_cmd(ctx: click.Context) -> None:
    """Get a list of VTube Studio folders."""
    _run(ctx, actions.folders)


@cli.command("scene-colors")
@click.pass_context
def scene_colors_cmd(ctx: click.Context) -> None:
    """Scene color overlay info."""
    _run(ctx, actions.scene_colors)


@cli.command("face-found")
@click.pass_context
def face_found_cmd(ctx: click.Context) -> None:
    """Checking if face is currently found by tracker."""
    _run(ctx, actions.face_found)


# ── params ─────────────────────────────────────────────────────────────────


@cli.group("params")
def params() -> None:
    """Actions related to parameters."""
    pass


@params.command("get")
@click.argument("name")
@click.pass_context
def params_get(ctx: click.Context, name: str) -> None:
    """Get the value of a parameter."""
    _run(ctx, lambda s: actions.param_get(s, name))


@params.command("create")
@click.argument("name")
@click.option("--default", "default", type=float, default=0.0, show_default=True)
@click.option("--min", "min_", type=float, default=0.0, show_default=True)
@click.option("--max", "max_", type=float, default=100.0, show_default=True)
@click.option("--explanation", default=None)
@click.pass_context
def params_create(ctx: click.Context, name: str, default: float, min_: float,
                  max_: float, explanation: str | None) -> None:
    """Create a custom parameter."""
    param = ParameterCreation(name=name, default=default, min=min_, max=max_,
                              explanation=explanation)
    _run(ctx, lambda s: actions.param_create(s, param))


@params.command("inject", context_settings=NEGATIVE_NUMBERS)
@click.argument("id")
@click.argument("value", type=float)
@click.option("--weight", type=click.FloatRange(0, 1), default=None)
@click.option("--face-found", is_flag=True)
@click.option("--add", is_flag=True, help="Add to the current value instead of setting it.")
@click.pass_context
def params_inject(ctx: click.Context, id: str, value: float, weight: float | None,
                  face_found: bool, add: bool) -> None:
    """Temporarily set the value for a custom parameter.

    VTube Studio will reset this value if it hasn't been updated at least
    once per second.
    """
    param = InjectParameter(id=id, value=value, weight=weight, face_found=face_found,
                            mode=InjectMode.ADD if add else InjectMode.SET)
    _run(ctx, lambda s: actions.param_inject(s, param))


@params.command("delete")
@click.argument("name")
@click.pass_context
def params_delete(ctx: click.Context, name: str) -> None:
    """Delete a custom parameter."""
    _run(ctx, lambda s: actions.param_delete(s, name))


@params.command("list-inputs")
@click.pass_context
def params_list_inputs(ctx: click.Context) -> None:
    """Get the value for all input parameters in the current model."""
    _run(ctx, actions.param_list_inputs)


@params.command("list-live2d")
@click.pass_context
def params_list_live2d(ctx: click.Context) -> None:
    """Get the value for all Live2D parameters in the current model."""
    _run(ctx, actions.param_list_live2d)


# ── hotkeys ────────────────────────────────────────────────────────────────


@cli.group("hotkeys")
def hotkeys() -> None:
    """Actions related to hotkeys."""
    pass


@hotkeys.command("list")
@click.option("--model-id", default=None, help="Model ID.")
@click.option("--live2d-file", default=None, help="Live2D item file name.")
@click.pass_context
def hotkeys_list(ctx: click.Context, model_id: str | None, live2d_file: str | None) -> None:
    """List the available hotkeys for a model."""
    _run(ctx, lambda s: actions.hotkeys_list(s, model_id=model_id, live2d_file=live2d_file))


@hotkeys.command("trigger")
@click.argument("id", required=False)
@click.option("--name", default=None,
              help="Find and trigger the first hotkey with this name, if it exists.")
@click.option("--item", default=None, help="Live2D item instance ID to trigger it on.")
@click.pass_context
def hotkeys_trigger(ctx: click.Context, id: str | None, name: str | None,
                    item: str | None) -> None:
    """Trigger hotkey by ID or name."""
    _id_or_name(id, name)
    _run(ctx, lambda s: actions.hotkey_trigger(s, hotkey_id=id, name=name, item=item))


# ── artmeshes ──────────────────────────────────────────────────────────────


@cli.group("artmeshes")
def artmeshes() -> None:
    """Actions related to artmeshes."""
    pass


@artmeshes.command("list")
@click.pass_context
def artmeshes_list(ctx: click.Context) -> None:
    """List art meshes in the current model."""
    _run(ctx, actions.artmeshes_list)


@artmeshes.command("tint")
@click.option("--rainbow", "--jeb_", "rainbow", is_flag=True, help="Enable `jeb_` (rainbow) mode.")
@click.option("--mix-scene-lighting", type=click.FloatRange(0, 1), default=None,
              help="Mix with scene lighting color value (between 0 and 1).")
@click.option("--color", type=HEX_COLOR, default="#ffffff", show_default=True,
              help="Hex color code with optional alpha.")
@click.option("--all", "tint_all", is_flag=True, help="Match all art meshes.")
@click.option("--art-mesh-number", type=int, multiple=True)
@click.option("--name-exact", multiple=True)
@click.option("--name-contains", multiple=True)
@click.option("--tag-exact", multiple=True)
@click.option("--tag-contains", multiple=True)
@click.option("--duration", type=DURATION, required=True,
              help="How long the tint should last for (e.g., `5s`, `1m30s`).")
@click.pass_context
def artmeshes_tint(ctx: click.Context, rainbow: bool, mix_scene_lighting: float | None,
                   color: HexColor, tint_all: bool, art_mesh_number: tuple[int, ...],
                   name_exact: tuple[str, ...], name_contains: tuple[str, ...],
                   tag_exact: tuple[str, ...], tag_contains: tuple[str, ...],
                   duration: float) -> None:
    """Tint matching art meshes.

    VTube Studio resets the tint when the plugin disconnects, so the
    connection is held open for --duration after a successful match.
    """
    state = ctx.find_object(AppState)
    tint = ColorTint(color=color, mix_scene_lighting=mix_scene_lighting, rainbow=rainbow)
    matcher = ArtMeshMatcher(
        tint_all=tint_all,
        art_mesh_number=list(art_mesh_number),
        name_exact=list(name_exact),
        name_contains=list(name_contains),
        tag_exact=list(tag_exact),
        tag_contains=list(tag_contains),
    )

    async def body(session: Session) -> None:
        resp = await actions.artmeshes_tint(session, tint, matcher)
        state.emit(resp)
        await actions.hold_tint(resp, duration)

    _run(ctx, body)


@artmeshes.command("select")
@click.option("--set-text", default=None, help="Text shown at the top of the selection window.")
@click.option("--set-help", default=None, help="Text shown when the user clicks the help button.")
@click.option("--count", type=click.IntRange(min=0), default=0,
              help="Exact number of art meshes the user must select (0 for any).")
@click.option("--preselect", multiple=True, help="Art mesh ID to select initially.")
@click.pass_context
def artmeshes_select(ctx: click.Context, set_text: str | None, set_help: str | None,
                     count: int, preselect: tuple[str, ...]) -> None:
    """Ask the user to select art meshes in VTube Studio."""
    selection = ArtMeshSelection(text_override=set_text, help_override=set_help,
                                 requested_count=count, preselect=list(preselect))
    _run(ctx, lambda s: actions.artmeshes_select(s, selection))


# ── models ─────────────────────────────────────────────────────────────────


@cli.group("models")
def models() -> None:
    """Actions related to models."""
    pass


@models.command("list")
@click.pass_context
def models_list(ctx: click.Context) -> None:
    """List available models."""
    _run(ctx, actions.models_list)


@models.command("current")
@click.pass_context
def models_current(ctx: click.Context) -> None:
    """Get current model."""
    _run(ctx, actions.models_current)


@models.command("load")
@click.argument("id", required=False)
@click.option("--name", default=None, help="Load the first model with this name, if it exists.")
@click.pass_context
def models_load(ctx: click.Context, id: str | None, name: str | None) -> None:
    """Load a model by ID or name."""
    _id_or_name(id, name)
    _run(ctx, lambda s: actions.model_load(s, model_id=id, name=name))


@models.command("move")
@click.option("--duration", type=DURATION, default="0s", show_default=True,
              help="How long the movement animation should take.")
@click.option("--relative", is_flag=True,
              help="Whether the movement is relative to the current model position.")
@click.option("--x", type=float, default=None,
              help="Horizontal position. -1 for left edge, 1 for right edge.")
@click.option("--y", type=float, default=None,
              help="Vertical position. -1 for bottom edge, 1 for top edge.")
@click.option("--rotation", type=float, default=None,
              help="Rotation in degrees, between -360 and 360.")
@click.option("--size", type=float, default=None, help="Size, between -100 and 100.")
@click.pass_context
def models_move(ctx: click.Context, duration: float, relative: bool, x: float | None,
                y: float | None, rotation: float | None, size: float | None) -> None:
    """Move the current model."""
    move = MoveModel(duration=duration, relative=relative, x=x, y=y,
                     rotation=rotation, size=size)
    _run(ctx, lambda s: actions.model_move(s, move))


# ── expressions ────────────────────────────────────────────────────────────


@cli.group("expressions")
def expressions() -> None:
    """Actions related to expressions."""
    pass


@expressions.command("list")
@click.argument("file", required=False)
@click.option("--details", is_flag=True, help="Whether to return additional details.")
@click.pass_context
def expressions_list(ctx: click.Context, file: str | None, details: bool) -> None:
    """List expressions, or only the state of FILE."""
    _run(ctx, lambda s: actions.expressions_list(s, details=details, file=file))


@expressions.command("activate")
@click.argument("file")
@click.pass_context
def expressions_activate(ctx: click.Context, file: str) -> None:
    """Activate an expression."""
    _run(ctx, lambda s: actions.expression_set(s, file, active=True))


@expressions.command("deactivate")
@click.argument("file")
@click.pass_context
def expressions_deactivate(ctx: click.Context, file: str) -> None:
    """Deactivate an expression."""
    _run(ctx, lambda s: actions.expression_set(s, file, active=False))


# ── ndi ────────────────────────────────────────────────────────────────────


@cli.group("ndi")
def ndi() -> None:
    """Actions related to NDI Config."""
    pass


@ndi.command("get-config")
@click.pass_context
def ndi_get_config(ctx: click.Context) -> None:
    """Shows the current NDI config."""
    _run(ctx, actions.ndi_get_config)


@ndi.command("set-config")
@click.option("--active", type=click.BOOL, default=None, help="Whether NDI should be active.")
@click.option("--use-ndi5", type=click.BOOL, default=None, help="Whether NDI 5 should be used.")
@click.option("--use-custom-resolution", type=click.BOOL, default=None,
              help="Use the custom resolution instead of the window size.")
@click.option("--width", type=click.IntRange(256, 8192), default=None,
              help="Custom NDI width, a multiple of 16.")
@click.option("--height", type=click.IntRange(256, 8192), default=None,
              help="Custom NDI height, a multiple of 8.")
@click.pass_context
def ndi_set_config(ctx: click.Context, active: bool | None, use_ndi5: bool | None,
                   use_custom_resolution: bool | None, width: int | None,
                   height: int | None) -> None:
    """Set NDI config."""
    if width is not None and width % 16:
        raise click.BadParameter("must be a multiple of 16", param_hint="--width")
    if height is not None and height % 8:
        raise click.BadParameter("must be a multiple of 8", param_hint="--height")

    ndi_config = NdiConfig(active=active, use_ndi5=use_ndi5,
                           use_custom_resolution=use_custom_resolution,
                           width=width, height=height)
    _run(ctx, lambda s: actions.ndi_set_config(s, ndi_config))


# ── physics ────────────────────────────────────────────────────────────────

PHYSICS_KIND = click.Choice([k.value for k in StrengthOrWind])


@cli.group("physics")
def physics() -> None:
    """Actions related to physics."""
    pass


@physics.command("get")
@click.pass_context
def physics_get(ctx: click.Context) -> None:
    """Gets physics settings of the current model."""
    _run(ctx, actions.physics_get)


@physics.group("set")
def physics_set() -> None:
    """Sets physics settings."""
    pass


@physics_set.command("base")
@click.argument("kind", type=PHYSICS_KIND)
@click.argument("value", type=click.IntRange(0, 255))
@click.option("--duration", type=DURATION, default="500ms", show_default=True,
              help="How long to override the value for (0.5s to 5s).")
@click.pass_context
def physics_set_base(ctx: click.Context, kind: str, value: int, duration: float) -> None:
    """Set the base value (0 to 100)."""
    override = PhysicsOverride(value=float(value), override_seconds=duration,
                               set_base_value=True)
    _run(ctx, lambda s: actions.physics_set(s, StrengthOrWind(kind), override))


@physics_set.command("multiplier")
@click.argument("kind", type=PHYSICS_KIND)
@click.argument("value", type=float)
@click.option("--id", "group_id", required=True, help="Physics group ID.")
@click.option("--duration", type=DURATION, default="500ms", show_default=True,
              help="How long to override the value for (0.5s to 5s).")
@click.pass_context
def physics_set_multiplier(ctx: click.Context, kind: str, value: float, group_id: str,
                           duration: float) -> None:
    """Set the multiplier value (0 to 2) for one physics group."""
    override = PhysicsOverride(value=value, override_seconds=duration, id=group_id)
    _run(ctx, lambda s: actions.physics_set(s, StrengthOrWind(kind), override))


# ── items ──────────────────────────────────────────────────────────────────


@cli.group("items")
def items() -> None:
    """Actions related to items."""
    pass


@items.command("list")
@click.option("--spots", is_flag=True, help="Include available item spots.")
@click.option("--instances", is_flag=True, help="Include item instances in the scene.")
@click.option("--files", is_flag=True, help="Include available item files.")
@click.option("--with-file-name", default=None, help="Only items with this file name.")
@click.option("--with-instance-id", default=None, help="Only the item with this instance ID.")
@click.pass_context
def items_list(ctx: click.Context, spots: bool, instances: bool, files: bool,
               with_file_name: str | None, with_instance_id: str | None) -> None:
    """List items in the scene and available item files."""
    query = ItemList(spots=spots, instances=instances, files=files,
                     with_file_name=with_file_name, with_instance_id=with_instance_id)
    _run(ctx, lambda s: actions.items_list(s, query))


@items.command("load")
@click.argument("file_name")
@click.option("--x", type=float, default=0.0, show_default=True)
@click.option("--y", type=float, default=0.0, show_default=True)
@click.option("--size", type=float, default=0.32, show_default=True)
@click.option("--rotation", type=float, default=0.0, show_default=True)
@click.option("--fade-time", type=click.FloatRange(0, 2), default=0.5, show_default=True)
@click.option("--order", type=int, default=1, show_default=True)
@click.option("--fail-if-order-taken", is_flag=True)
@click.option("--smoothing", type=click.FloatRange(0, 1), default=0.0, show_default=True)
@click.option("--censored", is_flag=True)
@click.option("--flipped", is_flag=True)
@click.option("--locked", is_flag=True)
@click.pass_context
def items_load(ctx: click.Context, file_name: str, x: float, y: float, size: float,
               rotation: float, fade_time: float, order: int, fail_if_order_taken: bool,
               smoothing: float, censored: bool, flipped: bool, locked: bool) -> None:
    """Load an item into the scene."""
    item = ItemLoad(file_name=file_name, x=x, y=y, size=size, rotation=rotation,
                    fade_time=fade_time, order=order,
                    fail_if_order_taken=fail_if_order_taken, smoothing=smoothing,
                    censored=censored, flipped=flipped, locked=locked)
    _run(ctx, lambda s: actions.item_load(s, item))


@items.command("unload")
@click.option("--all", "all_in_scene", is_flag=True, help="Unload all items in the scene.")
@click.option("--from-this-plugin", is_flag=True, help="Unload items loaded by this plugin.")
@click.option("--from-other-plugins", is_flag=True,
              help="Allow unloading items loaded by the user or other plugins.")
@click.option("--id", "instance_ids", multiple=True, help="Item instance ID to unload.")
@click.option("--file", "file_names", multiple=True, help="Item file name to unload.")
@click.pass_context
def items_unload(ctx: click.Context, all_in_scene: bool, from_this_plugin: bool,
                 from_other_plugins: bool, instance_ids: tuple[str, ...],
                 file_names: tuple[str, ...]) -> None:
    """Unload items from the scene."""
    unload = ItemUnload(all_in_scene=all_in_scene, from_this_plugin=from_this_plugin,
                        from_other_plugins=from_other_plugins,
                        instance_ids=list(instance_ids), file_names=list(file_names))
    _run(ctx, lambda s: actions.items_unload(s, unload))


@items.command("move")
@click.argument("id")
@click.option("--duration", type=DURATION, default="0s", show_default=True)
@click.option("--fade-mode", type=click.Choice(FADE_MODES), default="linear", show_default=True)
@click.option("--x", type=float, default=None)
@click.option("--y", type=float, default=None)
@click.option("--size", type=float, default=None)
@click.option("--rotation", type=float, default=None)
@click.option("--order", type=int, default=None)
@click.option("--set-flip", is_flag=True, help="Apply the --flip value.")
@click.option("--flip", is_flag=True)
@click.option("--user-can-stop", is_flag=True,
              help="Let the user stop the movement by clicking the item.")
@click.pass_context
def items_move(ctx: click.Context, id: str, duration: float, fade_mode: str,
               x: float | None, y: float | None, size: float | None,
               rotation: float | None, order: int | None, set_flip: bool, flip: bool,
               user_can_stop: bool) -> None:
    """Move an item in the scene."""
    move = ItemMove(instance_id=id, duration=duration, fade_mode=fade_mode, x=x, y=y,
                    size=size, rotation=rotation, order=order, set_flip=set_flip,
                    flip=flip, user_can_stop=user_can_stop)
    _run(ctx, lambda s: actions.item_move(s, move))


@items.command("animation")
@click.argument("id")
@click.option("--framerate", type=float, default=None)
@click.option("--frame", type=int, default=None)
@click.option("--brightness", type=click.FloatRange(0, 1), default=None)
@click.option("--opacity", type=click.FloatRange(0, 1), default=None)
@click.option("--stop-frame", type=int, multiple=True, help="Frame to stop at (repeatable).")
@click.option("--reset-stop-frames", is_flag=True, help="Clear all auto-stop frames.")
@click.option("--play", is_flag=True)
@click.option("--stop", is_flag=True)
@click.pass_context
def items_animation(ctx: click.Context, id: str, framerate: float | None, frame: int | None,
                    brightness: float | None, opacity: float | None,
                    stop_frame: tuple[int, ...], reset_stop_frames: bool, play: bool,
                    stop: bool) -> None:
    """Control the animation of an item."""
    if play and stop:
        raise click.UsageError("--play and --stop cannot be used together")
    animation = ItemAnimation(instance_id=id, framerate=framerate, frame=frame,
                              brightness=brightness, opacity=opacity,
                              stop_frames=list(stop_frame),
                              reset_stop_frames=reset_stop_frames, play=play, stop=stop)
    _run(ctx, lambda s: actions.item_animation(s, animation))


def main() -> None:
    """Entry point."""
    cli(prog_name="vts")


if __name__ == "__main__":
    main()
