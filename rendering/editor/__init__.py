from .code_block import (
    BACKSPACE,
    ENTER,
    PASS_THROUGH,
    Action,
    EditorState,
    Handled,
    Mutation,
    PassThrough,
    handle_key,
)
from .settings import (
    AUTO_MATCH_STORAGE_KEY,
    DEFAULT_SETTINGS,
    AutoMatchSettings,
    load_settings,
    save_settings,
    update_settings,
)

__all__ = (
    "AUTO_MATCH_STORAGE_KEY",
    "Action",
    "AutoMatchSettings",
    "BACKSPACE",
    "DEFAULT_SETTINGS",
    "ENTER",
    "EditorState",
    "Handled",
    "Mutation",
    "PASS_THROUGH",
    "PassThrough",
    "handle_key",
    "load_settings",
    "save_settings",
    "update_settings",
)
