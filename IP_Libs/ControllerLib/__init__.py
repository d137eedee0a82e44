"""
ControllerLib - Editor orchestration

This module provides the controller that drives an editor session, the
view/feature contracts it talks through, and the editor configuration.
"""

from IP_Libs.ControllerLib.editor_config import (
    EditorConfig,
    load_editor_config,
    save_editor_config,
)
from IP_Libs.ControllerLib.view import Features, ImageView
from IP_Libs.ControllerLib.image_controller import ImageController

__all__ = [
    "EditorConfig",
    "load_editor_config",
    "save_editor_config",
    "Features",
    "ImageView",
    "ImageController",
]
