"""Plugin abstractions and lifecycle."""

from hookwire.infrastructure.plugins.plugin import FunctionPlugin, Plugin
from hookwire.infrastructure.plugins.plugin_manager import PluginManager

__all__ = ["FunctionPlugin", "Plugin", "PluginManager"]
