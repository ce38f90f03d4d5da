from .command import Activation, Command, plain_command, radio_command, toggle_command
from .groups import IndependentToggleSet, InvalidSelection, MutualExclusionGroup
from .registry import CommandRegistry, RegistryEntry
from .surfaces import OutlineSurface, Surface

__all__ = [
    "Activation",
    "Command",
    "CommandRegistry",
    "IndependentToggleSet",
    "InvalidSelection",
    "MutualExclusionGroup",
    "OutlineSurface",
    "RegistryEntry",
    "Surface",
    "plain_command",
    "radio_command",
    "toggle_command",
]
