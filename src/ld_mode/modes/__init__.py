"""Mode base classes, the linker-script mode, and the mode manager."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .descriptor import ModeDescriptor
from .ld_script_mode import LD_SCRIPT_MODE, LdScriptMode
from .mode_manager import ModeManager

__all__ = [
    "KeyInput",
    "LD_SCRIPT_MODE",
    "LdScriptMode",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeDescriptor",
    "ModeManager",
    "ModeResult",
]
