"""
Paradox — an Object Document Mapper for the ArangoDB document/graph database.
"""

from paradox.shared.config import ParadoxSettings
from paradox.toolbox import Toolbox

__version__ = "1.3.0"

__all__ = ["ParadoxSettings", "Toolbox"]
