"""Client-side synchronization of what is live on an OpenLP instance."""

from openlp_sync.api import FetchError, OpenLPApi
from openlp_sync.connection import ConnectionManager
from openlp_sync.engine import SyncEngine
from openlp_sync.models.service import Item, Service, Slide
from openlp_sync.models.state import DisplayMode, PayloadDecodeError, ProgramState
from openlp_sync.scripture import CitationParseError, ScriptureReference, parse_scripture_title

__all__ = [
    "CitationParseError",
    "ConnectionManager",
    "DisplayMode",
    "FetchError",
    "Item",
    "OpenLPApi",
    "PayloadDecodeError",
    "ProgramState",
    "ScriptureReference",
    "Service",
    "Slide",
    "SyncEngine",
    "parse_scripture_title",
]
