"""
config.py - Session configuration for c4engine
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional

from c4engine.debug import debug, parse_level

# Component names the engine logs under
LOG_COMPONENTS = ("board", "rules", "state", "stats", "session", "env", "cli", "debug")


def parse_components(value: Optional[str]) -> List[str]:
    """Split a comma-separated component list, ignoring blanks."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


@dataclass
class GameConfig:
    """
    Settings shared by a game session and the objects it owns.
    
    Attributes:
        record_ties: Tally ties in the stats tracker and its history
        early_exit: Skip the line scan while fewer than seven pieces are down
        thread_safe: Serialize every session operation behind a lock
        debug_level: Name of the DebugLevel to log at
        log_file: Optional path that log output is also written to
        debug_components: Components to log for (empty logs all of them)
    """
    record_ties: bool = False
    early_exit: bool = True
    thread_safe: bool = False
    debug_level: str = "info"
    log_file: Optional[str] = None
    debug_components: List[str] = field(default_factory=list)
    
    def validate(self) -> None:
        """Raise ValueError if any setting is unusable."""
        if parse_level(self.debug_level) is None:
            raise ValueError(f"Unknown debug level: {self.debug_level!r}")
        for name in ("record_ties", "early_exit", "thread_safe"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool")
        unknown = [c for c in self.debug_components if c not in LOG_COMPONENTS]
        if unknown:
            raise ValueError(f"Unknown debug components: {', '.join(unknown)}")
    
    def apply_logging(self) -> None:
        """Push the logging settings onto the shared debug manager."""
        self.validate()
        debug.configure(level=parse_level(self.debug_level),
                        log_file=self.log_file if self.log_file is not None else "",
                        components=self.debug_components)
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
    
    @classmethod
    def from_args(cls, args: Any) -> 'GameConfig':
        """
        Build a config from an argparse namespace.
        
        Missing attributes fall back to the defaults.
        """
        defaults = cls()
        level = getattr(args, "debug_level", None) or defaults.debug_level
        if getattr(args, "debug", False):
            level = "debug"
        config = cls(
            record_ties=bool(getattr(args, "record_ties", defaults.record_ties)),
            early_exit=not getattr(args, "full_scan", False),
            thread_safe=bool(getattr(args, "thread_safe", defaults.thread_safe)),
            debug_level=level,
            log_file=getattr(args, "log_file", None),
            debug_components=parse_components(getattr(args, "debug_components", None)),
        )
        config.validate()
        return config
