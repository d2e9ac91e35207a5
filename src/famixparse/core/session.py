#!/usr/bin/env python3
"""
FAMIXPARSE READ SESSION
-----------------------
The state of one interactive read loop: the raw text accumulated so far and
the entities of the most recent completed round. The parser itself is
stateless; everything that survives between lines lives here and is owned
by the caller.

Author: FamixParse Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import List

from famixparse.core.models import Entity


@dataclass
class ReadSession:
    """
    Initialized by the CLI and updated line by line by FamixEngine.feed().
    """
    buffer: str = ""                                    # Raw text typed since the last completed round
    entities: List[Entity] = field(default_factory=list) # Entities of the last completed round
    rounds: int = 0                                     # Completed rounds so far
    lines_read: int = 0                                 # Input lines fed, commands included

    def append_line(self, line: str):
        self.buffer += line + "\n"

    def clear(self):
        """Forgets the buffer and entities (the `reset` command)."""
        self.buffer = ""
        self.entities = []
