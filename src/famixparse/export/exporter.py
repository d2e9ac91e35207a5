#!/usr/bin/env python3
"""
FAMIXPARSE EXPORTER - YAML Snapshot
-----------------------------------
Writes parsed entities out as a YAML sequence. Each record becomes a
mapping whose first key is its kind tag, followed by the fields in
declaration order. This is a reporting format only and is never read back
by the grammar.

Author: FamixParse Team
Date: 2026-10-19
"""

import io
import logging
import os
from pathlib import Path
from typing import Iterable, Union

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from famixparse.core.models import Entity, entity_fields

logger = logging.getLogger("famixparse.exporter")


class FamixExporter:
    """
    Converts entity records to YAML text with ruamel's round-trip dumper.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def _to_map(self, entity: Entity) -> CommentedMap:
        record = CommentedMap()
        record["kind"] = entity.kind
        for key, value in entity_fields(entity).items():
            record[key] = value
        return record

    def export(self, entities: Iterable[Entity]) -> str:
        """Serializes entities in their given order."""
        docs = CommentedSeq(self._to_map(e) for e in entities)
        stream = io.StringIO()
        self.yaml.dump(docs, stream)
        return stream.getvalue()

    def write(self, entities: Iterable[Entity], target: Union[str, Path]) -> Path:
        """
        Writes the YAML next to its final location first, then swaps it in,
        so a failed write never leaves a truncated file behind.
        """
        target_path = Path(target)
        content = self.export(entities)
        temp_file = target_path.with_name(target_path.name + ".famixparse.tmp")
        try:
            temp_file.write_text(content, encoding='utf-8')
            os.replace(temp_file, target_path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise IOError(f"Export to {target_path} failed: {e}") from e

        logger.info(f"Exported entities to {target_path}")
        return target_path
