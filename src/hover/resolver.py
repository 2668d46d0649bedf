# src/hover/resolver.py — v1
"""Hover resolution: identifier -> metadata -> assigned value -> screenshot.

Usage:
    resolver = HoverResolver(workspace_root=Path("."))
    payload = resolver.resolve(document, Position(line=3, character=8))

Each stage short-circuits the chain. ``resolve_outcome`` reports which stage
stopped it; ``resolve`` only returns the payload.
"""

from __future__ import annotations

import logging
from pathlib import Path

from xlhover.cache.cache_factory import create_cache
from xlhover.cache.ttl_cache import Clock
from xlhover.config.settings import Settings
from xlhover.core.models import (
    HoverPayload,
    LanguageMode,
    Position,
    ResolutionOutcome,
    SelectorDescriptor,
    TextDocument,
)
from xlhover.extraction.identifier import identifier_at
from xlhover.extraction.language import language_mode_for
from xlhover.index.document_index import DocumentAssignmentIndex, scan_for_assignment
from xlhover.logging.context import (
    clear_context,
    set_document_context,
    set_identifier_context,
)
from xlhover.metadata.layout import metadata_path, photo_path
from xlhover.metadata.store import MetadataStore

logger = logging.getLogger(__name__)


class HoverResolver:
    """Decide whether a cursor position gets a screenshot hover card.

    Owns the metadata and assignment caches; pass ``clock`` to control cache
    freshness in tests.
    """

    def __init__(
        self,
        workspace_root: Path | None = None,
        settings: Settings | None = None,
        metadata_store: MetadataStore | None = None,
        assignment_index: DocumentAssignmentIndex | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self.workspace_root = workspace_root
        self._metadata = metadata_store or MetadataStore(
            create_cache(self._settings, clock=clock, name="metadata")
        )
        self._index = assignment_index or DocumentAssignmentIndex(
            create_cache(self._settings, clock=clock, name="assignment index")
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def metadata_store(self) -> MetadataStore:
        return self._metadata

    @property
    def assignment_index(self) -> DocumentAssignmentIndex:
        return self._index

    def resolve(self, document: TextDocument, position: Position) -> HoverPayload | None:
        """Return the hover payload for position, or None."""
        return self.resolve_outcome(document, position).payload

    def resolve_outcome(
        self, document: TextDocument, position: Position
    ) -> ResolutionOutcome:
        """Run the resolution chain and report where it stopped."""
        set_document_context(document.key)
        try:
            outcome = self._resolve(document, position)
        except Exception as e:
            logger.exception("Hover resolution failed")
            outcome = ResolutionOutcome(status="error", detail=str(e))
        finally:
            clear_context()
        return outcome

    def _resolve(self, document: TextDocument, position: Position) -> ResolutionOutcome:
        mode = language_mode_for(document.language_id, self._settings)
        if mode is None:
            return ResolutionOutcome(
                status="unsupported_language",
                detail=f"unsupported language {document.language_id!r}",
            )

        line_text = document.line_at(position.line)
        identifier = identifier_at(line_text, position.character, mode)
        if identifier is None:
            return ResolutionOutcome(status="no_identifier")
        set_identifier_context(identifier)

        if self.workspace_root is None:
            return ResolutionOutcome(status="no_workspace", identifier=identifier)

        meta_path = metadata_path(self.workspace_root, self._settings)
        if not meta_path.is_file():
            return ResolutionOutcome(
                status="no_metadata_file", identifier=identifier, detail=str(meta_path)
            )

        table = self._metadata.load(meta_path)
        if table is None:
            return ResolutionOutcome(status="metadata_unavailable", identifier=identifier)

        descriptor = table.get(identifier)
        if descriptor is None:
            return ResolutionOutcome(status="unknown_identifier", identifier=identifier)

        value = self._actual_value(document, identifier, mode, position.line)
        if value is None:
            return ResolutionOutcome(status="no_assignment", identifier=identifier)

        if not descriptor.matches(value):
            logger.debug("Value %r matches neither xpath nor css", value)
            return ResolutionOutcome(
                status="value_mismatch", identifier=identifier, value=value
            )

        if not descriptor.photo:
            return ResolutionOutcome(status="no_photo", identifier=identifier, value=value)
        image = photo_path(self.workspace_root, descriptor.photo, self._settings)
        if not image.is_file():
            return ResolutionOutcome(
                status="no_photo", identifier=identifier, value=value, detail=str(image)
            )

        return ResolutionOutcome(
            status="shown",
            identifier=identifier,
            value=value,
            payload=_build_payload(identifier, value, image, descriptor),
        )

    def _actual_value(
        self,
        document: TextDocument,
        identifier: str,
        mode: LanguageMode,
        line: int,
    ) -> str | None:
        if self._settings.resolution_strategy == "scan":
            return scan_for_assignment(document, identifier, mode, current_line=line)
        return self._index.lookup(document, identifier, mode)


def _build_payload(
    identifier: str, value: str, image: Path, descriptor: SelectorDescriptor
) -> HoverPayload:
    return HoverPayload(
        identifier=identifier,
        value=value,
        image_path=image,
        tag=descriptor.tag,
        text=descriptor.text or None,
        xpath=descriptor.xpath or None,
        css=descriptor.css or None,
    )
