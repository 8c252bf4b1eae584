"""
Editor state: ordered block list with ephemeral ids.

Python counterpart of sitebuilder/app/static/editor-state.js. Pure data,
no DOM and no I/O; the browser editor and the HTTP client drive it.

UI-only fields (id, preview) never leave the editor: to_payload() strips them.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any

from sitebuilder.domain.constants import BLOCK_HEADING, BLOCK_IMAGE, BLOCK_PARAGRAPH

DEFAULT_HEADING_TEXT = "New heading"
DEFAULT_PARAGRAPH_TEXT = "New paragraph"


def new_block_id() -> str:
    return uuid.uuid4().hex[:7]


@dataclass
class EditorBlock:
    """One block as the editor holds it."""
    type: str
    id: str = field(default_factory=new_block_id)
    text: str = ""
    filename: str = ""
    alt: str = ""
    preview: str | None = None  # data URL, display only

    def to_payload(self) -> dict[str, Any]:
        """Wire representation (no id, no preview)."""
        if self.type == BLOCK_IMAGE:
            return {"type": BLOCK_IMAGE, "filename": self.filename, "alt": self.alt or ""}
        return {"type": self.type, "text": (self.text or "").strip()}


@dataclass
class EditorState:
    """
    In-memory editor state.

    Usage:
        state = EditorState()
        hid = state.add_heading("Hello")
        state.add_paragraph("World")
        state.move(hid, +1)
        payload = state.to_payload()
    """
    blocks: list[EditorBlock] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Append
    # -------------------------------------------------------------------------

    def _append(self, block: EditorBlock) -> str:
        self.blocks.append(block)
        return block.id

    def add_heading(self, text: str = DEFAULT_HEADING_TEXT) -> str:
        return self._append(EditorBlock(type=BLOCK_HEADING, text=text))

    def add_paragraph(self, text: str = DEFAULT_PARAGRAPH_TEXT) -> str:
        return self._append(EditorBlock(type=BLOCK_PARAGRAPH, text=text))

    def add_image(self, filename: str, alt: str = "", preview: str | None = None) -> str:
        """
        Append an image block.

        Call only after the upload succeeded: filename is the server's
        name, preview the local data URL; both live on the same record.
        """
        return self._append(
            EditorBlock(type=BLOCK_IMAGE, filename=filename, alt=alt, preview=preview)
        )

    # -------------------------------------------------------------------------
    # Lookup / edit
    # -------------------------------------------------------------------------

    def index_of(self, block_id: str) -> int:
        """Position of block_id, -1 when absent."""
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        return -1

    def get(self, block_id: str) -> EditorBlock | None:
        i = self.index_of(block_id)
        return self.blocks[i] if i >= 0 else None

    def set_text(self, block_id: str, text: str) -> None:
        block = self.get(block_id)
        if block is not None and block.type != BLOCK_IMAGE:
            block.text = text

    def set_alt(self, block_id: str, alt: str) -> None:
        block = self.get(block_id)
        if block is not None and block.type == BLOCK_IMAGE:
            block.alt = alt

    def remove(self, block_id: str) -> None:
        self.blocks = [b for b in self.blocks if b.id != block_id]

    # -------------------------------------------------------------------------
    # Reorder
    # -------------------------------------------------------------------------

    def move(self, block_id: str, step: int) -> None:
        """Swap with the neighbour `step` positions away (↑ = -1, ↓ = +1)."""
        i = self.index_of(block_id)
        j = i + step
        if i < 0 or j < 0 or j >= len(self.blocks):
            return
        self.blocks[i], self.blocks[j] = self.blocks[j], self.blocks[i]

    def reorder(self, from_id: str, to_id: str) -> None:
        """Drag-and-drop: take from_id out, insert it at to_id's position."""
        if from_id == to_id:
            return
        from_idx = self.index_of(from_id)
        to_idx = self.index_of(to_id)
        if from_idx < 0 or to_idx < 0:
            return
        item = self.blocks.pop(from_idx)
        self.blocks.insert(to_idx, item)

    # -------------------------------------------------------------------------
    # Submit
    # -------------------------------------------------------------------------

    def to_payload(self) -> list[dict[str, Any]]:
        """Blocks for POST /api/create-site, in order."""
        return [
            b.to_payload()
            for b in self.blocks
            if b.type in (BLOCK_HEADING, BLOCK_PARAGRAPH, BLOCK_IMAGE)
        ]
