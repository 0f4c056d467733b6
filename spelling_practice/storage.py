"""Named-slot storage for persisted state.

Each slot is a single JSON file inside the data directory. Writes replace
the whole slot; there is no partial update.
"""

from pathlib import Path

from loguru import logger


class SlotStorage:
    """File-backed key/value storage, one file per named slot."""

    SUFFIX = ".json"

    def __init__(self, data_dir: str | Path):
        """Initialize the storage.

        Args:
            data_dir: Directory holding the slot files. Created on first write.
        """
        self.data_dir = Path(data_dir)

    def path_for(self, slot: str) -> Path:
        """Return the file path backing a slot.

        Raises:
            ValueError: If slot is empty or whitespace
        """
        if not slot or not slot.strip():
            msg = "slot name cannot be empty"
            raise ValueError(msg)
        return self.data_dir / f"{slot.strip()}{self.SUFFIX}"

    def read(self, slot: str) -> bytes | None:
        """Read the raw payload of a slot.

        Returns:
            The stored bytes, or None if the slot has never been written
        """
        path = self.path_for(slot)
        if not path.is_file():
            logger.debug(f"Slot '{slot}' not found at {path}")
            return None

        payload = path.read_bytes()
        logger.debug(f"Read {len(payload)} bytes from slot '{slot}'")
        return payload

    def write(self, slot: str, payload: bytes) -> None:
        """Overwrite a slot with a new payload."""
        path = self.path_for(slot)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        logger.debug(f"Wrote {len(payload)} bytes to slot '{slot}' at {path}")
