from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


# PUBLIC_INTERFACE
@dataclass
class FlashMessages:
    """
    One-shot notifications shown on the next rendered page.

    A message set by a write is read exactly once by ``consume`` and cleared
    at the same time.
    """

    error: Optional[str] = None
    success: Optional[str] = None

    def set_error(self, message: str) -> None:
        self.error = message

    def set_success(self, message: str) -> None:
        self.success = message

    def peek(self) -> Dict[str, Optional[str]]:
        return {"error": self.error, "success": self.success}

    def consume(self) -> Dict[str, Optional[str]]:
        """Return the pending messages and clear them."""
        messages = self.peek()
        self.error = None
        self.success = None
        return messages
