"""
Generation of the opaque handles handed out to callers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..common.utils import generate_secure_handle
from ..core.config import StoreConfig


class HandleGenerationService(ABC):
    """Produces a fresh, unguessable handle per call."""

    @abstractmethod
    async def generate(self) -> str:
        """Generate a new handle."""
        pass


class DefaultHandleGenerationService(HandleGenerationService):
    """Generates random upper-case hex handles."""

    def __init__(self, length: int = 32):
        """
        Args:
            length: Number of random bytes per handle
        """
        if length <= 0:
            raise ValueError("Handle length must be positive")
        self.length = length

    async def generate(self) -> str:
        return generate_secure_handle(self.length)


def create_handle_generation_service(config: Optional[StoreConfig] = None) -> HandleGenerationService:
    """
    Create the handle generation service described by a store configuration.

    Args:
        config: Store configuration, defaults to ``StoreConfig()``

    Returns:
        DefaultHandleGenerationService producing ``config.handle_length`` random bytes
    """
    if config is None:
        config = StoreConfig()
    config.validate()

    return DefaultHandleGenerationService(config.handle_length)
