"""Application commands (state-changing use cases)."""

from passgate.application.commands.auth import LoginUseCase, RegisterUseCase

__all__ = ["LoginUseCase", "RegisterUseCase"]
