from passgate.application.commands.auth.login_use_case import LoginUseCase
from passgate.application.commands.auth.register_use_case import RegisterUseCase

__all__ = ["LoginUseCase", "RegisterUseCase"]
