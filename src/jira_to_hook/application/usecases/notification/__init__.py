from .notify_transition_usecase import NotifyTransitionUseCase

__all__ = ["NotifyTransitionUseCase"]
