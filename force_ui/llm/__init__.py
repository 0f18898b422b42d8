from .enhancer import IntentEnhancer

__all__ = ["IntentEnhancer"]
